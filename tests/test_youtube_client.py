"""Tests for the YouTube comment fetcher."""

import pytest
from unittest.mock import Mock, patch
from googleapiclient.errors import HttpError

from commentlens.services.youtube_client import YouTubeCommentService, parse_comment_item


def _item(text, author="UCauthor", published="2024-05-01T10:00:00Z"):
    snippet = {"textOriginal": text, "publishedAt": published}
    if author is not None:
        snippet["authorChannelId"] = {"value": author}
    return {"snippet": {"topLevelComment": {"snippet": snippet}}}


def _page(count, next_token=None, prefix="c"):
    page = {"items": [_item(f"{prefix}{i}", author=f"A{i % 7}") for i in range(count)]}
    if next_token:
        page["nextPageToken"] = next_token
    return page


def _client(pages):
    client = Mock()
    client.commentThreads.return_value.list.return_value.execute.side_effect = pages
    return client


class TestCommentParsing:
    """Normalization of commentThreads items."""
    
    def test_parse_full_item(self):
        comment = parse_comment_item(_item("hello", author="UC1", published="2024-01-02T03:04:05Z"))
        assert comment.text == "hello"
        assert comment.timestamp == "2024-01-02T03:04:05Z"
        assert comment.author_id == "UC1"
    
    def test_missing_author_maps_to_unknown(self):
        assert parse_comment_item(_item("hi", author=None)).author_id == "Unknown"


class TestFetchComments:
    """Pagination, capping and failure handling."""
    
    def test_stops_when_no_next_page_token(self):
        client = _client([_page(100, "p2"), _page(30)])
        service = YouTubeCommentService(client=client)
        
        result = service.fetch_comments("dQw4w9WgXcQ", cap=500)
        
        assert len(result.comments) == 130
        assert not result.failed
        assert client.commentThreads.return_value.list.return_value.execute.call_count == 2
    
    def test_single_page_without_token_is_final(self):
        client = _client([_page(3)])
        result = YouTubeCommentService(client=client).fetch_comments("dQw4w9WgXcQ", cap=500)
        assert [c.text for c in result.comments] == ["c0", "c1", "c2"]
    
    def test_never_exceeds_cap(self):
        client = _client([_page(100, "p2"), _page(100, "p3"), _page(100, "p4")])
        result = YouTubeCommentService(client=client).fetch_comments("dQw4w9WgXcQ", cap=250)
        
        assert len(result.comments) == 250
        assert client.commentThreads.return_value.list.return_value.execute.call_count == 3
    
    def test_cap_reached_on_page_boundary_stops_requests(self):
        client = _client([_page(100, "p2"), _page(100, "p3"), _page(100)])
        result = YouTubeCommentService(client=client).fetch_comments("dQw4w9WgXcQ", cap=200)
        
        assert len(result.comments) == 200
        assert client.commentThreads.return_value.list.return_value.execute.call_count == 2
    
    def test_request_parameters(self):
        client = _client([_page(1, "tok"), _page(1)])
        YouTubeCommentService(client=client).fetch_comments("dQw4w9WgXcQ", cap=500)
        
        calls = client.commentThreads.return_value.list.call_args_list
        assert calls[0].kwargs["part"] == "snippet"
        assert calls[0].kwargs["videoId"] == "dQw4w9WgXcQ"
        assert calls[0].kwargs["maxResults"] == 100
        assert calls[0].kwargs["pageToken"] is None
        assert calls[1].kwargs["pageToken"] == "tok"
    
    def test_zero_comments_is_not_a_failure(self):
        result = YouTubeCommentService(client=_client([{"items": []}])).fetch_comments("dQw4w9WgXcQ")
        assert result.is_empty
        assert not result.failed
    
    def test_http_error_keeps_collected_comments(self):
        error = HttpError(Mock(status=403, reason="Forbidden"), b'{"error": {"message": "quota"}}')
        client = _client([_page(100, "p2"), error])
        
        result = YouTubeCommentService(client=client).fetch_comments("dQw4w9WgXcQ", cap=500)
        
        assert result.failed
        assert len(result.comments) == 100
    
    def test_network_error_on_first_page(self):
        client = _client([ConnectionError("connection reset")])
        result = YouTubeCommentService(client=client).fetch_comments("dQw4w9WgXcQ")
        
        assert result.failed
        assert result.is_empty
        assert "connection reset" in result.error
    
    def test_without_client_reports_missing_key(self):
        with patch('commentlens.services.youtube_client.build') as mock_build:
            service = YouTubeCommentService(api_key="")
            result = service.fetch_comments("dQw4w9WgXcQ")
        
        mock_build.assert_not_called()
        assert result.failed
        assert result.is_empty


@patch('commentlens.services.youtube_client.build')
def test_youtube_initialization_with_key(mock_build):
    """The API client is built with the developer key."""
    mock_build.return_value = Mock()
    service = YouTubeCommentService(api_key="test_key")
    assert service.youtube is not None
    mock_build.assert_called_once_with("youtube", "v3", developerKey="test_key")


if __name__ == "__main__":
    pytest.main([__file__])
