"""Shared fixtures for the CommentLens test suite."""

import pytest
from unittest.mock import Mock

from commentlens.core.models import Comment, Prediction


@pytest.fixture
def comments():
    return [
        Comment(text="Great video, thanks!", timestamp="2024-05-01T10:00:00Z", author_id="A"),
        Comment(text="I  did not   like it", timestamp="2024-05-01T11:00:00Z", author_id="A"),
        Comment(text="meh", timestamp="2024-05-02T09:30:00Z", author_id="B"),
        Comment(text="Best explanation of this topic so far", timestamp="2024-05-03T08:00:00Z", author_id="Unknown"),
    ]


@pytest.fixture
def predictions(comments):
    labels = [1, -1, 0, 1]
    return [
        Prediction(comment=c.text, sentiment=s, timestamp=c.timestamp)
        for c, s in zip(comments, labels)
    ]


def make_response(status=200, json_data=None, content=b"", headers=None):
    """Build a requests.Response look-alike."""
    response = Mock()
    response.status_code = status
    response.ok = 200 <= status < 400
    response.content = content
    response.headers = headers or {}
    response.json.return_value = json_data
    return response
