"""Streamlit front end for CommentLens."""
