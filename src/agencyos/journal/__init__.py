"""Journal capture helpers: mentions, tags, highlighting and grouping."""

from .grouping import group_by_recency
from .mentions import extract_mentions, find_highlights, highlight, render_highlights

__all__ = ["extract_mentions", "find_highlights", "highlight", "render_highlights", "group_by_recency"]
