"""Marketing framework chunking and prompt-context helpers."""

from .chunker import chunk_text
from .context import build_framework_context, filter_by_purpose, format_frameworks_for_prompt, rank_frameworks
from .placeholders import fill_framework_placeholders

__all__ = [
    "chunk_text",
    "build_framework_context",
    "filter_by_purpose",
    "format_frameworks_for_prompt",
    "rank_frameworks",
    "fill_framework_placeholders",
]
