"""Preprocessing modules for converting ClickUp content between formats."""

from .comments import blocks_to_markdown, normalize_comment_blocks
from .markdown import create_markdown_preview

__all__ = [
    "blocks_to_markdown",
    "create_markdown_preview",
    "normalize_comment_blocks",
]
