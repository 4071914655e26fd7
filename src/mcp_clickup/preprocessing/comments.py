"""ClickUp structured comment preprocessing."""

import logging
from collections.abc import Iterable
from typing import Any

from ..models.clickup.comment import CommentBlock

logger = logging.getLogger("mcp-clickup")


def _as_block(block: CommentBlock | dict[str, Any]) -> CommentBlock:
    if isinstance(block, CommentBlock):
        return block
    return CommentBlock.from_api_response(block)


def _needs_separator(previous: CommentBlock, current: CommentBlock) -> bool:
    if previous.is_separator or current.is_separator:
        return False
    previous_language = previous.code_language
    current_language = current.code_language
    if previous_language is None and current_language is None:
        return False
    return previous_language != current_language


def normalize_comment_blocks(
    blocks: Iterable[CommentBlock | dict[str, Any]],
) -> list[CommentBlock]:
    """
    Keep code blocks of different languages from merging when ClickUp renders them.

    ClickUp joins adjacent code-block blocks into one code block, so an empty
    separator block is inserted between two neighbours when at least one of
    them is a code block and their languages differ. Blocks are never
    reordered or modified, and normalizing twice gives the same result.

    Args:
        blocks: The comment blocks in display order

    Returns:
        The blocks with separators inserted
    """
    result: list[CommentBlock] = []
    inserted = 0
    for block in blocks:
        current = _as_block(block)
        if result and _needs_separator(result[-1], current):
            result.append(CommentBlock())
            inserted += 1
        result.append(current)

    if inserted:
        logger.debug(f"Inserted {inserted} separator blocks between code blocks")
    return result


def _wrap(text: str, marker: str, closing: str | None = None) -> str:
    # Markdown emphasis must hug the text, so surrounding whitespace stays outside
    core = text.strip()
    if not core:
        return text
    leading = text[: len(text) - len(text.lstrip())]
    trailing = text[len(text.rstrip()) :]
    return f"{leading}{marker}{core}{closing if closing is not None else marker}{trailing}"


def _inline_markdown(block: CommentBlock) -> str:
    text = block.text
    attributes = block.attributes
    if attributes is None or not text:
        return text
    if attributes.code:
        text = _wrap(text, "`")
    if attributes.bold:
        text = _wrap(text, "**")
    if attributes.italic:
        text = _wrap(text, "*")
    if attributes.strikethrough:
        text = _wrap(text, "~~")
    if attributes.link is not None:
        text = _wrap(text, "[", f"]({attributes.link.url})")
    return text


def blocks_to_markdown(blocks: Iterable[CommentBlock | dict[str, Any]]) -> str:
    """
    Render structured comment blocks as Markdown.

    Adjacent code-block blocks of the same language become one fenced code
    block; other blocks are rendered inline with their formatting.

    Args:
        blocks: The comment blocks as returned by ClickUp

    Returns:
        The Markdown text
    """
    parts: list[str] = []
    code_language: str | None = None
    code_lines: list[str] = []

    def flush_code() -> None:
        if code_language is None:
            return
        if parts and not parts[-1].endswith("\n"):
            parts.append("\n")
        fence = "```" if code_language == "plain" else f"```{code_language}"
        body = "\n".join(code_lines)
        parts.append(f"{fence}\n{body}\n```\n")

    for block in blocks:
        current = _as_block(block)
        language = current.code_language
        if language is not None and language == code_language:
            code_lines.append(current.text.rstrip("\n"))
            continue

        flush_code()
        code_language = language
        code_lines = []
        if language is not None:
            code_lines.append(current.text.rstrip("\n"))
        elif not current.is_separator:
            parts.append(_inline_markdown(current))

    flush_code()
    return "".join(parts).strip("\n")
