"""Plain-text previews of Markdown content."""

import logging
import re

logger = logging.getLogger("mcp-clickup")

RULE_WIDTH = 40

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
TASK_PATTERN = re.compile(r"^(\s*)[-*+]\s+\[([ xX])\]\s+(.*)$")
BULLET_PATTERN = re.compile(r"^(\s*)[-*+]\s+(.*)$")
QUOTE_PATTERN = re.compile(r"^\s*>\s?(.*)$")
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)\s*([\w+#.-]*)\s*$")
RULE_PATTERN = re.compile(r"^\s*([-*_])(\s*\1){2,}\s*$")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")
EMPHASIS_PATTERN = re.compile(r"(\*\*|__)(.+?)\1")


def _inline(text: str) -> str:
    text = LINK_PATTERN.sub(r"\1 (\2)", text)
    return EMPHASIS_PATTERN.sub(r"\2", text)


def create_markdown_preview(
    markdown: str, title: str = "Preview", use_emojis: bool = True
) -> str:
    """
    Render Markdown as a readable plain-text preview.

    Headings, bullet lists, task checkboxes, block quotes and fenced code are
    given visual markers; everything else is kept line by line.

    Args:
        markdown: The Markdown text
        title: Title printed above the preview
        use_emojis: Whether to use emoji markers

    Returns:
        The preview text
    """
    heading_marker = "📌 " if use_emojis else "# "
    code_marker = "💻" if use_emojis else "Code"
    title_marker = "📝 " if use_emojis else ""

    lines = [f"{title_marker}{title}", "═" * RULE_WIDTH]
    in_code = False
    fence = ""

    for line in (markdown or "").splitlines():
        fence_match = FENCE_PATTERN.match(line)
        if in_code:
            if fence_match and fence_match.group(1) == fence and not fence_match.group(2):
                in_code = False
                lines.append("    " + "─" * (RULE_WIDTH - 4))
            else:
                lines.append(f"    {line}")
            continue

        if fence_match:
            in_code = True
            fence = fence_match.group(1)
            language = fence_match.group(2)
            lines.append(f"{code_marker} {language}" if language else code_marker)
            continue

        heading_match = HEADING_PATTERN.match(line)
        if heading_match:
            text = _inline(heading_match.group(2))
            lines.append(f"{heading_marker}{text}")
            if len(heading_match.group(1)) == 1:
                lines.append("─" * max(len(text), 3))
            continue

        task_match = TASK_PATTERN.match(line)
        if task_match:
            indent, state, text = task_match.groups()
            box = "☐" if state == " " else "☑"
            lines.append(f"{indent}{box} {_inline(text)}")
            continue

        if RULE_PATTERN.match(line):
            lines.append("─" * RULE_WIDTH)
            continue

        bullet_match = BULLET_PATTERN.match(line)
        if bullet_match:
            indent, text = bullet_match.groups()
            lines.append(f"{indent}• {_inline(text)}")
            continue

        quote_match = QUOTE_PATTERN.match(line)
        if quote_match:
            lines.append(f"│ {_inline(quote_match.group(1))}")
            continue

        lines.append(_inline(line))

    if in_code:
        logger.debug("Markdown preview ended inside an unterminated code fence")

    return "\n".join(lines)
