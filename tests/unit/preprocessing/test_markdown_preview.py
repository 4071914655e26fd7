"""Tests for the plain-text Markdown preview."""

from mcp_clickup.preprocessing import create_markdown_preview


def test_title_and_rule():
    lines = create_markdown_preview("", title="Notes").splitlines()
    assert lines == ["📝 Notes", "═" * 40]


def test_headings():
    preview = create_markdown_preview("# Release\n## Details")
    lines = preview.splitlines()

    assert lines[2] == "📌 Release"
    assert lines[3] == "─" * len("Release")
    assert lines[4] == "📌 Details"


def test_lists_tasks_and_quotes():
    markdown = "- item\n  * nested\n- [ ] todo\n- [x] done\n> quoted"
    lines = create_markdown_preview(markdown).splitlines()[2:]

    assert lines == ["• item", "  • nested", "☐ todo", "☑ done", "│ quoted"]


def test_code_fence():
    markdown = "```python\nprint('hi')\n# not a heading\n```\nafter"
    lines = create_markdown_preview(markdown).splitlines()[2:]

    assert lines == [
        "💻 python",
        "    print('hi')",
        "    # not a heading",
        "    " + "─" * 36,
        "after",
    ]


def test_horizontal_rule():
    lines = create_markdown_preview("---").splitlines()
    assert lines[2] == "─" * 40


def test_inline_links_and_emphasis():
    lines = create_markdown_preview("See **the** [docs](https://example.com)").splitlines()
    assert lines[2] == "See the docs (https://example.com)"


def test_without_emojis():
    markdown = "# Title\n```\ncode\n```"
    lines = create_markdown_preview(markdown, title="Plain", use_emojis=False).splitlines()

    assert lines[0] == "Plain"
    assert lines[2] == "# Title"
    assert lines[4] == "Code"


def test_unterminated_fence():
    lines = create_markdown_preview("```bash\nls").splitlines()[2:]
    assert lines == ["💻 bash", "    ls"]
