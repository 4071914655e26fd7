"""ClickUp comment and markdown preview tools."""

import json
import logging
from typing import Annotated

from fastmcp import Context
from pydantic import Field

from mcp_clickup.models.clickup import CommentBlock
from mcp_clickup.preprocessing import create_markdown_preview as render_markdown_preview
from mcp_clickup.servers.clickup import clickup_mcp
from mcp_clickup.servers.dependencies import get_clickup_fetcher
from mcp_clickup.utils.decorators import check_write_access

logger = logging.getLogger(__name__)


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_task_comments(
    ctx: Context,
    task_id: Annotated[str, Field(description="The ID of the task to get comments for")],
    limit: Annotated[
        int | None,
        Field(
            description="Maximum number of comments to return (default: all). Use 5-10 for summaries.",
            default=None,
            ge=1,
        ),
    ] = None,
    start: Annotated[
        int | None, Field(description="Pagination start (timestamp)", default=None)
    ] = None,
    start_id: Annotated[
        str | None, Field(description="Pagination start ID", default=None)
    ] = None,
) -> str:
    """Get comments for a ClickUp task.

    Each comment carries its text rendered as Markdown (`comment_markdown`)
    and a readable `styled_preview`.

    Args:
        ctx: The FastMCP context.
        task_id: The task ID.
        limit: Maximum number of comments to return.
        start: Pagination start timestamp.
        start_id: Pagination start comment ID.

    Returns:
        JSON string with the comments.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_task_comments(
        task_id, limit=limit, start=start, start_id=start_id
    )
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_task_comment(
    ctx: Context,
    task_id: Annotated[str, Field(description="The ID of the task to comment on")],
    comment: Annotated[
        list[CommentBlock],
        Field(
            description=(
                "Array of comment blocks with text and formatting. Use the "
                "'code-block' attribute ({'code-block': {'code-block': 'python'}}) "
                "for multi-line code with syntax highlighting."
            ),
        ),
    ],
    assignee: Annotated[
        int | None,
        Field(description="The ID of the user to assign to the comment", default=None),
    ] = None,
    notify_all: Annotated[
        bool, Field(description="Whether to notify all assignees", default=False)
    ] = False,
) -> str:
    """Create a new comment on a ClickUp task using structured blocks.

    Args:
        ctx: The FastMCP context.
        task_id: The task ID.
        comment: The comment blocks.
        assignee: Optional assignee user ID.
        notify_all: Whether to notify all assignees.

    Returns:
        JSON string with the created comment ID.

    Raises:
        ValueError: If in read-only mode or ClickUp client is unavailable.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.create_task_comment(
        task_id, comment, assignee=assignee, notify_all=notify_all
    )
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_list_comments(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to get comments for")],
    start: Annotated[
        int | None, Field(description="Pagination start (timestamp)", default=None)
    ] = None,
    start_id: Annotated[
        str | None, Field(description="Pagination start ID", default=None)
    ] = None,
) -> str:
    """Get comments for a ClickUp list.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.
        start: Pagination start timestamp.
        start_id: Pagination start comment ID.

    Returns:
        JSON string with the comments.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_list_comments(list_id, start=start, start_id=start_id)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_list_comment(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to comment on")],
    comment_text: Annotated[
        str, Field(description="The text content of the comment")
    ],
    assignee: Annotated[
        int | None,
        Field(description="The ID of the user to assign to the comment", default=None),
    ] = None,
    notify_all: Annotated[
        bool, Field(description="Whether to notify all assignees", default=False)
    ] = False,
) -> str:
    """Create a new comment on a ClickUp list.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.
        comment_text: The comment text.
        assignee: Optional assignee user ID.
        notify_all: Whether to notify all list members.

    Returns:
        JSON string with the created comment ID.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.create_list_comment(
        list_id, comment_text, assignee=assignee, notify_all=notify_all
    )
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def update_comment(
    ctx: Context,
    comment_id: Annotated[str, Field(description="The ID of the comment to update")],
    comment_text: Annotated[
        str, Field(description="The new text content of the comment")
    ],
    assignee: Annotated[
        int | None,
        Field(description="The ID of the user to assign to the comment", default=None),
    ] = None,
    resolved: Annotated[
        bool | None, Field(description="Whether the comment is resolved", default=None)
    ] = None,
) -> str:
    """Update an existing ClickUp comment's text, assignee or resolved state.

    Args:
        ctx: The FastMCP context.
        comment_id: The comment ID.
        comment_text: The new comment text.
        assignee: Optional assignee user ID.
        resolved: Optional resolved state.

    Returns:
        JSON string indicating success.
    """
    fetcher = await get_clickup_fetcher(ctx)
    fetcher.update_comment(
        comment_id, comment_text, assignee=assignee, resolved=resolved
    )
    return json.dumps(
        {"success": True, "message": f"Comment {comment_id} updated successfully"},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def delete_comment(
    ctx: Context,
    comment_id: Annotated[str, Field(description="The ID of the comment to delete")],
) -> str:
    """Delete a comment from ClickUp.

    Args:
        ctx: The FastMCP context.
        comment_id: The comment ID.

    Returns:
        JSON string indicating success.
    """
    fetcher = await get_clickup_fetcher(ctx)
    fetcher.delete_comment(comment_id)
    return json.dumps(
        {"success": True, "message": f"Comment {comment_id} deleted successfully"},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_threaded_comments(
    ctx: Context,
    comment_id: Annotated[str, Field(description="The ID of the parent comment")],
    start: Annotated[
        int | None, Field(description="Pagination start (timestamp)", default=None)
    ] = None,
    start_id: Annotated[
        str | None, Field(description="Pagination start ID", default=None)
    ] = None,
) -> str:
    """Get threaded comments (replies) of a parent comment.

    Args:
        ctx: The FastMCP context.
        comment_id: The parent comment ID.
        start: Pagination start timestamp.
        start_id: Pagination start comment ID.

    Returns:
        JSON string with the replies.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_threaded_comments(comment_id, start=start, start_id=start_id)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_threaded_comment(
    ctx: Context,
    comment_id: Annotated[str, Field(description="The ID of the parent comment")],
    comment_text: Annotated[
        str, Field(description="The text content of the reply")
    ],
    notify_all: Annotated[
        bool, Field(description="Whether to notify all assignees", default=False)
    ] = False,
) -> str:
    """Reply to a ClickUp comment.

    Args:
        ctx: The FastMCP context.
        comment_id: The parent comment ID.
        comment_text: The reply text.
        notify_all: Whether to notify all assignees.

    Returns:
        JSON string with the created reply ID.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.create_threaded_comment(
        comment_id, comment_text, notify_all=notify_all
    )
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "read"})
async def create_markdown_preview(
    markdown: Annotated[str, Field(description="The Markdown text to preview")],
    title: Annotated[
        str, Field(description="Title shown above the preview", default="Preview")
    ] = "Preview",
    use_emojis: Annotated[
        bool, Field(description="Whether to use emoji markers", default=True)
    ] = True,
) -> str:
    """Render Markdown as a readable plain-text preview.

    Headings, lists, task checkboxes, quotes and fenced code blocks get
    visual markers. No ClickUp request is made.

    Args:
        markdown: The Markdown text.
        title: The preview title.
        use_emojis: Whether to use emoji markers.

    Returns:
        The preview text.
    """
    return render_markdown_preview(markdown, title=title, use_emojis=use_emojis)
