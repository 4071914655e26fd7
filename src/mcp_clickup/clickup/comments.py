"""Module for ClickUp comment operations."""

import logging
from collections.abc import Sequence
from typing import Any

from ..models.clickup import CommentBlock
from ..preprocessing import (
    blocks_to_markdown,
    create_markdown_preview,
    normalize_comment_blocks,
)
from .client import ClickUpClient

logger = logging.getLogger("mcp-clickup")


class CommentsMixin(ClickUpClient):
    """Mixin for ClickUp comment operations."""

    def _comment_markdown(self, comment: dict[str, Any]) -> str:
        blocks = comment.get("comment")
        if isinstance(blocks, list) and blocks:
            return blocks_to_markdown(blocks)
        return str(comment.get("comment_text") or "")

    def _style_comments(self, result: dict[str, Any]) -> dict[str, Any]:
        """
        Add `comment_markdown` and a `styled_preview` to every comment.

        Styling is best effort: on failure the comments are returned as
        ClickUp sent them.
        """
        comments = result.get("comments")
        if not isinstance(comments, list):
            return result
        try:
            styled = []
            for index, comment in enumerate(comments, start=1):
                if not isinstance(comment, dict):
                    styled.append(comment)
                    continue
                markdown = self._comment_markdown(comment)
                styled.append(
                    {
                        **comment,
                        "comment_markdown": markdown,
                        "styled_preview": create_markdown_preview(
                            markdown, title=f"Comment {index}"
                        ),
                    }
                )
        except Exception as e:  # noqa: BLE001 - Intentional fallback with logging
            logger.warning(f"Failed to apply markdown styling to comments: {str(e)}")
            return result
        return {**result, "comments": styled}

    def get_task_comments(
        self,
        task_id: str,
        limit: int | None = None,
        start: int | None = None,
        start_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Get the comments of a task.

        Args:
            task_id: The task ID
            limit: Maximum number of comments to return
            start: Pagination start (timestamp of the oldest comment seen)
            start_id: Pagination start (ID of the oldest comment seen)

        Returns:
            The ClickUp response, each comment with `comment_markdown` and
            `styled_preview`
        """
        result = self.get(
            f"/task/{task_id}/comment", params={"start": start, "start_id": start_id}
        )
        comments = result.get("comments")
        if limit and isinstance(comments, list):
            result = {**result, "comments": comments[:limit]}
        return self._style_comments(result)

    def create_task_comment(
        self,
        task_id: str,
        comment: Sequence[CommentBlock | dict[str, Any]],
        assignee: int | None = None,
        notify_all: bool = False,
    ) -> dict[str, Any]:
        """
        Create a structured comment on a task.

        Code blocks of different languages are separated before posting so
        ClickUp does not merge them.

        Args:
            task_id: The task ID
            comment: The comment blocks
            assignee: User ID to assign the comment to
            notify_all: Whether to notify all assignees

        Returns:
            The ClickUp response with the new comment ID
        """
        blocks = normalize_comment_blocks(comment)
        payload: dict[str, Any] = {
            "notify_all": notify_all,
            "comment": [block.to_simplified_dict() for block in blocks],
        }
        if assignee is not None:
            payload["assignee"] = assignee
        logger.debug(f"Posting comment with {len(blocks)} blocks to task {task_id}")
        return self.post(f"/task/{task_id}/comment", json=payload)

    def get_list_comments(
        self, list_id: str, start: int | None = None, start_id: str | None = None
    ) -> dict[str, Any]:
        """Get the comments of a list."""
        return self.get(
            f"/list/{list_id}/comment", params={"start": start, "start_id": start_id}
        )

    def create_list_comment(
        self,
        list_id: str,
        comment_text: str,
        assignee: int | None = None,
        notify_all: bool = False,
    ) -> dict[str, Any]:
        """
        Create a plain-text comment on a list.

        Args:
            list_id: The list ID
            comment_text: The comment text
            assignee: User ID to assign the comment to
            notify_all: Whether to notify all list members

        Returns:
            The ClickUp response with the new comment ID
        """
        payload: dict[str, Any] = {"comment_text": comment_text, "notify_all": notify_all}
        if assignee is not None:
            payload["assignee"] = assignee
        return self.post(f"/list/{list_id}/comment", json=payload)

    def update_comment(
        self,
        comment_id: str,
        comment_text: str,
        assignee: int | None = None,
        resolved: bool | None = None,
    ) -> dict[str, Any]:
        """
        Update a comment's text, assignee or resolved state.

        Args:
            comment_id: The comment ID
            comment_text: The new comment text
            assignee: User ID to assign the comment to
            resolved: Whether the comment is resolved

        Returns:
            The (usually empty) ClickUp response
        """
        payload: dict[str, Any] = {"comment_text": comment_text}
        if assignee is not None:
            payload["assignee"] = assignee
        if resolved is not None:
            payload["resolved"] = resolved
        return self.put(f"/comment/{comment_id}", json=payload)

    def delete_comment(self, comment_id: str) -> dict[str, Any]:
        result = self.delete(f"/comment/{comment_id}")
        logger.info(f"Deleted comment {comment_id}")
        return result

    def get_threaded_comments(
        self, comment_id: str, start: int | None = None, start_id: str | None = None
    ) -> dict[str, Any]:
        """Get the replies to a comment."""
        return self.get(
            f"/comment/{comment_id}/reply", params={"start": start, "start_id": start_id}
        )

    def create_threaded_comment(
        self, comment_id: str, comment_text: str, notify_all: bool = False
    ) -> dict[str, Any]:
        """Reply to a comment."""
        return self.post(
            f"/comment/{comment_id}/reply",
            json={"comment_text": comment_text, "notify_all": notify_all},
        )
