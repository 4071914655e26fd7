"""
ClickUp view models.

This module provides Pydantic models for views (list, board, calendar, ...)
attached to a space, folder or list.
"""

import logging
from typing import Any, Literal

from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING, UNKNOWN

logger = logging.getLogger(__name__)

ViewAccess = Literal["shared", "private", "protected"]

# ClickUp encodes the parent of a view as a number
VIEW_PARENT_TYPE_NAMES = {
    4: "space",
    5: "folder",
    6: "list",
    7: "workspace",
}


class ClickUpView(ApiModel, TimestampMixin):
    """
    Model representing a ClickUp view.
    """

    id: str = EMPTY_STRING
    name: str = UNKNOWN
    type: str = UNKNOWN
    parent_id: str | None = None
    parent_type: str | None = None
    access: ViewAccess = "shared"
    orderindex: int | None = None
    date_created: str = EMPTY_STRING
    creator_id: str | None = None
    required: bool = False
    settings: dict[str, Any] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ClickUpView":
        """
        Create a ClickUpView from a ClickUp API response.

        Args:
            data: The view data from the ClickUp API
            **kwargs: `required=True` for views ClickUp always shows

        Returns:
            A ClickUpView instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        parent_id = None
        parent_type = None
        parent = data.get("parent")
        if isinstance(parent, dict):
            if parent.get("id") is not None:
                parent_id = str(parent["id"])
            raw_type = parent.get("type")
            parent_type = VIEW_PARENT_TYPE_NAMES.get(raw_type)
            if parent_type is None and raw_type is not None:
                parent_type = str(raw_type)

        if data.get("protected"):
            access: ViewAccess = "protected"
        elif data.get("visibility") == "private":
            access = "private"
        else:
            access = "shared"

        orderindex = data.get("orderindex")
        if isinstance(orderindex, str) and orderindex.isdigit():
            orderindex = int(orderindex)
        elif not isinstance(orderindex, int) or isinstance(orderindex, bool):
            orderindex = None

        creator = data.get("creator")
        settings = data.get("settings")
        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            name=str(data.get("name") or UNKNOWN),
            type=str(data.get("type") or UNKNOWN),
            parent_id=parent_id,
            parent_type=parent_type,
            access=access,
            orderindex=orderindex,
            date_created=cls.format_timestamp(data.get("date_created")),
            creator_id=str(creator) if creator is not None else None,
            required=bool(kwargs.get("required", False)),
            settings=settings if isinstance(settings, dict) else None,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "access": self.access,
        }
        if self.parent_id:
            result["parent"] = {"id": self.parent_id, "type": self.parent_type}
        if self.orderindex is not None:
            result["orderindex"] = self.orderindex
        if self.date_created:
            result["date_created"] = self.date_created
        if self.creator_id:
            result["creator_id"] = self.creator_id
        if self.required:
            result["required"] = True
        if self.settings:
            result["settings"] = self.settings
        return result
