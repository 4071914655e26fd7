"""Module for ClickUp view operations."""

import logging
from typing import Any

from ..models.clickup import ClickUpView
from .client import ClickUpClient
from .constants import VIEW_PARENT_TYPES

logger = logging.getLogger("mcp-clickup")


class ViewsMixin(ClickUpClient):
    """Mixin for ClickUp view operations."""

    def get_views(
        self,
        parent_type: str,
        parent_id: str,
        view_type: str | None = None,
        access: str | None = None,
    ) -> dict[str, Any]:
        """
        Get the views of a space, folder or list.

        Required views (the ones ClickUp always shows, e.g. the default list
        view) are included and flagged.

        Args:
            parent_type: 'space', 'folder' or 'list'
            parent_id: The parent ID
            view_type: Only return views of this type (list, board, calendar, ...)
            access: Only return views with this access (shared, private, protected)

        Returns:
            The parent, the matching views and their count

        Raises:
            ValueError: If the parent type is invalid
        """
        if parent_type not in VIEW_PARENT_TYPES:
            raise ValueError(
                f"Invalid parent_type '{parent_type}'. "
                f"Must be one of: {', '.join(VIEW_PARENT_TYPES)}"
            )
        result = self.get(f"/{parent_type}/{parent_id}/view")

        views: list[ClickUpView] = []
        seen: set[str] = set()
        required = result.get("required_views")
        if isinstance(required, dict):
            for view_data in required.values():
                if isinstance(view_data, dict):
                    views.append(ClickUpView.from_api_response(view_data, required=True))
        for view_data in result.get("views") or []:
            views.append(ClickUpView.from_api_response(view_data))

        filtered = []
        for view in views:
            if view.id and view.id in seen:
                continue
            seen.add(view.id)
            if view_type and view.type != view_type:
                continue
            if access and view.access != access:
                continue
            filtered.append(view.to_simplified_dict())

        logger.debug(
            f"Found {len(filtered)} of {len(views)} views for {parent_type} {parent_id}"
        )
        return {
            "parent": {"id": parent_id, "type": parent_type},
            "views": filtered,
            "total": len(filtered),
        }

    def get_view(self, view_id: str) -> dict[str, Any]:
        """
        Get a view.

        Args:
            view_id: The view ID

        Returns:
            The simplified view
        """
        result = self.get(f"/view/{view_id}")
        view_data = result.get("view", result)
        return ClickUpView.from_api_response(view_data).to_simplified_dict()
