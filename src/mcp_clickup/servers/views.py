"""ClickUp view tools."""

import json
import logging
from typing import Annotated, Literal

from fastmcp import Context
from pydantic import Field

from mcp_clickup.servers.clickup import clickup_mcp
from mcp_clickup.servers.dependencies import get_clickup_fetcher

logger = logging.getLogger(__name__)


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_views(
    ctx: Context,
    parent_id: Annotated[
        str,
        Field(description="The ID of the parent (space, folder, or list)", min_length=1),
    ],
    parent_type: Annotated[
        Literal["space", "folder", "list"],
        Field(description="The type of parent container"),
    ],
    type: Annotated[
        str | None,
        Field(
            description="Filter views by type (e.g. list, board, calendar, gantt, table, timeline, workload, activity, map, doc, form)",
            default=None,
        ),
    ] = None,
    access: Annotated[
        Literal["shared", "private", "protected"] | None,
        Field(description="Filter views by access level", default=None),
    ] = None,
) -> str:
    """Get all views of a space, folder, or list.

    Args:
        ctx: The FastMCP context.
        parent_id: The parent ID.
        parent_type: The parent type.
        type: Optional view type filter.
        access: Optional access level filter.

    Returns:
        JSON string with the views and their count.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_views(parent_type, parent_id, view_type=type, access=access)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_view(
    ctx: Context,
    view_id: Annotated[str, Field(description="The ID of the view to get", min_length=1)],
) -> str:
    """Get detailed information about a specific view.

    Args:
        ctx: The FastMCP context.
        view_id: The view ID.

    Returns:
        JSON string representing the view.
    """
    fetcher = await get_clickup_fetcher(ctx)
    view = fetcher.get_view(view_id)
    return json.dumps(view, indent=2, ensure_ascii=False)
