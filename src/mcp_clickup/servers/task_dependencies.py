"""ClickUp task dependency tools."""

import json
import logging
from typing import Annotated, Literal

from fastmcp import Context
from pydantic import Field

from mcp_clickup.servers.clickup import clickup_mcp
from mcp_clickup.servers.dependencies import get_clickup_fetcher
from mcp_clickup.utils.decorators import check_write_access

logger = logging.getLogger(__name__)

DEPENDENCY_ID_DESCRIPTION = (
    "The ID of the dependency, '<waiting task id>:<blocking task id>' "
    "as returned by the dependency tools"
)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_dependency(
    ctx: Context,
    task_id: Annotated[
        str, Field(description="The ID of the task the dependency is created on", min_length=1)
    ],
    depends_on: Annotated[
        str, Field(description="The ID of the other task", min_length=1)
    ],
    type: Annotated[
        Literal["waiting_on", "blocking"],
        Field(
            description=(
                "'waiting_on' if task_id waits on depends_on, "
                "'blocking' if task_id blocks depends_on"
            ),
            default="waiting_on",
        ),
    ] = "waiting_on",
) -> str:
    """Create a dependency relationship between two tasks.

    Args:
        ctx: The FastMCP context.
        task_id: The task the dependency is created on.
        depends_on: The other task.
        type: The relationship seen from task_id.

    Returns:
        JSON string representing the created dependency.

    Raises:
        ValueError: If in read-only mode, both tasks are the same, or ClickUp client is unavailable.
    """
    fetcher = await get_clickup_fetcher(ctx)
    dependency = fetcher.create_dependency(task_id, depends_on, type=type)
    return json.dumps(
        {"message": "Dependency created successfully", "dependency": dependency},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_task_dependencies(
    ctx: Context,
    task_id: Annotated[
        str, Field(description="The ID of the task to get dependencies for", min_length=1)
    ],
    type: Annotated[
        Literal["waiting_on", "blocking"] | None,
        Field(description="Filter by dependency type, seen from the task", default=None),
    ] = None,
) -> str:
    """Get all dependencies of a task, optionally filtered by type.

    Args:
        ctx: The FastMCP context.
        task_id: The task ID.
        type: Optional dependency type filter.

    Returns:
        JSON string with the dependencies and their count.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_task_dependencies(task_id, type=type)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def update_dependency(
    ctx: Context,
    dependency_id: Annotated[
        str, Field(description=DEPENDENCY_ID_DESCRIPTION, min_length=1)
    ],
    type: Annotated[
        Literal["waiting_on", "blocking"] | None,
        Field(
            description=(
                "New type seen from the first task of the ID: 'blocking' turns the "
                "dependency around"
            ),
            default=None,
        ),
    ] = None,
) -> str:
    """Change the orientation of an existing dependency.

    Args:
        ctx: The FastMCP context.
        dependency_id: The dependency ID.
        type: The new dependency type.

    Returns:
        JSON string representing the resulting dependency.
    """
    fetcher = await get_clickup_fetcher(ctx)
    dependency = fetcher.update_dependency(dependency_id, type=type)
    return json.dumps(
        {"message": "Dependency updated successfully", "dependency": dependency},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def delete_dependency(
    ctx: Context,
    dependency_id: Annotated[
        str, Field(description=DEPENDENCY_ID_DESCRIPTION, min_length=1)
    ],
) -> str:
    """Delete a dependency relationship between tasks.

    Args:
        ctx: The FastMCP context.
        dependency_id: The dependency ID.

    Returns:
        JSON string indicating success.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.delete_dependency(dependency_id)
    return json.dumps(
        {"message": "Dependency deleted successfully", **result},
        indent=2,
        ensure_ascii=False,
    )
