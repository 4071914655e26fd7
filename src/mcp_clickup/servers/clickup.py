"""ClickUp FastMCP server instance with workspace, task, list and folder tools."""

import json
import logging
from typing import Annotated, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_clickup.servers.dependencies import get_clickup_fetcher
from mcp_clickup.utils.decorators import check_write_access

logger = logging.getLogger(__name__)

clickup_mcp = FastMCP(
    name="ClickUp MCP Service",
    instructions="Provides tools for interacting with ClickUp.",
)


# Workspace tools


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_workspaces(ctx: Context) -> str:
    """Get all ClickUp workspaces accessible to the authenticated user.

    Args:
        ctx: The FastMCP context.

    Returns:
        JSON string with the workspace IDs, names and members.
    """
    fetcher = await get_clickup_fetcher(ctx)
    workspaces = fetcher.get_workspaces()
    return json.dumps(workspaces, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_workspace_seats(
    ctx: Context,
    workspace_id: Annotated[
        str, Field(description="The ID of the workspace to get seats information for")
    ],
) -> str:
    """Get information about seats (user licenses) in a ClickUp workspace.

    Args:
        ctx: The FastMCP context.
        workspace_id: The workspace ID.

    Returns:
        JSON string with seat allocation and availability.
    """
    fetcher = await get_clickup_fetcher(ctx)
    seats = fetcher.get_workspace_seats(workspace_id)
    return json.dumps(seats, indent=2, ensure_ascii=False)


# Task tools


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_tasks(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to get tasks from")],
    include_closed: Annotated[
        bool | None, Field(description="Whether to include closed tasks", default=None)
    ] = None,
    subtasks: Annotated[
        bool | None,
        Field(description="Whether to include subtasks in the results", default=None),
    ] = None,
    page: Annotated[
        int | None,
        Field(description="The page number to get (0-based)", default=None, ge=0),
    ] = None,
    order_by: Annotated[
        str | None,
        Field(
            description="The field to order by (id, created, updated, due_date)",
            default=None,
        ),
    ] = None,
    reverse: Annotated[
        bool | None, Field(description="Whether to reverse the order", default=None)
    ] = None,
) -> str:
    """Get tasks from a ClickUp list.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.
        include_closed: Whether to include closed tasks.
        subtasks: Whether to include subtasks.
        page: Page number.
        order_by: Field to order by.
        reverse: Whether to reverse the order.

    Returns:
        JSON string with the tasks including name, description, assignees and status.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_tasks(
        list_id,
        include_closed=include_closed,
        subtasks=subtasks,
        page=page,
        order_by=order_by,
        reverse=reverse,
    )
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_task_details(
    ctx: Context,
    task_id: Annotated[str, Field(description="The ID of the task to get")],
    include_subtasks: Annotated[
        bool | None,
        Field(
            description="Whether to include subtasks in the task details", default=None
        ),
    ] = None,
    compact: Annotated[
        bool,
        Field(
            description="Return a compact summary instead of the full task data (recommended for reduced token usage)",
            default=False,
        ),
    ] = False,
) -> str:
    """Get detailed information about a specific ClickUp task.

    Custom field values are resolved to readable values (labels show names
    instead of IDs), for subtasks too.

    Args:
        ctx: The FastMCP context.
        task_id: The task ID.
        include_subtasks: Whether to include subtasks.
        compact: Whether to return the compact summary.

    Returns:
        JSON string representing the task or its summary.
    """
    fetcher = await get_clickup_fetcher(ctx)
    if compact:
        result = fetcher.get_task_summary(task_id, include_subtasks=include_subtasks)
    else:
        result = fetcher.get_task(task_id, include_subtasks=include_subtasks)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_task(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to create the task in")],
    name: Annotated[str, Field(description="The name of the task")],
    description: Annotated[
        str | None,
        Field(
            description="The description of the task (supports GitHub Flavored Markdown)",
            default=None,
        ),
    ] = None,
    markdown_content: Annotated[
        str | None,
        Field(
            description="Raw markdown content for the task description (takes precedence over description)",
            default=None,
        ),
    ] = None,
    assignees: Annotated[
        list[int] | None,
        Field(description="The IDs of the users to assign to the task", default=None),
    ] = None,
    tags: Annotated[
        list[str] | None,
        Field(description="The tags to add to the task", default=None),
    ] = None,
    status: Annotated[
        str | None, Field(description="The status of the task", default=None)
    ] = None,
    priority: Annotated[
        int | None,
        Field(
            description="The priority of the task (1 urgent, 2 high, 3 normal, 4 low)",
            default=None,
            ge=1,
            le=4,
        ),
    ] = None,
    due_date: Annotated[
        int | None,
        Field(description="The due date (Unix timestamp in milliseconds)", default=None),
    ] = None,
    due_date_time: Annotated[
        bool | None,
        Field(description="Whether the due date includes a time", default=None),
    ] = None,
    time_estimate: Annotated[
        int | None,
        Field(description="The time estimate in milliseconds", default=None),
    ] = None,
    start_date: Annotated[
        int | None,
        Field(description="The start date (Unix timestamp in milliseconds)", default=None),
    ] = None,
    start_date_time: Annotated[
        bool | None,
        Field(description="Whether the start date includes a time", default=None),
    ] = None,
    notify_all: Annotated[
        bool | None,
        Field(description="Whether to notify all assignees", default=None),
    ] = None,
    parent: Annotated[
        str | None,
        Field(description="The ID of the parent task, to create a subtask", default=None),
    ] = None,
) -> str:
    """Create a new task in a ClickUp list.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.
        name: The task name.
        description: Task description.
        markdown_content: Markdown task description.
        assignees: Assignee user IDs.
        tags: Tag names.
        status: Status name.
        priority: Priority 1-4.
        due_date: Due date in milliseconds.
        due_date_time: Whether the due date includes a time.
        time_estimate: Time estimate in milliseconds.
        start_date: Start date in milliseconds.
        start_date_time: Whether the start date includes a time.
        notify_all: Whether to notify all assignees.
        parent: Parent task ID.

    Returns:
        JSON string representing the created task.

    Raises:
        ValueError: If in read-only mode or ClickUp client is unavailable.
    """
    fetcher = await get_clickup_fetcher(ctx)
    task = fetcher.create_task(
        list_id,
        name,
        description=description,
        markdown_content=markdown_content,
        assignees=assignees,
        tags=tags,
        status=status,
        priority=priority,
        due_date=due_date,
        due_date_time=due_date_time,
        time_estimate=time_estimate,
        start_date=start_date,
        start_date_time=start_date_time,
        notify_all=notify_all,
        parent=parent,
    )
    return json.dumps(task, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def update_task(
    ctx: Context,
    task_id: Annotated[str, Field(description="The ID of the task to update")],
    name: Annotated[
        str | None, Field(description="The new name of the task", default=None)
    ] = None,
    description: Annotated[
        str | None,
        Field(
            description="The new description of the task (supports GitHub Flavored Markdown)",
            default=None,
        ),
    ] = None,
    markdown_content: Annotated[
        str | None,
        Field(
            description="Raw markdown content for the task description (takes precedence over description)",
            default=None,
        ),
    ] = None,
    assignees: Annotated[
        list[int] | None,
        Field(description="The IDs of the users to assign to the task", default=None),
    ] = None,
    status: Annotated[
        str | None, Field(description="The new status of the task", default=None)
    ] = None,
    priority: Annotated[
        int | None,
        Field(
            description="The new priority of the task (1 urgent, 2 high, 3 normal, 4 low)",
            default=None,
            ge=1,
            le=4,
        ),
    ] = None,
    due_date: Annotated[
        int | None,
        Field(description="The new due date (Unix timestamp in milliseconds)", default=None),
    ] = None,
    due_date_time: Annotated[
        bool | None,
        Field(description="Whether the due date includes a time", default=None),
    ] = None,
    time_estimate: Annotated[
        int | None,
        Field(description="The new time estimate in milliseconds", default=None),
    ] = None,
    start_date: Annotated[
        int | None,
        Field(
            description="The new start date (Unix timestamp in milliseconds)", default=None
        ),
    ] = None,
    start_date_time: Annotated[
        bool | None,
        Field(description="Whether the start date includes a time", default=None),
    ] = None,
    notify_all: Annotated[
        bool | None,
        Field(description="Whether to notify all assignees", default=None),
    ] = None,
) -> str:
    """Update an existing ClickUp task.

    Args:
        ctx: The FastMCP context.
        task_id: The task ID.
        name: New task name.
        description: New description.
        markdown_content: New Markdown description.
        assignees: Assignee user IDs.
        status: New status name.
        priority: New priority 1-4.
        due_date: New due date in milliseconds.
        due_date_time: Whether the due date includes a time.
        time_estimate: New time estimate in milliseconds.
        start_date: New start date in milliseconds.
        start_date_time: Whether the start date includes a time.
        notify_all: Whether to notify all assignees.

    Returns:
        JSON string representing the updated task.

    Raises:
        ValueError: If in read-only mode, no field is given, or ClickUp client is unavailable.
    """
    fetcher = await get_clickup_fetcher(ctx)
    task = fetcher.update_task(
        task_id,
        description=description,
        markdown_content=markdown_content,
        name=name,
        assignees=assignees,
        status=status,
        priority=priority,
        due_date=due_date,
        due_date_time=due_date_time,
        time_estimate=time_estimate,
        start_date=start_date,
        start_date_time=start_date_time,
        notify_all=notify_all,
    )
    return json.dumps(task, indent=2, ensure_ascii=False)


# List and folder tools


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_lists(
    ctx: Context,
    container_type: Annotated[
        Literal["folder", "space"],
        Field(description="The type of container to get lists from"),
    ],
    container_id: Annotated[
        str, Field(description="The ID of the container to get lists from")
    ],
    archived: Annotated[
        bool | None,
        Field(description="Whether to return archived lists", default=None),
    ] = None,
) -> str:
    """Get lists from a ClickUp folder or space.

    For a space, only the lists that are not in a folder are returned.

    Args:
        ctx: The FastMCP context.
        container_type: 'folder' or 'space'.
        container_id: The folder or space ID.
        archived: Whether to return archived lists.

    Returns:
        JSON string with the lists.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_lists(container_type, container_id, archived=archived)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_folder(
    ctx: Context,
    space_id: Annotated[
        str, Field(description="The ID of the space to create the folder in")
    ],
    name: Annotated[str, Field(description="The name of the folder")],
) -> str:
    """Create a new folder in a ClickUp space.

    Args:
        ctx: The FastMCP context.
        space_id: The space ID.
        name: The folder name.

    Returns:
        JSON string representing the created folder.

    Raises:
        ValueError: If in read-only mode or ClickUp client is unavailable.
    """
    fetcher = await get_clickup_fetcher(ctx)
    folder = fetcher.create_folder(space_id, name)
    return json.dumps(folder, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def update_folder(
    ctx: Context,
    folder_id: Annotated[str, Field(description="The ID of the folder to update")],
    name: Annotated[str, Field(description="The new name of the folder")],
) -> str:
    """Rename an existing ClickUp folder.

    Args:
        ctx: The FastMCP context.
        folder_id: The folder ID.
        name: The new folder name.

    Returns:
        JSON string representing the updated folder.
    """
    fetcher = await get_clickup_fetcher(ctx)
    folder = fetcher.update_folder(folder_id, name)
    return json.dumps(folder, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def delete_folder(
    ctx: Context,
    folder_id: Annotated[str, Field(description="The ID of the folder to delete")],
) -> str:
    """Delete a folder from ClickUp together with its lists.

    Args:
        ctx: The FastMCP context.
        folder_id: The folder ID.

    Returns:
        JSON string indicating success.
    """
    fetcher = await get_clickup_fetcher(ctx)
    fetcher.delete_folder(folder_id)
    return json.dumps(
        {"success": True, "message": f"Folder {folder_id} deleted successfully"},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_folderless_lists(
    ctx: Context,
    space_id: Annotated[
        str, Field(description="The ID of the space to get folderless lists from")
    ],
) -> str:
    """Get lists that are not in any folder within a ClickUp space.

    Args:
        ctx: The FastMCP context.
        space_id: The space ID.

    Returns:
        JSON string with the lists.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_folderless_lists(space_id)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_list(
    ctx: Context,
    container_type: Annotated[
        Literal["folder", "space"],
        Field(description="The type of container to create the list in"),
    ],
    container_id: Annotated[
        str, Field(description="The ID of the container to create the list in")
    ],
    name: Annotated[str, Field(description="The name of the list")],
    content: Annotated[
        str | None, Field(description="(Optional) list description", default=None)
    ] = None,
) -> str:
    """Create a new list in a ClickUp folder or space.

    Args:
        ctx: The FastMCP context.
        container_type: 'folder' or 'space'.
        container_id: The folder or space ID.
        name: The list name.
        content: Optional list description.

    Returns:
        JSON string representing the created list.
    """
    fetcher = await get_clickup_fetcher(ctx)
    created = fetcher.create_list(container_type, container_id, name, content=content)
    return json.dumps(created, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_folderless_list(
    ctx: Context,
    space_id: Annotated[
        str, Field(description="The ID of the space to create the folderless list in")
    ],
    name: Annotated[str, Field(description="The name of the folderless list")],
) -> str:
    """Create a new list directly in a ClickUp space without a folder.

    Args:
        ctx: The FastMCP context.
        space_id: The space ID.
        name: The list name.

    Returns:
        JSON string representing the created list.
    """
    fetcher = await get_clickup_fetcher(ctx)
    created = fetcher.create_folderless_list(space_id, name)
    return json.dumps(created, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "read"})
async def get_list(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to get")],
) -> str:
    """Get details about a specific ClickUp list.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.

    Returns:
        JSON string representing the list.
    """
    fetcher = await get_clickup_fetcher(ctx)
    result = fetcher.get_list(list_id)
    return json.dumps(result, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def update_list(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to update")],
    name: Annotated[str, Field(description="The new name of the list")],
    content: Annotated[
        str | None, Field(description="(Optional) new list description", default=None)
    ] = None,
) -> str:
    """Update an existing ClickUp list.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.
        name: The new list name.
        content: Optional new list description.

    Returns:
        JSON string representing the updated list.
    """
    fetcher = await get_clickup_fetcher(ctx)
    updated = fetcher.update_list(list_id, name, content=content)
    return json.dumps(updated, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def delete_list(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to delete")],
) -> str:
    """Delete a list from ClickUp together with its tasks.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.

    Returns:
        JSON string indicating success.
    """
    fetcher = await get_clickup_fetcher(ctx)
    fetcher.delete_list(list_id)
    return json.dumps(
        {"success": True, "message": f"List {list_id} deleted successfully"},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def add_task_to_list(
    ctx: Context,
    list_id: Annotated[str, Field(description="The ID of the list to add the task to")],
    task_id: Annotated[str, Field(description="The ID of the task to add")],
) -> str:
    """Add an existing task to an additional ClickUp list.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.
        task_id: The task ID.

    Returns:
        JSON string indicating success.
    """
    fetcher = await get_clickup_fetcher(ctx)
    fetcher.add_task_to_list(list_id, task_id)
    return json.dumps(
        {"success": True, "message": f"Task {task_id} added to list {list_id}"},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def remove_task_from_list(
    ctx: Context,
    list_id: Annotated[
        str, Field(description="The ID of the list to remove the task from")
    ],
    task_id: Annotated[str, Field(description="The ID of the task to remove")],
) -> str:
    """Remove a task from a ClickUp list without deleting the task.

    Args:
        ctx: The FastMCP context.
        list_id: The list ID.
        task_id: The task ID.

    Returns:
        JSON string indicating success.
    """
    fetcher = await get_clickup_fetcher(ctx)
    fetcher.remove_task_from_list(list_id, task_id)
    return json.dumps(
        {"success": True, "message": f"Task {task_id} removed from list {list_id}"},
        indent=2,
        ensure_ascii=False,
    )


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_list_from_template_in_folder(
    ctx: Context,
    folder_id: Annotated[
        str, Field(description="The ID of the folder to create the list in")
    ],
    template_id: Annotated[str, Field(description="The ID of the template to use")],
    name: Annotated[str, Field(description="The name of the list")],
) -> str:
    """Create a new list in a ClickUp folder from a list template.

    Args:
        ctx: The FastMCP context.
        folder_id: The folder ID.
        template_id: The template ID.
        name: The list name.

    Returns:
        JSON string representing the created list.
    """
    fetcher = await get_clickup_fetcher(ctx)
    created = fetcher.create_list_from_template("folder", folder_id, template_id, name)
    return json.dumps(created, indent=2, ensure_ascii=False)


@clickup_mcp.tool(tags={"clickup", "write"})
@check_write_access
async def create_list_from_template_in_space(
    ctx: Context,
    space_id: Annotated[
        str, Field(description="The ID of the space to create the list in")
    ],
    template_id: Annotated[str, Field(description="The ID of the template to use")],
    name: Annotated[str, Field(description="The name of the list")],
) -> str:
    """Create a new list in a ClickUp space from a list template.

    Args:
        ctx: The FastMCP context.
        space_id: The space ID.
        template_id: The template ID.
        name: The list name.

    Returns:
        JSON string representing the created list.
    """
    fetcher = await get_clickup_fetcher(ctx)
    created = fetcher.create_list_from_template("space", space_id, template_id, name)
    return json.dumps(created, indent=2, ensure_ascii=False)
