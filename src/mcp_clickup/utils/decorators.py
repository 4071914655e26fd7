"""Tool decorators for the ClickUp MCP server.

Write tools (creating, updating or deleting ClickUp objects) are wrapped in
`check_write_access` so `READ_ONLY_MODE` blocks them before any request is sent.
"""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import TYPE_CHECKING, Any, TypeVar

from fastmcp import Context

if TYPE_CHECKING:
    from mcp_clickup.servers.context import MainAppContext

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _app_context(ctx: Context) -> "MainAppContext | None":
    lifespan_context = ctx.request_context.lifespan_context
    if not isinstance(lifespan_context, dict):
        return None
    return lifespan_context.get("app_lifespan_context")


def check_write_access(func: F) -> F:
    """
    Refuse a ClickUp write tool while the server runs read-only.

    The wrapped tool must be async and take the FastMCP `ctx` first.

    Raises:
        ValueError: If READ_ONLY_MODE is enabled for this server.
    """

    @wraps(func)
    async def wrapper(ctx: Context, *args: Any, **kwargs: Any) -> Any:
        app_context = _app_context(ctx)
        if app_context is not None and app_context.read_only:
            action = func.__name__.replace("_", " ")
            logger.warning(f"Blocked ClickUp write tool '{func.__name__}' (read-only)")
            raise ValueError(
                f"Cannot {action} in read-only mode. Unset READ_ONLY_MODE to "
                "allow changes to ClickUp."
            )

        return await func(ctx, *args, **kwargs)

    return wrapper  # type: ignore