"""Main FastMCP server setup for ClickUp integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Literal, Optional

from fastmcp import FastMCP
from fastmcp.tools import Tool as FastMCPTool
from mcp.types import Tool as MCPTool
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_clickup.clickup.config import ClickUpConfig
from mcp_clickup.utils.environment import get_available_services
from mcp_clickup.utils.io import is_read_only_mode
from mcp_clickup.utils.logging import log_config_param, mask_sensitive
from mcp_clickup.utils.tools import get_enabled_tools, should_include_tool

# Tool modules register their tools on clickup_mcp when imported
from . import comments, task_dependencies, views  # noqa: F401
from .clickup import clickup_mcp
from .context import MainAppContext

logger = logging.getLogger("mcp-clickup.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main ClickUp MCP server lifespan starting...")
    services = get_available_services()
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    loaded_clickup_config: ClickUpConfig | None = None

    if services.get("clickup"):
        try:
            clickup_config = ClickUpConfig.from_env()
            if clickup_config.is_auth_configured():
                loaded_clickup_config = clickup_config
                log_config_param(logger, "ClickUp", "URL", clickup_config.url)
                log_config_param(
                    logger,
                    "ClickUp",
                    "Token",
                    clickup_config.oauth_token or clickup_config.api_token,
                    sensitive=True,
                )
                log_config_param(
                    logger, "ClickUp", "Default currency", clickup_config.default_currency
                )
                logger.info(
                    "ClickUp configuration loaded and authentication is configured."
                )
            else:
                logger.warning(
                    "ClickUp authentication is not fully configured. ClickUp tools will be unavailable."
                )
        except Exception as e:
            logger.error(f"Failed to load ClickUp configuration: {e}", exc_info=True)

    app_context = MainAppContext(
        full_clickup_config=loaded_clickup_config,
        read_only=read_only,
        enabled_tools=enabled_tools,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")
    yield {"app_lifespan_context": app_context}
    logger.info("Main ClickUp MCP server lifespan shutting down.")


class ClickUpMCP(FastMCP[MainAppContext]):
    """Custom FastMCP server class for ClickUp integration with tool filtering."""

    async def _mcp_list_tools(self) -> list[MCPTool]:
        # Filter tools based on enabled_tools, read_only mode, and service configuration from the lifespan context.
        req_context = self._mcp_server.request_context
        if req_context is None or req_context.lifespan_context is None:
            logger.warning(
                "Lifespan context not available during _main_mcp_list_tools call."
            )
            return []

        lifespan_ctx_dict = req_context.lifespan_context
        app_lifespan_state: MainAppContext | None = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )
        read_only = (
            getattr(app_lifespan_state, "read_only", False)
            if app_lifespan_state
            else False
        )
        enabled_tools_filter = (
            getattr(app_lifespan_state, "enabled_tools", None)
            if app_lifespan_state
            else None
        )
        logger.debug(
            f"_main_mcp_list_tools: read_only={read_only}, enabled_tools_filter={enabled_tools_filter}"
        )

        all_tools: dict[str, FastMCPTool] = await self.get_tools()
        logger.debug(
            f"Aggregated {len(all_tools)} tools before filtering: {list(all_tools.keys())}"
        )

        filtered_tools: list[MCPTool] = []
        for registered_name, tool_obj in all_tools.items():
            tool_tags = tool_obj.tags

            if not should_include_tool(registered_name, enabled_tools_filter):
                logger.debug(f"Excluding tool '{registered_name}' (not enabled)")
                continue

            if tool_obj and read_only and "write" in tool_tags:
                logger.debug(
                    f"Excluding tool '{registered_name}' due to read-only mode and 'write' tag"
                )
                continue

            # Exclude ClickUp tools if config is not fully authenticated
            if "clickup" in tool_tags:
                if app_lifespan_state is None:
                    logger.warning(
                        f"Excluding tool '{registered_name}' as application context is unavailable to verify service configuration."
                    )
                    continue
                if not app_lifespan_state.full_clickup_config:
                    logger.debug(
                        f"Excluding ClickUp tool '{registered_name}' as ClickUp configuration/authentication is incomplete."
                    )
                    continue

            filtered_tools.append(tool_obj.to_mcp_tool(name=registered_name))

        logger.debug(
            f"_main_mcp_list_tools: Total tools after filtering: {len(filtered_tools)}"
        )
        return filtered_tools

    def http_app(
        self,
        path: str | None = None,
        middleware: list[Middleware] | None = None,
        transport: Literal["streamable-http", "sse"] = "streamable-http",
    ) -> "Starlette":
        user_token_mw = Middleware(UserTokenMiddleware, mcp_server_ref=self)
        final_middleware_list = [user_token_mw]
        if middleware:
            final_middleware_list.extend(middleware)
        app = super().http_app(
            path=path, middleware=final_middleware_list, transport=transport
        )
        return app


class UserTokenMiddleware(BaseHTTPMiddleware):
    """Middleware to extract ClickUp user tokens from Authorization headers.

    `Bearer <token>` is treated as an OAuth access token and `Token <token>`
    as a personal API token.
    """

    def __init__(
        self, app: Any, mcp_server_ref: Optional["ClickUpMCP"] = None
    ) -> None:
        super().__init__(app)
        self.mcp_server_ref = mcp_server_ref
        if not self.mcp_server_ref:
            logger.warning(
                "UserTokenMiddleware initialized without mcp_server_ref. Path matching for MCP endpoint might fail if settings are needed."
            )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> JSONResponse:
        logger.debug(
            f"UserTokenMiddleware.dispatch: ENTERED for request path='{request.url.path}', method='{request.method}'"
        )
        mcp_server_instance = self.mcp_server_ref
        if mcp_server_instance is None:
            logger.debug(
                "UserTokenMiddleware.dispatch: self.mcp_server_ref is None. Skipping MCP auth logic."
            )
            return await call_next(request)

        mcp_path = mcp_server_instance.settings.streamable_http_path.rstrip("/")
        request_path = request.url.path.rstrip("/")
        if request_path == mcp_path and request.method == "POST":
            auth_header = request.headers.get("Authorization")
            logger.debug(
                f"UserTokenMiddleware: Path='{request.url.path}', AuthHeader='{mask_sensitive(auth_header)}'"
            )
            if auth_header and auth_header.startswith("Bearer "):
                token = auth_header.split(" ", 1)[1].strip()
                if not token:
                    return JSONResponse(
                        {"error": "Unauthorized: Empty Bearer token"},
                        status_code=401,
                    )
                logger.debug(
                    f"UserTokenMiddleware.dispatch: Bearer token extracted (masked): ...{mask_sensitive(token, 8)}"
                )
                request.state.user_clickup_token = token
                request.state.user_clickup_auth_type = "oauth"
            elif auth_header and auth_header.startswith("Token "):
                token = auth_header.split(" ", 1)[1].strip()
                if not token:
                    return JSONResponse(
                        {"error": "Unauthorized: Empty Token (personal API token)"},
                        status_code=401,
                    )
                logger.debug(
                    f"UserTokenMiddleware.dispatch: Personal API token extracted (masked): ...{mask_sensitive(token, 8)}"
                )
                request.state.user_clickup_token = token
                request.state.user_clickup_auth_type = "token"
            elif auth_header:
                logger.warning(
                    f"Unsupported Authorization type for {request.url.path}: {auth_header.split(' ', 1)[0] if ' ' in auth_header else 'UnknownType'}"
                )
                return JSONResponse(
                    {
                        "error": "Unauthorized: Only 'Bearer <OAuthToken>' or 'Token <PersonalToken>' types are supported."
                    },
                    status_code=401,
                )
            else:
                logger.debug(
                    f"No Authorization header provided for {request.url.path}. Will proceed with global/fallback server configuration if applicable."
                )
        response = await call_next(request)
        logger.debug(
            f"UserTokenMiddleware.dispatch: EXITED for request path='{request.url.path}'"
        )
        return response


main_mcp = ClickUpMCP(name="ClickUp MCP", lifespan=main_lifespan)
main_mcp.mount("clickup", clickup_mcp)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


logger.info("Added /healthz endpoint for Kubernetes probes")
