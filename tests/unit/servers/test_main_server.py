"""Tests for the main MCP server implementation."""

import json
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastmcp import Client, FastMCP
from fastmcp.client import FastMCPTransport

from mcp_clickup.clickup.config import ClickUpConfig
from mcp_clickup.servers.context import MainAppContext
from mcp_clickup.servers.main import (
    ClickUpMCP,
    UserTokenMiddleware,
    health_check,
    main_lifespan,
    main_mcp,
)


@pytest.mark.anyio
async def test_health_check():
    response = await health_check(MagicMock())
    assert response.status_code == 200
    assert json.loads(response.body) == {"status": "ok"}


@pytest.mark.anyio
async def test_main_lifespan_loads_clickup_config():
    """Test that the lifespan exposes the ClickUp config and server flags."""
    with patch.dict(
        os.environ,
        {
            "CLICKUP_API_TOKEN": "pk_test_token",
            "READ_ONLY_MODE": "true",
            "ENABLED_TOOLS": "clickup_get_tasks",
        },
        clear=True,
    ):
        async with main_lifespan(MagicMock()) as lifespan_ctx:
            app_context = lifespan_ctx["app_lifespan_context"]

    assert isinstance(app_context, MainAppContext)
    assert app_context.full_clickup_config.api_token == "pk_test_token"
    assert app_context.read_only is True
    assert app_context.enabled_tools == ["clickup_get_tasks"]


@pytest.mark.anyio
async def test_main_lifespan_without_clickup_config():
    with patch.dict(os.environ, {}, clear=True):
        async with main_lifespan(MagicMock()) as lifespan_ctx:
            app_context = lifespan_ctx["app_lifespan_context"]

    assert app_context.full_clickup_config is None
    assert app_context.read_only is False


@pytest.mark.anyio
async def test_main_lifespan_invalid_config_is_logged():
    with patch.dict(
        os.environ,
        {"CLICKUP_API_TOKEN": "pk_test_token", "CLICKUP_TIMEOUT": "never"},
        clear=True,
    ):
        async with main_lifespan(MagicMock()) as lifespan_ctx:
            assert lifespan_ctx["app_lifespan_context"].full_clickup_config is None


@pytest.mark.anyio
async def test_main_mcp_mounts_clickup_tools():
    """Test that every tool module registers its tools under the clickup prefix."""
    tools = await main_mcp.get_tools()

    for name in (
        "clickup_get_tasks",
        "clickup_create_task_comment",
        "clickup_create_markdown_preview",
        "clickup_update_dependency",
        "clickup_get_views",
    ):
        assert name in tools
    assert "write" in tools["clickup_delete_list"].tags


def _filtering_mcp(app_context):
    from mcp_clickup.servers.clickup import create_folder, get_workspaces
    from mcp_clickup.servers.comments import create_markdown_preview

    @asynccontextmanager
    async def test_lifespan(app: FastMCP) -> AsyncGenerator[dict, None]:
        yield {"app_lifespan_context": app_context}

    test_mcp = ClickUpMCP("TestFiltering", lifespan=test_lifespan)
    sub_mcp = FastMCP(name="TestFilteringSubMCP")
    sub_mcp.tool(tags={"clickup", "read"})(get_workspaces)
    sub_mcp.tool(tags={"clickup", "write"})(create_folder)
    sub_mcp.tool()(create_markdown_preview)
    test_mcp.mount("clickup", sub_mcp)
    return test_mcp


async def _list_tool_names(test_mcp):
    async with Client(transport=FastMCPTransport(test_mcp)) as client:
        tools = await client.list_tools()
    return sorted(tool.name for tool in tools)


@pytest.mark.anyio
async def test_list_tools_all():
    test_mcp = _filtering_mcp(
        MainAppContext(full_clickup_config=ClickUpConfig(api_token="pk_test_token"))
    )
    assert await _list_tool_names(test_mcp) == [
        "clickup_create_folder",
        "clickup_create_markdown_preview",
        "clickup_get_workspaces",
    ]


@pytest.mark.anyio
async def test_list_tools_read_only_hides_write_tools():
    test_mcp = _filtering_mcp(
        MainAppContext(
            full_clickup_config=ClickUpConfig(api_token="pk_test_token"),
            read_only=True,
        )
    )
    assert "clickup_create_folder" not in await _list_tool_names(test_mcp)


@pytest.mark.anyio
async def test_list_tools_enabled_tools_filter():
    test_mcp = _filtering_mcp(
        MainAppContext(
            full_clickup_config=ClickUpConfig(api_token="pk_test_token"),
            enabled_tools=["clickup_get_workspaces"],
        )
    )
    assert await _list_tool_names(test_mcp) == ["clickup_get_workspaces"]


@pytest.mark.anyio
async def test_list_tools_without_clickup_config():
    """Test that tools needing ClickUp are hidden when it is not configured."""
    test_mcp = _filtering_mcp(MainAppContext())
    assert await _list_tool_names(test_mcp) == ["clickup_create_markdown_preview"]


class TestUserTokenMiddleware:
    """Tests for extracting per-user ClickUp tokens."""

    @pytest.fixture
    def middleware(self):
        mcp_server = MagicMock()
        mcp_server.settings.streamable_http_path = "/mcp"
        return UserTokenMiddleware(MagicMock(), mcp_server_ref=mcp_server)

    @pytest.fixture
    def call_next(self):
        return AsyncMock(return_value="next-response")

    def _request(self, authorization=None, path="/mcp", method="POST"):
        request = MagicMock()
        request.url.path = path
        request.method = method
        request.headers = {} if authorization is None else {"Authorization": authorization}
        request.state = SimpleNamespace()
        return request

    @pytest.mark.anyio
    async def test_bearer_token(self, middleware, call_next):
        request = self._request("Bearer oauth_token")

        response = await middleware.dispatch(request, call_next)

        assert response == "next-response"
        assert request.state.user_clickup_token == "oauth_token"
        assert request.state.user_clickup_auth_type == "oauth"

    @pytest.mark.anyio
    async def test_personal_token(self, middleware, call_next):
        request = self._request("Token pk_user_token")

        await middleware.dispatch(request, call_next)

        assert request.state.user_clickup_token == "pk_user_token"
        assert request.state.user_clickup_auth_type == "token"

    @pytest.mark.anyio
    @pytest.mark.parametrize("authorization", ["Bearer  ", "Token ", "Basic abc"])
    async def test_rejected_headers(self, middleware, call_next, authorization):
        response = await middleware.dispatch(self._request(authorization), call_next)

        assert response.status_code == 401
        call_next.assert_not_called()

    @pytest.mark.anyio
    async def test_no_header_uses_server_config(self, middleware, call_next):
        request = self._request()

        await middleware.dispatch(request, call_next)

        call_next.assert_awaited_once_with(request)
        assert not hasattr(request.state, "user_clickup_token")

    @pytest.mark.anyio
    async def test_other_paths_are_ignored(self, middleware, call_next):
        request = self._request("Basic abc", path="/healthz", method="GET")

        response = await middleware.dispatch(request, call_next)

        assert response == "next-response"
