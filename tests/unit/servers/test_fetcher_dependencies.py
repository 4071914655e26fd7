"""Tests for resolving the ClickUp fetcher of a request."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from mcp_clickup.clickup import ClickUpFetcher
from mcp_clickup.clickup.config import ClickUpConfig
from mcp_clickup.servers.context import MainAppContext
from mcp_clickup.servers.dependencies import (
    _create_user_config_for_fetcher,
    get_clickup_fetcher,
    token_validation_cache,
)


@pytest.fixture(autouse=True)
def clear_token_cache():
    token_validation_cache.clear()
    yield
    token_validation_cache.clear()


@pytest.fixture
def base_config():
    return ClickUpConfig(api_token="pk_server_token", default_currency="USD")


def _context(app_context):
    ctx = MagicMock()
    ctx.request_context.lifespan_context = {"app_lifespan_context": app_context}
    return ctx


def _http_request(**state):
    request = MagicMock()
    request.state = SimpleNamespace(**state)
    return request


def test_create_user_config_personal_token(base_config):
    config = _create_user_config_for_fetcher(
        base_config, auth_type="token", credentials={"api_token": "pk_user"}
    )

    assert config.auth_type == "token"
    assert config.api_token == "pk_user"
    assert config.oauth_token is None
    assert config.default_currency == "USD"
    assert base_config.api_token == "pk_server_token"


def test_create_user_config_oauth(base_config):
    config = _create_user_config_for_fetcher(
        base_config, auth_type="oauth", credentials={"oauth_access_token": "oauth_user"}
    )

    assert config.auth_type == "oauth"
    assert config.auth_header == "Bearer oauth_user"
    assert config.api_token is None


@pytest.mark.parametrize(
    "auth_type,credentials,message",
    [
        ("basic", {}, "Unsupported auth_type"),
        ("oauth", {}, "OAuth access token missing"),
        ("token", {"api_token": ""}, "API token missing"),
    ],
)
def test_create_user_config_invalid(base_config, auth_type, credentials, message):
    with pytest.raises(ValueError, match=message):
        _create_user_config_for_fetcher(base_config, auth_type, credentials)


@pytest.mark.anyio
async def test_global_fetcher_outside_http(base_config):
    """Test that the server configuration is used outside an HTTP request."""
    with patch(
        "mcp_clickup.servers.dependencies.get_http_request",
        side_effect=RuntimeError("No active HTTP request found."),
    ):
        fetcher = await get_clickup_fetcher(_context(MainAppContext(base_config)))

    assert isinstance(fetcher, ClickUpFetcher)
    assert fetcher.config is base_config


@pytest.mark.anyio
async def test_missing_configuration():
    with patch(
        "mcp_clickup.servers.dependencies.get_http_request",
        side_effect=RuntimeError("No active HTTP request found."),
    ):
        with pytest.raises(ValueError, match="not available"):
            await get_clickup_fetcher(_context(MainAppContext()))


@pytest.mark.anyio
async def test_fetcher_from_request_state(base_config):
    existing = MagicMock(spec=ClickUpFetcher)
    request = _http_request(clickup_fetcher=existing)

    with patch("mcp_clickup.servers.dependencies.get_http_request", return_value=request):
        fetcher = await get_clickup_fetcher(_context(MainAppContext(base_config)))

    assert fetcher is existing


@pytest.mark.anyio
async def test_http_request_without_user_token_uses_global(base_config):
    with patch(
        "mcp_clickup.servers.dependencies.get_http_request",
        return_value=_http_request(),
    ):
        fetcher = await get_clickup_fetcher(_context(MainAppContext(base_config)))

    assert fetcher.config is base_config


@pytest.mark.anyio
async def test_user_token_is_validated_and_cached(base_config):
    """Test that a user token is validated once and then served from the cache."""
    ctx = _context(MainAppContext(base_config))
    user_fetcher = MagicMock()
    user_fetcher.get_authorized_user.return_value = {"id": 42}

    with patch(
        "mcp_clickup.servers.dependencies.ClickUpFetcher", return_value=user_fetcher
    ) as mock_fetcher_cls:
        first_request = _http_request(
            user_clickup_auth_type="token", user_clickup_token="pk_user"
        )
        with patch(
            "mcp_clickup.servers.dependencies.get_http_request",
            return_value=first_request,
        ):
            assert await get_clickup_fetcher(ctx) is user_fetcher

        second_request = _http_request(
            user_clickup_auth_type="token", user_clickup_token="pk_user"
        )
        with patch(
            "mcp_clickup.servers.dependencies.get_http_request",
            return_value=second_request,
        ):
            assert await get_clickup_fetcher(ctx) is user_fetcher

    mock_fetcher_cls.assert_called_once()
    user_config = mock_fetcher_cls.call_args.kwargs["config"]
    assert user_config.api_token == "pk_user"
    assert user_config.default_currency == "USD"
    user_fetcher.get_authorized_user.assert_called_once_with()
    assert first_request.state.clickup_fetcher is user_fetcher
    assert second_request.state.clickup_fetcher is user_fetcher


@pytest.mark.anyio
async def test_invalid_user_token(base_config):
    user_fetcher = MagicMock()
    user_fetcher.get_authorized_user.side_effect = Exception("401 Unauthorized")
    request = _http_request(user_clickup_auth_type="oauth", user_clickup_token="bad")

    with (
        patch(
            "mcp_clickup.servers.dependencies.ClickUpFetcher",
            return_value=user_fetcher,
        ),
        patch("mcp_clickup.servers.dependencies.get_http_request", return_value=request),
    ):
        with pytest.raises(ValueError, match="Invalid user ClickUp token"):
            await get_clickup_fetcher(_context(MainAppContext(base_config)))

    assert len(token_validation_cache) == 0


@pytest.mark.anyio
async def test_user_token_without_server_config():
    request = _http_request(user_clickup_auth_type="token", user_clickup_token="pk_user")

    with patch("mcp_clickup.servers.dependencies.get_http_request", return_value=request):
        with pytest.raises(ValueError, match="global configuration"):
            await get_clickup_fetcher(_context(MainAppContext()))
