"""Dependency provider for ClickUpFetcher with context awareness.

Provides get_clickup_fetcher for use in tool functions.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from cachetools import TTLCache
from fastmcp import Context
from fastmcp.server.dependencies import get_http_request
from starlette.requests import Request

from mcp_clickup.clickup import ClickUpConfig, ClickUpFetcher
from mcp_clickup.servers.context import MainAppContext

logger = logging.getLogger("mcp-clickup.servers.dependencies")

# Per-user fetchers whose token was validated against ClickUp, keyed by token hash
token_validation_cache: TTLCache[int, ClickUpFetcher] = TTLCache(maxsize=100, ttl=300)


def _create_user_config_for_fetcher(
    base_config: ClickUpConfig,
    auth_type: str,
    credentials: dict[str, Any],
) -> ClickUpConfig:
    """Create a user-specific configuration for a ClickUp fetcher.

    Args:
        base_config: The global ClickUpConfig to clone and modify.
        auth_type: The authentication type ('oauth' or 'token').
        credentials: Dictionary of credentials.

    Returns:
        ClickUpConfig with user-specific credentials.

    Raises:
        ValueError: If required credentials are missing or auth_type is unsupported.
    """
    if auth_type not in ["oauth", "token"]:
        raise ValueError(
            f"Unsupported auth_type '{auth_type}' for user-specific config creation. Expected 'oauth' or 'token'."
        )

    if auth_type == "oauth":
        user_access_token = credentials.get("oauth_access_token")
        if not user_access_token:
            raise ValueError(
                "OAuth access token missing in credentials for user auth_type 'oauth'"
            )
        return dataclasses.replace(
            base_config,
            auth_type="oauth",
            oauth_token=user_access_token,
            api_token=None,
        )

    user_token = credentials.get("api_token")
    if not user_token:
        raise ValueError("API token missing in credentials for user auth_type 'token'")
    return dataclasses.replace(
        base_config,
        auth_type="token",
        api_token=user_token,
        oauth_token=None,
    )


def _get_app_context(ctx: Context) -> MainAppContext | None:
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    return (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )


async def get_clickup_fetcher(ctx: Context) -> ClickUpFetcher:
    """Returns a ClickUpFetcher instance appropriate for the current request context.

    Args:
        ctx: The FastMCP context.

    Returns:
        ClickUpFetcher instance for the current user or global config.

    Raises:
        ValueError: If configuration or credentials are invalid.
    """
    logger.debug(f"get_clickup_fetcher: ENTERED. Context ID: {id(ctx)}")
    try:
        request: Request = get_http_request()
        logger.debug(
            f"get_clickup_fetcher: In HTTP request context. Request URL: {request.url}. "
            f"State.user_auth_type: {getattr(request.state, 'user_clickup_auth_type', 'N/A')}."
        )
        if hasattr(request.state, "clickup_fetcher") and request.state.clickup_fetcher:
            logger.debug("get_clickup_fetcher: Returning ClickUpFetcher from request.state.")
            return request.state.clickup_fetcher
        user_auth_type = getattr(request.state, "user_clickup_auth_type", None)
        if user_auth_type in ["oauth", "token"]:
            user_token = getattr(request.state, "user_clickup_token", None)
            if not user_token:
                raise ValueError("User ClickUp token found in state but is empty.")

            cache_key = hash((user_auth_type, user_token))
            cached_fetcher = token_validation_cache.get(cache_key)
            if cached_fetcher is not None:
                logger.debug("get_clickup_fetcher: Using cached user-specific ClickUpFetcher.")
                request.state.clickup_fetcher = cached_fetcher
                return cached_fetcher

            credentials = (
                {"oauth_access_token": user_token}
                if user_auth_type == "oauth"
                else {"api_token": user_token}
            )
            app_lifespan_ctx = _get_app_context(ctx)
            if not app_lifespan_ctx or not app_lifespan_ctx.full_clickup_config:
                raise ValueError(
                    "ClickUp global configuration (URL, SSL) is not available from lifespan context."
                )
            logger.info(
                f"Creating user-specific ClickUpFetcher (type: {user_auth_type}) (token ...{str(user_token)[-8:]})"
            )
            user_specific_config = _create_user_config_for_fetcher(
                base_config=app_lifespan_ctx.full_clickup_config,
                auth_type=user_auth_type,
                credentials=credentials,
            )
            try:
                user_clickup_fetcher = ClickUpFetcher(config=user_specific_config)
                current_user = user_clickup_fetcher.get_authorized_user()
                logger.debug(
                    f"get_clickup_fetcher: Validated ClickUp token for user ID: {current_user.get('id')}"
                )
            except Exception as e:
                logger.error(
                    f"get_clickup_fetcher: Failed to create/validate user-specific ClickUpFetcher: {e}",
                    exc_info=True,
                )
                raise ValueError(f"Invalid user ClickUp token or configuration: {e}") from e
            token_validation_cache[cache_key] = user_clickup_fetcher
            request.state.clickup_fetcher = user_clickup_fetcher
            return user_clickup_fetcher
        logger.debug(
            f"get_clickup_fetcher: No user-specific ClickUpFetcher. Auth type: {user_auth_type}. Will use global fallback."
        )
    except RuntimeError:
        logger.debug(
            "Not in an HTTP request context. Attempting global ClickUpFetcher for non-HTTP."
        )
    app_lifespan_ctx_global = _get_app_context(ctx)
    if app_lifespan_ctx_global and app_lifespan_ctx_global.full_clickup_config:
        logger.debug(
            "get_clickup_fetcher: Using global ClickUpFetcher from lifespan_context. "
            f"Global config auth_type: {app_lifespan_ctx_global.full_clickup_config.auth_type}"
        )
        return ClickUpFetcher(config=app_lifespan_ctx_global.full_clickup_config)
    logger.error("ClickUp configuration could not be resolved.")
    raise ValueError(
        "ClickUp client (fetcher) not available. Ensure server is configured correctly."
    )
