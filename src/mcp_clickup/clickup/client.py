"""Base client module for ClickUp API interactions."""

import logging
from typing import Any

import requests
from requests import Session
from requests.exceptions import HTTPError

from mcp_clickup.exceptions import MCPClickUpApiError, MCPClickUpAuthenticationError
from mcp_clickup.utils.ssl import configure_ssl_verification

from .config import ClickUpConfig

logger = logging.getLogger("mcp-clickup")


class ClickUpClient:
    """Base client for ClickUp API interactions."""

    config: ClickUpConfig
    session: Session

    def __init__(self, config: ClickUpConfig | None = None) -> None:
        """Initialize the ClickUp client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or ClickUpConfig.from_env()

        if not self.config.is_auth_configured():
            error_msg = f"ClickUp credentials missing for auth type '{self.config.auth_type}'"
            raise ValueError(error_msg)

        self.session = Session()
        self.session.headers.update(
            {
                "Authorization": self.config.auth_header,
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

        proxies = {}
        if self.config.http_proxy:
            proxies["http"] = self.config.http_proxy
        if self.config.https_proxy:
            proxies["https"] = self.config.https_proxy
        if self.config.no_proxy:
            proxies["no_proxy"] = self.config.no_proxy
        if proxies:
            self.session.proxies.update(proxies)
            logger.debug(f"ClickUp client proxies configured: {sorted(proxies)}")

        configure_ssl_verification(
            service_name="ClickUp",
            url=self.config.url,
            session=self.session,
            ssl_verify=self.config.ssl_verify,
        )

    @staticmethod
    def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
        """Drop unset query parameters and render booleans the way ClickUp expects."""
        if not params:
            return None
        cleaned: dict[str, Any] = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                cleaned[key] = "true" if value else "false"
            else:
                cleaned[key] = value
        return cleaned or None

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Send a request to the ClickUp API and decode the JSON response.

        Args:
            method: HTTP method
            path: API path relative to the configured base URL (e.g. '/task/abc')
            params: Optional query parameters
            json: Optional JSON body

        Returns:
            The decoded response body, or an empty dict for empty bodies

        Raises:
            MCPClickUpAuthenticationError: If ClickUp rejects the credentials (401/403)
            MCPClickUpApiError: For any other error response or transport failure
        """
        url = f"{self.config.url}/{path.lstrip('/')}"
        logger.debug(f"ClickUp API request: {method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                params=self._clean_params(params),
                json=json,
                verify=self.config.ssl_verify,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except HTTPError as http_err:
            raise self._translate_http_error(http_err) from http_err
        except requests.RequestException as req_err:
            error_msg = f"Network error calling ClickUp API ({method} {path}): {req_err}"
            logger.error(error_msg)
            raise MCPClickUpApiError(error_msg) from req_err

        if not response.content:
            return {}
        try:
            result = response.json()
        except ValueError as json_err:
            error_msg = f"ClickUp API returned a non-JSON response for {method} {path}"
            logger.error(error_msg)
            raise MCPClickUpApiError(error_msg, status_code=response.status_code) from json_err

        if not isinstance(result, dict):
            return {"result": result}
        return result

    def _translate_http_error(self, http_err: HTTPError) -> Exception:
        response = http_err.response
        status_code = response.status_code if response is not None else None
        if status_code in (401, 403):
            error_msg = (
                f"Authentication failed for ClickUp API ({status_code}). "
                "Token may be expired or invalid. Please verify credentials."
            )
            logger.error(error_msg)
            return MCPClickUpAuthenticationError(error_msg)

        detail = ""
        error_code = None
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                detail = body.get("err") or ""
                error_code = body.get("ECODE")
            if not detail:
                detail = response.text or str(http_err)
        error_msg = f"ClickUp API error ({status_code}): {detail or http_err}"
        if error_code:
            error_msg = f"{error_msg} [{error_code}]"
        logger.error(error_msg)
        return MCPClickUpApiError(error_msg, status_code=status_code, error_code=error_code)

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self._request("POST", path, params=params, json=json or {})

    def put(self, path: str, json: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._request("PUT", path, json=json or {})

    def delete(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._request("DELETE", path, params=params)

    def get_authorized_user(self) -> dict[str, Any]:
        """Return the user owning the configured token (GET /user)."""
        result = self.get("/user")
        return result.get("user", result)
