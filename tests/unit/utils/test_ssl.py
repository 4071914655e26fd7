"""Tests for the SSL utilities module."""

import ssl
from unittest.mock import MagicMock, patch

from requests.adapters import HTTPAdapter
from requests.sessions import Session

from mcp_clickup.utils.ssl import SSLIgnoreAdapter, configure_ssl_verification


def test_ssl_ignore_adapter_cert_verify():
    """Test that SSLIgnoreAdapter always skips certificate verification."""
    adapter = SSLIgnoreAdapter()
    conn = MagicMock()

    with patch.object(HTTPAdapter, "cert_verify") as mock_cert_verify:
        adapter.cert_verify(conn, "https://api.clickup.com", verify=True, cert=None)
        mock_cert_verify.assert_called_once_with(
            conn, "https://api.clickup.com", verify=False, cert=None
        )


def test_ssl_ignore_adapter_init_poolmanager():
    adapter = SSLIgnoreAdapter()

    with patch("ssl.create_default_context") as mock_create_context:
        mock_context = MagicMock()
        mock_create_context.return_value = mock_context
        with patch("mcp_clickup.utils.ssl.PoolManager") as mock_pool_manager_cls:
            adapter.init_poolmanager(5, 10, block=True)

    assert mock_context.check_hostname is False
    assert mock_context.verify_mode == ssl.CERT_NONE
    _, kwargs = mock_pool_manager_cls.call_args
    assert kwargs["num_pools"] == 5
    assert kwargs["maxsize"] == 10
    assert kwargs["block"] is True
    assert kwargs["ssl_context"] == mock_context


def test_configure_ssl_verification_enabled():
    """Test that nothing is mounted when verification stays on."""
    session = Session()
    original_adapters_count = len(session.adapters)

    configure_ssl_verification(
        service_name="ClickUp",
        url="https://api.clickup.com/api/v2",
        session=session,
        ssl_verify=True,
    )

    assert len(session.adapters) == original_adapters_count


def test_configure_ssl_verification_disabled():
    """Test that the ignore adapter is mounted for the configured host only."""
    session = Session()
    original_adapters_count = len(session.adapters)

    with patch("mcp_clickup.utils.ssl.logger") as mock_logger:
        configure_ssl_verification(
            service_name="ClickUp",
            url="https://clickup.internal.example.com/api/v2",
            session=session,
            ssl_verify=False,
        )

    mock_logger.warning.assert_called_once()
    assert len(session.adapters) == original_adapters_count + 2
    assert isinstance(
        session.adapters["https://clickup.internal.example.com"], SSLIgnoreAdapter
    )
    assert isinstance(
        session.adapters["http://clickup.internal.example.com"], SSLIgnoreAdapter
    )
