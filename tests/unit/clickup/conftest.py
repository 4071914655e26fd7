"""Test fixtures for ClickUp unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_clickup.clickup import ClickUpFetcher
from mcp_clickup.clickup.config import ClickUpConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {"CLICKUP_API_TOKEN": "pk_test_token"},
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a ClickUpConfig instance for a personal token."""
    return ClickUpConfig(
        url="https://api.clickup.com/api/v2",
        auth_type="token",
        api_token="pk_test_token",
    )


@pytest.fixture
def clickup_fetcher(mock_config):
    """Create a ClickUpFetcher whose HTTP helpers are mocks."""
    fetcher = ClickUpFetcher(config=mock_config)
    fetcher.get = MagicMock(return_value={})
    fetcher.post = MagicMock(return_value={})
    fetcher.put = MagicMock(return_value={})
    fetcher.delete = MagicMock(return_value={})
    return fetcher


@pytest.fixture
def sample_task():
    """A ClickUp task with custom fields and subtasks."""
    return {
        "id": "86abc",
        "name": "Ship the release",
        "status": {"status": "in progress", "color": "#ff0000"},
        "date_created": "1717200000000",
        "date_updated": "1717286400000",
        "start_date": None,
        "due_date": "1717372800000",
        "time_spent": 5400000,
        "description": "Release notes",
        "assignees": [
            {"id": 1, "username": "alice", "initials": "AL"},
            {"id": 2, "username": None, "initials": "BO"},
        ],
        "custom_fields": [
            {
                "id": "cf-labels",
                "name": "Components",
                "type": "labels",
                "type_config": {
                    "options": [
                        {"id": "opt-1", "label": "Backend"},
                        {"id": "opt-2", "label": "Frontend"},
                    ]
                },
                "value": ["opt-2", "opt-1"],
            },
            {
                "id": "cf-budget",
                "name": "Budget",
                "type": "currency",
                "type_config": {"currency_type": "USD"},
                "value": 1500,
            },
            {"id": "cf-empty", "name": "Notes", "type": "text"},
        ],
        "subtasks": [
            {
                "id": "86sub",
                "name": "Write changelog",
                "status": {"status": "open"},
                "assignees": [{"id": 1, "username": "alice", "initials": "AL"}],
                "custom_fields": [
                    {
                        "id": "cf-done",
                        "name": "Reviewed",
                        "type": "checkbox",
                        "value": "true",
                    }
                ],
            }
        ],
    }
