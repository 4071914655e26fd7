"""Tests for the ClickUp view models."""

import pytest

from mcp_clickup.models.clickup import ClickUpView


class TestClickUpView:
    """Tests for the ClickUpView model."""

    @pytest.fixture
    def view_data(self):
        return {
            "id": "3c-105",
            "name": "Roadmap",
            "type": "gantt",
            "parent": {"id": "90100", "type": 4},
            "orderindex": "2",
            "date_created": "1717200000000",
            "creator": 42,
            "visibility": "public",
            "settings": {"show_subtasks": 1},
        }

    def test_from_api_response(self, view_data):
        view = ClickUpView.from_api_response(view_data)

        assert view.id == "3c-105"
        assert view.parent_type == "space"
        assert view.access == "shared"
        assert view.orderindex == 2
        assert view.required is False

    def test_to_simplified_dict(self, view_data):
        result = ClickUpView.from_api_response(view_data, required=True).to_simplified_dict()

        assert result == {
            "id": "3c-105",
            "name": "Roadmap",
            "type": "gantt",
            "access": "shared",
            "parent": {"id": "90100", "type": "space"},
            "orderindex": 2,
            "date_created": "2024-06-01 00:00:00",
            "creator_id": "42",
            "required": True,
            "settings": {"show_subtasks": 1},
        }

    def test_access(self, view_data):
        view_data["visibility"] = "private"
        assert ClickUpView.from_api_response(view_data).access == "private"

        view_data["protected"] = True
        assert ClickUpView.from_api_response(view_data).access == "protected"

    def test_unknown_parent_type_kept_as_text(self, view_data):
        view_data["parent"] = {"id": "1", "type": 12}
        assert ClickUpView.from_api_response(view_data).parent_type == "12"

    def test_empty_data(self):
        view = ClickUpView.from_api_response({})
        assert view.to_simplified_dict() == {
            "id": "",
            "name": "Unknown",
            "type": "Unknown",
            "access": "shared",
        }
