"""Tests for the ClickUp task summary models."""

import pytest

from mcp_clickup.models.clickup import (
    SubtaskSummary,
    TaskSummary,
    build_task_summary,
    format_time_spent,
)


@pytest.mark.parametrize(
    "time_spent,expected",
    [
        (5400000, "1.5h"),
        (7200000, "2h"),
        ("3600000", "1h"),
        (180000, "0.1h"),
        (3780000, "1.1h"),
        (100, "0h"),
        (0, None),
        (None, None),
        (True, None),
        ("soon", None),
    ],
)
def test_format_time_spent(time_spent, expected):
    assert format_time_spent(time_spent) == expected


class TestTaskSummary:
    """Tests for the TaskSummary model."""

    @pytest.fixture
    def resolved_task(self):
        return {
            "id": "t1",
            "name": "Ship it",
            "status": {"status": "done"},
            "date_created": "1717200000000",
            "date_updated": "1717286400000",
            "start_date": None,
            "due_date": "1717372800000",
            "time_spent": 7200000,
            "description": "Short description",
            "assignees": [{"username": "alice", "initials": "AL"}, {"initials": "BO"}],
            "custom_fields": [
                {"name": "Budget", "resolved_value": "10 EUR"},
                {"name": "Empty", "resolved_value": None},
                {"name": "Unresolved"},
            ],
        }

    def test_from_api_response(self, resolved_task):
        summary = TaskSummary.from_api_response(resolved_task)

        assert summary.id == "t1"
        assert summary.status == "done"
        assert summary.time_spent == "2h"
        assert summary.assignees == ["alice", "BO"]
        assert summary.custom_fields == [{"name": "Budget", "value": "10 EUR"}]
        assert summary.subtasks is None

    def test_to_simplified_dict_keeps_missing_dates(self, resolved_task):
        result = build_task_summary(resolved_task)

        assert result["start_date"] is None
        assert result["due_date"] == "1717372800000"
        assert result["description"] == "Short description"
        assert "subtasks" not in result

    def test_long_description_is_truncated(self, resolved_task):
        resolved_task["description"] = "x" * 600

        result = build_task_summary(resolved_task)

        assert result["description"] == "x" * 500 + "..."

    def test_description_at_limit_is_kept(self, resolved_task):
        resolved_task["description"] = "y" * 500
        assert build_task_summary(resolved_task)["description"] == "y" * 500

    def test_empty_description_is_omitted(self, resolved_task):
        resolved_task["description"] = ""
        assert "description" not in build_task_summary(resolved_task)

    def test_subtasks(self, resolved_task):
        resolved_task["subtasks"] = [
            {
                "id": "s1",
                "name": "Sub",
                "status": {"status": "open"},
                "assignees": [{"username": "alice", "initials": "AL"}],
            }
        ]

        result = build_task_summary(resolved_task)

        assert result["subtasks"] == [
            {"id": "s1", "name": "Sub", "status": "open", "assignees": ["AL"]}
        ]

    def test_without_custom_fields(self):
        result = build_task_summary({"id": "t2", "name": "Bare"})

        assert result == {
            "id": "t2",
            "name": "Bare",
            "status": None,
            "date_created": None,
            "date_updated": None,
            "start_date": None,
            "due_date": None,
            "time_spent": None,
            "assignees": [],
        }

    def test_empty_data(self):
        assert TaskSummary.from_api_response({}) == TaskSummary()

    def test_subtask_summary_defaults(self):
        assert SubtaskSummary.from_api_response("bad").to_simplified_dict() == {
            "id": None,
            "name": None,
            "status": None,
            "assignees": [],
        }

    def test_non_string_identifiers_are_stringified(self):
        result = build_task_summary(
            {
                "id": 123,
                "name": 456,
                "status": {"status": 7},
                "subtasks": [{"id": 9, "name": None, "status": {"status": False}}],
            }
        )

        assert result["id"] == "123"
        assert result["name"] == "456"
        assert result["status"] == "7"
        assert result["subtasks"] == [
            {"id": "9", "name": None, "status": "False", "assignees": []}
        ]

    def test_malformed_status_is_null(self):
        assert build_task_summary({"id": "t3", "status": "open"})["status"] is None
