"""Tests for the ClickUp task dependency models."""

import pytest

from mcp_clickup.models.clickup import (
    TaskDependency,
    make_dependency_id,
    parse_dependency_id,
)


def test_dependency_id_round_trip():
    dependency_id = make_dependency_id("abc", "def")
    assert dependency_id == "abc:def"
    assert parse_dependency_id(dependency_id) == ("abc", "def")


def test_parse_dependency_id_strips_whitespace():
    assert parse_dependency_id(" abc:def ") == ("abc", "def")


@pytest.mark.parametrize("dependency_id", [None, "abc", "abc:", ":def", "a:b:c"])
def test_parse_dependency_id_invalid(dependency_id):
    with pytest.raises(ValueError, match="Invalid dependency id"):
        parse_dependency_id(dependency_id)


class TestTaskDependency:
    """Tests for the TaskDependency model."""

    def test_from_api_response_waiting_on(self):
        dependency = TaskDependency.from_api_response(
            {"task_id": "a", "depends_on": "b", "date_created": "1717200000000"},
            task_id="a",
        )

        assert dependency.type == "waiting_on"
        assert dependency.id == "a:b"
        assert dependency.other_task_id == "b"
        assert dependency.date_created == "2024-06-01 00:00:00"

    def test_from_api_response_blocking(self):
        dependency = TaskDependency.from_api_response(
            {"task_id": "a", "depends_on": "b", "userid": 7}, task_id="b"
        )

        assert dependency.type == "blocking"
        assert dependency.other_task_id == "a"
        assert dependency.to_simplified_dict() == {
            "id": "a:b",
            "type": "blocking",
            "task_id": "a",
            "depends_on": "b",
            "other_task_id": "a",
            "user_id": "7",
        }

    def test_from_api_response_empty(self):
        dependency = TaskDependency.from_api_response({})
        assert dependency.waiting_task_id == ""
        assert dependency.type == "waiting_on"
