"""
Test fixtures for model testing.
"""

from typing import Any

import pytest


@pytest.fixture
def labels_field_data() -> dict[str, Any]:
    """Return a labels custom field with two selected options."""
    return {
        "id": "cf-labels",
        "name": "Components",
        "type": "labels",
        "type_config": {
            "options": [
                {"id": "opt-1", "label": "Backend", "color": "#00ff00"},
                {"id": "opt-2", "name": "Frontend"},
                {"id": "opt-3"},
            ]
        },
        "value": ["opt-2", "opt-1"],
    }


@pytest.fixture
def drop_down_field_data() -> dict[str, Any]:
    """Return a drop_down custom field storing the selected orderindex."""
    return {
        "id": "cf-priority",
        "name": "Severity",
        "type": "drop_down",
        "type_config": {
            "options": [
                {"id": "o0", "name": "Low", "orderindex": 0},
                {"id": "o1", "name": "High", "orderindex": 1},
            ]
        },
        "value": 1,
    }


@pytest.fixture
def comment_blocks_data() -> list[dict[str, Any]]:
    """Return the structured blocks of a ClickUp comment."""
    return [
        {"text": "See ", "attributes": {}},
        {"text": "the docs", "attributes": {"link": {"url": "https://example.com"}}},
        {"text": "\n", "attributes": {}},
        {"text": "x = 1", "attributes": {"code-block": {"code-block": "python"}}},
        {"text": "y = 2", "attributes": {"code-block": {"code-block": "python"}}},
    ]
