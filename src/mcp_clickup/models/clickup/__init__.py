"""
ClickUp data models for the MCP ClickUp integration.

This package provides Pydantic models for ClickUp API data structures,
organized by entity type.
"""

from .comment import CodeBlock, CommentAttributes, CommentBlock, CommentLink
from .custom_field import (
    CheckboxField,
    ClickUpCustomField,
    CurrencyField,
    CustomFieldOption,
    DateField,
    DropDownField,
    LabelsField,
    ListValue,
    LocationField,
    MissingValue,
    OtherField,
    PassthroughField,
    RawValue,
    ResolvedValue,
    TextValue,
    resolve_field_value,
    resolve_task_custom_fields,
)
from .dependency import (
    DependencyType,
    TaskDependency,
    make_dependency_id,
    parse_dependency_id,
)
from .task import SubtaskSummary, TaskSummary, build_task_summary, format_time_spent
from .view import ClickUpView, ViewAccess

__all__ = [
    # Custom fields
    "ClickUpCustomField",
    "CustomFieldOption",
    "LabelsField",
    "DropDownField",
    "CurrencyField",
    "DateField",
    "CheckboxField",
    "PassthroughField",
    "LocationField",
    "OtherField",
    "ResolvedValue",
    "TextValue",
    "ListValue",
    "RawValue",
    "MissingValue",
    "resolve_field_value",
    "resolve_task_custom_fields",
    # Tasks
    "TaskSummary",
    "SubtaskSummary",
    "build_task_summary",
    "format_time_spent",
    # Comments
    "CommentBlock",
    "CommentAttributes",
    "CommentLink",
    "CodeBlock",
    # Dependencies
    "DependencyType",
    "TaskDependency",
    "make_dependency_id",
    "parse_dependency_id",
    # Views
    "ClickUpView",
    "ViewAccess",
]
