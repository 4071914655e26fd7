"""
Base models and utility classes for the MCP ClickUp API models.

This module provides the base class shared by the ClickUp models so that every
model converts API responses and simplified dictionaries the same way.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from mcp_clickup.utils.date import parse_date

from .constants import EMPTY_STRING

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    This provides a standard interface for converting API responses
    to models and for converting models to simplified dictionaries
    for API responses.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for API responses.

        Returns:
            A dictionary with only the essential fields for API responses
        """
        return self.model_dump(exclude_none=True)


class TimestampMixin:
    """
    Mixin for handling ClickUp timestamp formats.
    """

    @staticmethod
    def format_timestamp(timestamp: str | int | None) -> str:
        """
        Format a ClickUp timestamp (epoch milliseconds) to a human-readable format.

        Args:
            timestamp: Epoch milliseconds as a number or digit string

        Returns:
            A formatted date string or empty string if the input is missing
        """
        if timestamp is None or timestamp == "":
            return EMPTY_STRING

        try:
            dt = parse_date(timestamp)
        except (ValueError, TypeError, OverflowError):
            return str(timestamp)
        if dt is None:
            return EMPTY_STRING
        return dt.strftime("%Y-%m-%d %H:%M:%S")
