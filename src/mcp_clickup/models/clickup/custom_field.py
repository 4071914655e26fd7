"""
ClickUp custom field models.

Each ClickUp custom field type is parsed into its own model carrying only the
configuration that type needs. Resolving a field turns the raw stored value
(option ids, order indexes, epoch timestamps, ...) into a human-readable
value. Resolution never raises: every branch falls back to the raw value.
"""

import json
import logging
from typing import Any, ClassVar

from pydantic import ConfigDict

from mcp_clickup.utils.date import parse_date

from ..base import ApiModel
from ..constants import CHECKBOX_CHECKED, CHECKBOX_UNCHECKED, DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


class ResolvedValue(ApiModel):
    """Display form of a custom field value."""

    model_config = ConfigDict(frozen=True)

    def to_display(self) -> Any:
        """Return the JSON-ready display value."""
        raise NotImplementedError


class TextValue(ResolvedValue):
    value: str

    def to_display(self) -> str:
        return self.value


class ListValue(ResolvedValue):
    values: list[Any]

    def to_display(self) -> list[Any]:
        return list(self.values)


class RawValue(ResolvedValue):
    """The stored value, passed through untouched."""

    value: Any

    def to_display(self) -> Any:
        return self.value


class MissingValue(ResolvedValue):
    def to_display(self) -> None:
        return None


class CustomFieldOption(ApiModel):
    """
    Model representing an option of a labels or drop_down field.
    """

    id: Any = None
    orderindex: Any = None
    name: str | None = None
    label: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "CustomFieldOption":
        if not isinstance(data, dict):
            return cls()
        name = data.get("name")
        label = data.get("label")
        return cls(
            id=data.get("id"),
            orderindex=data.get("orderindex"),
            name=str(name) if name is not None else None,
            label=str(label) if label is not None else None,
        )


def _parse_options(type_config: dict[str, Any]) -> list[CustomFieldOption] | None:
    options = type_config.get("options")
    if not isinstance(options, list):
        return None
    return [
        CustomFieldOption.from_api_response(option)
        for option in options
        if isinstance(option, dict)
    ]


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ClickUpCustomField(ApiModel):
    """
    Base model for a custom field attached to a ClickUp task.

    Use `from_api_response` to build the model matching the field's type.
    """

    field_type: ClassVar[str] = "other"

    id: str | None = None
    name: str | None = None
    type: str = "other"
    value: Any = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ClickUpCustomField":
        """
        Create the custom field model matching the record's type.

        Args:
            data: A custom field record from a ClickUp task

        Returns:
            An instance of the subclass registered for the field type,
            `OtherField` for unknown types
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary custom field, returning default")
            return OtherField()

        field_type = data.get("type")
        field_cls = FIELD_TYPES.get(field_type, OtherField)
        type_config = data.get("type_config")
        if not isinstance(type_config, dict):
            type_config = {}

        field_id = data.get("id")
        name = data.get("name")
        return field_cls(
            id=str(field_id) if field_id is not None else None,
            name=str(name) if name is not None else None,
            type=field_type if isinstance(field_type, str) else "other",
            value=data.get("value"),
            **field_cls._config_from_type_config(type_config),
        )

    @classmethod
    def _config_from_type_config(cls, type_config: dict[str, Any]) -> dict[str, Any]:
        return {}

    def resolve(self, default_currency: str = DEFAULT_CURRENCY) -> ResolvedValue:
        """
        Resolve the stored value to its display form.

        Args:
            default_currency: Currency code for currency fields without one

        Returns:
            `MissingValue` when no value is stored, otherwise the type-specific
            display value
        """
        if self.value is None:
            return MissingValue()
        return self._resolve_present(default_currency)

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        return RawValue(value=self.value)


class LabelsField(ClickUpCustomField):
    """Stores a list of option ids."""

    field_type: ClassVar[str] = "labels"

    options: list[CustomFieldOption] | None = None

    @classmethod
    def _config_from_type_config(cls, type_config: dict[str, Any]) -> dict[str, Any]:
        return {"options": _parse_options(type_config)}

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        if not isinstance(self.value, list) or self.options is None:
            return RawValue(value=self.value)
        by_id = {}
        for option in self.options:
            by_id.setdefault(option.id, option)
        labels = []
        for option_id in self.value:
            option = by_id.get(option_id) if _hashable(option_id) else None
            if option is None:
                labels.append(option_id)
            else:
                labels.append(option.label or option.name or option_id)
        return ListValue(values=labels)


class DropDownField(ClickUpCustomField):
    """Stores the orderindex of the selected option."""

    field_type: ClassVar[str] = "drop_down"

    options: list[CustomFieldOption] | None = None

    @classmethod
    def _config_from_type_config(cls, type_config: dict[str, Any]) -> dict[str, Any]:
        return {"options": _parse_options(type_config)}

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        if (
            self.options is None
            or isinstance(self.value, bool)
            or not isinstance(self.value, int | float)
        ):
            return RawValue(value=self.value)
        for option in self.options:
            if isinstance(option.orderindex, bool):
                continue
            if isinstance(option.orderindex, int | float) and option.orderindex == self.value:
                if option.name:
                    return TextValue(value=option.name)
                break
        return RawValue(value=self.value)


class CurrencyField(ClickUpCustomField):
    field_type: ClassVar[str] = "currency"

    currency_type: str | None = None

    @classmethod
    def _config_from_type_config(cls, type_config: dict[str, Any]) -> dict[str, Any]:
        currency_type = type_config.get("currency_type")
        return {"currency_type": str(currency_type) if currency_type else None}

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        if self.value == "":
            return MissingValue()
        currency = self.currency_type or default_currency
        return TextValue(value=f"{_format_number(self.value)} {currency}")


class DateField(ClickUpCustomField):
    """Stores epoch milliseconds, usually as a digit string."""

    field_type: ClassVar[str] = "date"

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        if self.value == "" or isinstance(self.value, bool):
            return MissingValue() if self.value == "" else RawValue(value=self.value)
        try:
            millis = (
                int(self.value)
                if isinstance(self.value, int)
                else int(float(self.value))
            )
            day = parse_date(millis).date()
        except (TypeError, ValueError, OverflowError, OSError):
            logger.debug(f"Unparseable date custom field value: {self.value!r}")
            return RawValue(value=self.value)
        return TextValue(value=day.isoformat())


class CheckboxField(ClickUpCustomField):
    field_type: ClassVar[str] = "checkbox"

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        checked = bool(self.value)
        # ClickUp sometimes reports checkbox values as strings
        if isinstance(self.value, str):
            checked = self.value.strip().lower() not in ("", "false", "0")
        return TextValue(value=CHECKBOX_CHECKED if checked else CHECKBOX_UNCHECKED)


class PassthroughField(ClickUpCustomField):
    """Number, text and contact fields whose stored value is already readable."""

    field_type: ClassVar[str] = "text"


class LocationField(ClickUpCustomField):
    field_type: ClassVar[str] = "location"

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        if isinstance(self.value, dict):
            address = self.value.get("formatted_address")
            if address:
                return TextValue(value=str(address))
        return RawValue(value=self.value)


class OtherField(ClickUpCustomField):
    """Any type without dedicated handling."""

    def _resolve_present(self, default_currency: str) -> ResolvedValue:
        if isinstance(self.value, dict | list):
            return TextValue(
                value=json.dumps(
                    self.value, separators=(",", ":"), ensure_ascii=False, default=str
                )
            )
        return RawValue(value=self.value)


def _hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


FIELD_TYPES: dict[str, type[ClickUpCustomField]] = {
    "labels": LabelsField,
    "drop_down": DropDownField,
    "currency": CurrencyField,
    "date": DateField,
    "checkbox": CheckboxField,
    "number": PassthroughField,
    "text": PassthroughField,
    "short_text": PassthroughField,
    "email": PassthroughField,
    "url": PassthroughField,
    "phone": PassthroughField,
    "location": LocationField,
}


def resolve_field_value(
    field: dict[str, Any] | ClickUpCustomField,
    default_currency: str = DEFAULT_CURRENCY,
) -> ResolvedValue:
    """
    Resolve a raw custom field record to its display value.

    Args:
        field: A custom field record as returned by ClickUp, or a parsed model
        default_currency: Currency code for currency fields without one

    Returns:
        The resolved value variant
    """
    if not isinstance(field, ClickUpCustomField):
        field = ClickUpCustomField.from_api_response(field)
    return field.resolve(default_currency=default_currency)


def resolve_task_custom_fields(
    task: dict[str, Any], default_currency: str = DEFAULT_CURRENCY
) -> dict[str, Any]:
    """
    Attach a `resolved_value` to every custom field of a task and its subtasks.

    The task is not modified; a shallow copy carrying copies of the custom
    field records is returned, with field order preserved.

    Args:
        task: A task as returned by ClickUp
        default_currency: Currency code for currency fields without one

    Returns:
        The task copy with resolved custom fields
    """
    if not isinstance(task, dict):
        return task

    resolved = dict(task)
    custom_fields = task.get("custom_fields")
    if isinstance(custom_fields, list):
        resolved["custom_fields"] = [
            {
                **field,
                "resolved_value": resolve_field_value(
                    field, default_currency=default_currency
                ).to_display(),
            }
            if isinstance(field, dict)
            else field
            for field in custom_fields
        ]

    subtasks = task.get("subtasks")
    if isinstance(subtasks, list):
        resolved["subtasks"] = [
            resolve_task_custom_fields(subtask, default_currency=default_currency)
            for subtask in subtasks
        ]
    return resolved
