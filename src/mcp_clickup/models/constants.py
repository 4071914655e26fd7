"""
Constants and default values for model conversions.

This module centralizes the default values and fallbacks used when
converting ClickUp API responses to models.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"

#
# Task summary
#
DESCRIPTION_PREVIEW_LIMIT = 500
TRUNCATION_MARKER = "..."
MILLISECONDS_PER_HOUR = 3_600_000

#
# Custom fields
#
CHECKBOX_CHECKED = "Yes"
CHECKBOX_UNCHECKED = "No"
# Currency code used for currency fields whose type_config carries none;
# overridable through CLICKUP_DEFAULT_CURRENCY.
DEFAULT_CURRENCY = "EUR"
