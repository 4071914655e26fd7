"""Constants specific to ClickUp operations."""

DEFAULT_CLICKUP_API_URL = "https://api.clickup.com/api/v2"

DEFAULT_TIMEOUT_SECONDS = 30

# Container types accepted by the list and view tools.
LIST_CONTAINER_TYPES: tuple[str, ...] = ("folder", "space")
VIEW_PARENT_TYPES: tuple[str, ...] = ("space", "folder", "list")
