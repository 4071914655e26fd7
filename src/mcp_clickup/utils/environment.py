"""Utility functions related to environment checking."""

import logging
import os

logger = logging.getLogger("mcp-clickup.utils.environment")


def get_available_services() -> dict[str, bool]:
    """Determine which services are available based on environment variables."""
    clickup_is_setup = False
    if os.getenv("CLICKUP_OAUTH_ACCESS_TOKEN"):
        clickup_is_setup = True
        logger.info("Using ClickUp OAuth access token authentication")
    elif os.getenv("CLICKUP_API_TOKEN"):
        clickup_is_setup = True
        logger.info("Using ClickUp personal API token authentication")
    else:
        logger.info(
            "ClickUp is not configured or required environment variables are missing."
        )

    return {"clickup": clickup_is_setup}
