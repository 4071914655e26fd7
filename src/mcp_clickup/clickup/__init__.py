"""ClickUp API module for mcp_clickup.

This module provides the ClickUp API client implementations.
"""

from .client import ClickUpClient
from .comments import CommentsMixin
from .config import ClickUpConfig
from .dependencies import DependenciesMixin
from .folders import FoldersMixin
from .lists import ListsMixin
from .tasks import TasksMixin
from .views import ViewsMixin
from .workspaces import WorkspacesMixin


class ClickUpFetcher(
    WorkspacesMixin,
    TasksMixin,
    ListsMixin,
    FoldersMixin,
    CommentsMixin,
    DependenciesMixin,
    ViewsMixin,
):
    """
    The main ClickUp client class providing access to all ClickUp operations.

    This class inherits from multiple mixins that provide specific functionality:
    - WorkspacesMixin: Workspace and seat operations
    - TasksMixin: Task operations, custom field resolution and summaries
    - ListsMixin: List operations
    - FoldersMixin: Folder operations
    - CommentsMixin: Task, list and threaded comment operations
    - DependenciesMixin: Task dependency operations
    - ViewsMixin: View operations
    """

    pass


__all__ = ["ClickUpFetcher", "ClickUpConfig", "ClickUpClient"]
