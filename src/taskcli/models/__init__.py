"""Data models for taskcli."""

from taskcli.models.config import (
    Config,
    ConfigKey,
    DefaultSettings,
    SortOrder,
    TaskPriority,
    UserProfile,
)

__all__ = [
    "Config",
    "ConfigKey",
    "DefaultSettings",
    "SortOrder",
    "TaskPriority",
    "UserProfile",
]
