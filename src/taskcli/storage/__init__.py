"""File-backed persistence for taskcli."""

from taskcli.storage.service import DEFAULT_CONFIG_PATH, StorageService

__all__ = ["DEFAULT_CONFIG_PATH", "StorageService"]
