"""Service for reading, writing and validating config values."""

from __future__ import annotations

import logging
import re

from taskcli.errors import ValidationError
from taskcli.models.config import Config, ConfigKey, SortOrder, TaskPriority
from taskcli.storage.service import StorageService

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def parse_key(key: ConfigKey | str) -> ConfigKey:
    """
    Convert a dot-path string into a ConfigKey.

    Args:
        key: A ConfigKey or its dot-path value (e.g. ``user.name``).

    Returns:
        The matching ConfigKey.

    Raises:
        ValidationError: If the key is not one of the known config keys.
    """
    if isinstance(key, ConfigKey):
        return key
    try:
        return ConfigKey(key)
    except ValueError:
        raise ValidationError(
            f"Invalid config key: {key}. Expected one of: {', '.join(ConfigKey.values())}"
        ) from None


class ConfigService:
    """Loads, saves and validates configuration through a StorageService."""

    def __init__(self, storage: StorageService) -> None:
        """
        Initialize the config service.

        Args:
            storage: Storage backend for the config file
        """
        self.storage = storage

    def load(self) -> Config:
        """Load the whole config."""
        return self.storage.load()

    def save(self, config: Config) -> None:
        """Save the whole config."""
        self.storage.save(config)

    def get(self, key: ConfigKey | str) -> str | None:
        """
        Get a single config value.

        Args:
            key: Dot-notated config key

        Returns:
            The value as a string, or None if it has not been set.
        """
        config_key = parse_key(key)
        value = self.load().get_value(config_key)
        return None if value is None else str(value)

    def set(self, key: ConfigKey | str, value: str) -> None:
        """
        Validate and store a single config value.

        Args:
            key: Dot-notated config key
            value: Value to store

        Raises:
            ValidationError: If the value breaks the key's rule. Nothing is
                written in that case.
        """
        config_key = parse_key(key)
        self.validate(config_key, value)

        config = self.load()
        config.set_value(config_key, value)
        self.save(config)
        logger.debug("Set %s", config_key.value)

    def validate(self, key: ConfigKey | str, value: str) -> None:
        """Raise ValidationError if ``value`` is not allowed for ``key``."""
        config_key = parse_key(key)

        if config_key is ConfigKey.DEFAULTS_PRIORITY:
            allowed = [priority.value for priority in TaskPriority]
            if value not in allowed:
                raise ValidationError(
                    f"Invalid priority: {value}. Expected one of: {'/'.join(allowed)}"
                )

        elif config_key is ConfigKey.DEFAULTS_SORT:
            allowed = [order.value for order in SortOrder]
            if value not in allowed:
                raise ValidationError(
                    f"Invalid sort order: {value}. Expected one of: {'/'.join(allowed)}"
                )

        # An empty email clears the field
        elif config_key is ConfigKey.USER_EMAIL and value:
            if not EMAIL_PATTERN.fullmatch(value):
                raise ValidationError(
                    f"Invalid email address: {value}. Expected format: name@example.com"
                )
