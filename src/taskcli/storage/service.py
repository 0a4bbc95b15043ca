"""JSON file storage for the config."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from taskcli.errors import StorageError
from taskcli.models.config import Config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".task") / "config.json"


class StorageService:
    """Reads and writes the config file."""

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH) -> None:
        """
        Initialize the storage service.

        Args:
            config_path: Location of the JSON config file. Relative paths are
                resolved against the working directory at access time.
        """
        self.config_path = Path(config_path)

    def load(self) -> Config:
        """
        Load the config from disk, creating it on first use.

        Returns:
            The stored config, or the empty default shape if no file existed.

        Raises:
            StorageError: If the file cannot be read or parsed.
        """
        try:
            if not self.exists():
                return self.initialize()

            raw = self.config_path.read_text(encoding="utf-8")
            return Config.model_validate(json.loads(raw))
        except StorageError:
            raise
        except (OSError, ValueError, PydanticValidationError) as exc:
            raise StorageError("Failed to load config file", exc) from exc

    def save(self, config: Config) -> None:
        """
        Write the whole config to disk, replacing any previous content.

        Args:
            config: Config to persist.

        Raises:
            StorageError: If the directory or file cannot be written.
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            data = json.dumps(config.to_dict(), indent=2, ensure_ascii=False)
            self.config_path.write_text(data, encoding="utf-8")
        except OSError as exc:
            raise StorageError("Failed to save config file", exc) from exc
        logger.debug("Saved config to %s", self.config_path)

    def exists(self) -> bool:
        """Return True if the config file is present."""
        try:
            return self.config_path.exists()
        except OSError:
            return False

    def initialize(self) -> Config:
        """Persist and return the empty default config."""
        config = Config()
        logger.debug("Creating default config at %s", self.config_path)
        self.save(config)
        return config
