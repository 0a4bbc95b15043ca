"""Business logic services for taskcli."""

from taskcli.services.config import ConfigService

__all__ = ["ConfigService"]
