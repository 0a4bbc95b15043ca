"""Config schema and the closed set of config keys."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskPriority(str, Enum):
    """Priority a new task gets by default."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class SortOrder(str, Enum):
    """Default ordering for task listings."""

    CREATED = "created"
    UPDATED = "updated"
    PRIORITY = "priority"
    DUE = "due"


class ConfigKey(str, Enum):
    """Dot-notated keys accepted by ``task config``."""

    USER_NAME = "user.name"
    USER_EMAIL = "user.email"
    USER_GITHUB = "user.github"
    DEFAULTS_PRIORITY = "defaults.priority"
    DEFAULTS_SORT = "defaults.sort"

    @property
    def section(self) -> str:
        """Top-level section holding the key (``user`` or ``defaults``)."""
        return self.value.split(".", 1)[0]

    @property
    def field(self) -> str:
        """Field name inside the section."""
        return self.value.split(".", 1)[1]

    @classmethod
    def values(cls) -> list[str]:
        """Return the dot-path of every key."""
        return [key.value for key in cls]


class UserProfile(BaseModel):
    """User profile settings."""

    # Hand-edited files may hold numbers; read them back as text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Email address")
    github: str | None = Field(None, description="GitHub username")


class DefaultSettings(BaseModel):
    """Defaults applied to new tasks and listings.

    Stored as plain strings: rules are checked when a value is written, so a
    hand-edited file with an unknown value still loads.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    priority: str | None = Field(None, description="Default task priority")
    sort: str | None = Field(None, description="Default sort order")


class Config(BaseModel):
    """Persisted configuration."""

    user: UserProfile = Field(default_factory=UserProfile, description="User profile")
    defaults: DefaultSettings = Field(
        default_factory=DefaultSettings, description="Default task settings"
    )

    @field_validator("user", "defaults", mode="before")
    @classmethod
    def null_section_is_empty(cls, v: object) -> object:
        """Read a ``null`` section as an empty one."""
        return {} if v is None else v

    def get_value(self, key: ConfigKey) -> str | None:
        """Return the raw value stored under ``key``."""
        section: BaseModel = getattr(self, key.section)
        value: str | None = getattr(section, key.field)
        return value

    def set_value(self, key: ConfigKey, value: str) -> None:
        """Store ``value`` under ``key``."""
        section: BaseModel = getattr(self, key.section)
        setattr(section, key.field, value)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return the JSON-ready shape with unset fields left out."""
        data: dict[str, dict[str, str]] = self.model_dump(exclude_none=True)
        return data
