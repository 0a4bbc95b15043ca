"""Tests for the config service."""

import json
from pathlib import Path

import pytest

from taskcli.errors import ValidationError
from taskcli.models.config import ConfigKey
from taskcli.services.config import ConfigService, parse_key
from taskcli.storage.service import StorageService


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / ".task" / "config.json"


@pytest.fixture
def service(config_path: Path) -> ConfigService:
    """Create a ConfigService writing to a temp file."""
    return ConfigService(StorageService(config_path))


VALID_PAIRS = [
    ("user.name", "田中太郎"),
    ("user.email", "tanaka@example.com"),
    ("user.github", "tanaka"),
    ("defaults.priority", "low"),
    ("defaults.priority", "medium"),
    ("defaults.priority", "high"),
    ("defaults.priority", "critical"),
    ("defaults.sort", "created"),
    ("defaults.sort", "updated"),
    ("defaults.sort", "priority"),
    ("defaults.sort", "due"),
]


class TestGet:
    """Test reading config values."""

    @pytest.mark.parametrize(("key", "value"), VALID_PAIRS)
    def test_set_then_get(self, service: ConfigService, key: str, value: str) -> None:
        service.set(key, value)
        assert service.get(key) == value

    def test_get_unset_returns_none(self, service: ConfigService) -> None:
        assert service.get("user.name") is None

    def test_get_unset_sibling(self, service: ConfigService) -> None:
        """Only the written field is set; its siblings stay unset."""
        service.set("user.name", "Ada")
        assert service.get("user.github") is None

    def test_get_accepts_enum_key(self, service: ConfigService) -> None:
        service.set(ConfigKey.DEFAULTS_SORT, "due")
        assert service.get(ConfigKey.DEFAULTS_SORT) == "due"

    def test_get_unknown_key(self, service: ConfigService) -> None:
        with pytest.raises(ValidationError, match="Invalid config key"):
            service.get("user.phone")

    def test_get_through_null_section(
        self, service: ConfigService, config_path: Path
    ) -> None:
        """A hand-edited null section reads as unset."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"user": None, "defaults": {}}), encoding="utf-8")

        assert service.get("user.name") is None

    def test_get_numeric_value_as_string(
        self, service: ConfigService, config_path: Path
    ) -> None:
        config_path.parent.mkdir(parents=True)
        config_path.write_text(
            json.dumps({"user": {"name": 42}, "defaults": {}}), encoding="utf-8"
        )

        assert service.get("user.name") == "42"


class TestSet:
    """Test writing config values."""

    def test_set_persists_to_file(self, service: ConfigService, config_path: Path) -> None:
        service.set("user.name", "Ada")
        service.set("defaults.priority", "high")

        assert json.loads(config_path.read_text(encoding="utf-8")) == {
            "user": {"name": "Ada"},
            "defaults": {"priority": "high"},
        }

    def test_set_overwrites_value(self, service: ConfigService) -> None:
        service.set("defaults.sort", "created")
        service.set("defaults.sort", "due")
        assert service.get("defaults.sort") == "due"

    def test_invalid_priority_does_not_write(
        self, service: ConfigService, config_path: Path
    ) -> None:
        """A rejected value leaves the file untouched."""
        service.set("defaults.priority", "low")
        before = config_path.read_text(encoding="utf-8")

        with pytest.raises(ValidationError, match="invalid"):
            service.set("defaults.priority", "invalid")

        assert config_path.read_text(encoding="utf-8") == before

    def test_invalid_value_without_file_creates_nothing(
        self, service: ConfigService, config_path: Path
    ) -> None:
        with pytest.raises(ValidationError):
            service.set("defaults.sort", "alphabetical")
        assert not config_path.exists()

    def test_invalid_sort(self, service: ConfigService) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.set("defaults.sort", "invalid")
        assert "created/updated/priority/due" in exc_info.value.message

    def test_unknown_key(self, service: ConfigService, config_path: Path) -> None:
        with pytest.raises(ValidationError, match="Invalid config key"):
            service.set("user.phone", "123")
        assert not config_path.exists()


class TestValidate:
    """Test per-key validation rules."""

    @pytest.mark.parametrize("value", ["a@b.co", "tanaka@example.com", ""])
    def test_valid_email(self, service: ConfigService, value: str) -> None:
        service.validate("user.email", value)

    @pytest.mark.parametrize(
        "value",
        ["not-an-email", "a@b", "@b.co", "a@.co", "a b@c.co", "a@b.co\n", "a@b@c.co"],
    )
    def test_invalid_email(self, service: ConfigService, value: str) -> None:
        with pytest.raises(ValidationError, match="Invalid email address"):
            service.validate("user.email", value)

    def test_priority_message_names_allowed_values(self, service: ConfigService) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.validate("defaults.priority", "urgent")
        assert "urgent" in exc_info.value.message
        assert "low/medium/high/critical" in exc_info.value.message

    @pytest.mark.parametrize("key", ["user.name", "user.github"])
    def test_unconstrained_keys(self, service: ConfigService, key: str) -> None:
        service.validate(key, "anything at all [x]")


def test_load_and_save_delegate(service: ConfigService) -> None:
    config = service.load()
    config.set_value(ConfigKey.USER_GITHUB, "octocat")
    service.save(config)

    assert service.load() == config


def test_parse_key() -> None:
    assert parse_key("defaults.sort") is ConfigKey.DEFAULTS_SORT
    assert parse_key(ConfigKey.USER_NAME) is ConfigKey.USER_NAME
    with pytest.raises(ValidationError):
        parse_key("user")
