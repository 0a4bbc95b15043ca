"""Command-line interface for taskcli."""

from taskcli.cli.app import app

__all__ = ["app"]
