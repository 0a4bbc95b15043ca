"""Entry point for running the CLI as a module."""

from taskcli.cli import app


def main() -> None:
    """Run the task CLI."""
    app(prog_name="task")


if __name__ == "__main__":
    main()
