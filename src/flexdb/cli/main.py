"""Main CLI entry point."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from flexdb import __version__

from .common import load_settings

# Load .env from cwd
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


@click.group()
@click.version_option(version=__version__, prog_name="flexdb")
@click.option("--debug", is_flag=True, help="Log every request")
def cli(debug: bool):
    """FlexDB CLI - Manage stores and documents."""
    settings = load_settings()
    level = "DEBUG" if debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def setup_cli():
    """Register all commands."""
    from .documents import doc
    from .stores import store

    cli.add_command(store)
    cli.add_command(doc)


setup_cli()


def main():
    """Entry point for flexdb CLI."""
    cli()


if __name__ == "__main__":
    main()
