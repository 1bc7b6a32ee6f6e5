"""
owo CLI.

A simple uploader to owo.whats-th.is.
Built with Typer for type-safe commands and Rich for formatted errors.

Usage:
    owo --help                            # Show help
    owo upload FILE                       # Upload a file, print its URL
    owo upload < FILE                     # Upload standard input
    owo upload -a -r i.example.com FILE   # Associated upload on a vanity domain
    owo shorten URL                       # Shorten a URL
    owo list-files -e 20 -o 0             # List associated objects
    owo delete KEY                        # Delete an associated object

Options:
    --key, -k         API token (env: OWO_KEY)
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --version         Show version and exit
"""

from typing import Optional

import typer

from owo.cli.commands import delete, list_files, shorten, upload
from owo.cli.display import fail
from owo.core.config import build_client_config, get_app_config
from owo.core.logging import setup_logging

app = typer.Typer(
    name="owo",
    help="A simple uploader to owo.whats-th.is.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("upload")(upload)
app.command("shorten")(shorten)
app.command("list-files")(list_files)
app.command("delete")(delete)


def _version_callback(value: bool) -> None:
    if value:
        application = get_app_config().application
        typer.echo(f"{application.name} {application.version}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    key: Optional[str] = typer.Option(
        None,
        "--key",
        "-k",
        help="whats-th.is API token (env: OWO_KEY).",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    A simple uploader to owo.whats-th.is.

    Upload files, shorten URLs and manage associated objects.
    """
    try:
        if debug:
            setup_logging(level="DEBUG")
        elif verbose:
            setup_logging(level="INFO")
        else:
            setup_logging()

        ctx.obj = build_client_config(token=key)
    except (FileNotFoundError, ValueError) as e:
        fail(f"Invalid configuration: {e}")


if __name__ == "__main__":
    app()
