import logging
import sys
from pathlib import Path

import typer
import yaml

from sidediff.config import (
    DISPLAY_SECTION,
    DisplaySettings,
    default_config_path,
    load_display_settings,
    write_default_config,
)
from sidediff.exceptions import ConfigExistsError, InvalidConfigError
from sidediff.logging import setup_logging
from sidediff.render import DisplayResult, show_diff
from sidediff.render.models import ReviewChoice
from sidediff.review import review_diff

app = typer.Typer(no_args_is_help=True)
config_app = typer.Typer(no_args_is_help=True, help="Inspect or create the config file.")
app.add_typer(config_app, name="config")

STDIN_PATH = Path("-")


def _read_diff(path: Path | None) -> str:
    if path is None or path == STDIN_PATH:
        return sys.stdin.read()
    if not path.is_file():
        raise typer.BadParameter(f"{path} does not exist")
    return path.read_text(encoding="utf-8", errors="replace")


def _load_settings(
    config: Path | None,
    width: int | None = None,
    no_color: bool = False,
    no_line_numbers: bool = False,
    unified: bool = False,
) -> DisplaySettings:
    try:
        settings = load_display_settings(config)
    except InvalidConfigError as exc:
        raise typer.BadParameter(str(exc))

    updates: dict[str, object] = {}
    if width is not None:
        updates["terminal_width"] = width
    if no_color:
        updates["use_colors"] = False
    if no_line_numbers:
        updates["show_line_numbers"] = False
    if unified:
        updates["side_by_side_diff"] = False
    return settings.model_copy(update=updates)


@app.command("show")
def show_cmd(
    path: Path | None = typer.Argument(None, help="Diff file, '-' or nothing for stdin"),
    config: Path | None = typer.Option(None, "--config", help="Config file"),
    width: int | None = typer.Option(None, "--width", help="Maximum output width"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colors"),
    no_line_numbers: bool = typer.Option(False, "--no-line-numbers", help="Hide line numbers"),
    unified: bool = typer.Option(False, "--unified", help="Colored unified output instead of columns"),
):
    """
    Show a unified diff side by side.
    """
    settings = _load_settings(config, width, no_color, no_line_numbers, unified)
    diff_text = _read_diff(path)

    result = show_diff(diff_text, settings, sys.stdout)
    if result == DisplayResult.NO_DIFFERENCES:
        typer.echo("No differences to display")


@app.command("review")
def review_cmd(
    path: Path | None = typer.Argument(None, help="Diff file"),
    config: Path | None = typer.Option(None, "--config", help="Config file"),
    width: int | None = typer.Option(None, "--width", help="Maximum output width"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colors"),
):
    """
    Show a diff and ask whether to accept or reject it. Exits 1 on reject.
    """
    settings = _load_settings(config, width, no_color)
    diff_text = _read_diff(path)

    choice = review_diff(diff_text, settings, sys.stdout)
    typer.echo(f"Changes: {choice}")
    if choice == ReviewChoice.REJECT:
        raise typer.Exit(code=1)


@config_app.command("show")
def config_show_cmd(
    config: Path | None = typer.Option(None, "--config", help="Config file"),
):
    """
    Print the effective display settings.
    """
    settings = _load_settings(config)
    typer.echo(f"# {config or default_config_path()}")
    typer.echo(yaml.safe_dump({DISPLAY_SECTION: settings.model_dump()}, sort_keys=False).rstrip())


@config_app.command("init")
def config_init_cmd(
    config: Path | None = typer.Option(None, "--config", help="Where to write the file"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace an existing file"),
):
    """
    Write a config file holding the default settings.
    """
    try:
        path = write_default_config(config, overwrite=overwrite)
    except ConfigExistsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Config written: {path}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """
    sidediff: side-by-side unified diff viewer
    """
    if verbose:
        setup_logging(level=logging.DEBUG)
