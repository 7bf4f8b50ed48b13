"""Typer-based CLI for here."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import typer

from . import __version__, config
from .change_dir import emit_cd
from .docs import completion_script, markdown_help
from .errors import ClipboardWarning, HereError, UsageError
from .models import Configuration, RunResult
from .output import copy_to_clipboard, echo_result, print_error, print_warning
from .resolver import resolve_base_path
from .transform import transform_path

logger = logging.getLogger(__name__)


class Shell(str, Enum):
    bash = "bash"
    elvish = "elvish"
    fish = "fish"
    powershell = "powershell"
    zsh = "zsh"


app = typer.Typer(
    name=config.PROG_NAME,
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"{config.PROG_NAME} {__version__}")
        raise typer.Exit()


def build_configuration(**values) -> Configuration:
    """Validate flag combinations and freeze them into a Configuration.

    Raises:
        UsageError: when required companions are missing or flags conflict.
    """
    configuration = Configuration(**values)

    if configuration.special_mode:
        mode = "--markdown" if configuration.markdown else "--completions"
        if configuration.completions is not None and configuration.markdown:
            raise UsageError("--completions cannot be used with --markdown")
        if configuration.target is not None:
            raise UsageError(f"{mode} cannot be used with a path segment or program search")
        flags = configuration.enabled_flags()
        if flags:
            names = ", ".join("--" + name.replace("_", "-") for name in flags)
            raise UsageError(f"{mode} cannot be used with other flags ({names})")
        return configuration

    if configuration.from_where and not configuration.target:
        raise UsageError("-w/--from-where requires a program to search for")
    if configuration.select_first and not configuration.from_where:
        raise UsageError("--select-first requires -w/--from-where")
    if configuration.posix and configuration.no_posix:
        raise UsageError("--posix cannot be used with --no-posix")
    return configuration


def run_pipeline(configuration: Configuration) -> RunResult:
    """Resolve, transform and copy; returns the text plus any warnings."""
    base = resolve_base_path(configuration)
    result = transform_path(base, configuration)

    if not configuration.no_copy:
        try:
            copy_to_clipboard(result.text)
        except ClipboardWarning as warning:
            result.warnings.append(warning)
    return result


@app.command()
def main(
    ctx: typer.Context,
    target: Optional[str] = typer.Argument(
        None,
        metavar="PATH SEGMENT / PROGRAM SEARCH",
        help="Path segment appended to the working directory, or program name searched with -w.",
        show_default=False,
    ),
    folder: bool = typer.Option(False, "--folder", "-f", help="Get folder component of result."),
    from_where: bool = typer.Option(False, "--from-where", "-w", help="Search PATH for the program (like `where`)."),
    change_directory: bool = typer.Option(
        False, "--change-directory", "-d", help="Set current working directory to result."
    ),
    escape_backslash: bool = typer.Option(False, "--escape-backslash", "-e", help="Escape backslashes."),
    wrap_quote: bool = typer.Option(False, "--wrap-quote", "-q", help="Wrap result in double quotes."),
    resolve_symlink: bool = typer.Option(False, "--resolve-symlink", "-r", help="Resolve symlink path."),
    no_copy: bool = typer.Option(False, "--no-copy", "-n", help="Prevent copy to clipboard."),
    no_color: bool = typer.Option(False, "--no-color", "-c", help="Suppress color."),
    posix: bool = typer.Option(False, "--posix", help="Force posix style path (forward slashes)."),
    no_posix: bool = typer.Option(False, "--no-posix", help="Prevent posix style path (backslashes)."),
    select_first: bool = typer.Option(
        False, "--select-first", help="Select first option when the search finds several."
    ),
    completions: Optional[Shell] = typer.Option(
        None,
        "--completions",
        "--completion",
        metavar="SHELL",
        case_sensitive=False,
        help="Generate completion script for the given shell.",
    ),
    markdown: bool = typer.Option(False, "--markdown", help="Generate markdown help page."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Effortlessly grab and copy file locations.

    The path copied to clipboard is printed with color. Coloring can be
    turned off with -c/--no-color, and copying with -n/--no-copy.

    Useful combinations: none (copy working directory), -wf (folder of a
    program found on PATH), -wfdnc (cd to where a program lives), -qe
    (copy as an escaped string literal).
    """
    try:
        configuration = build_configuration(
            target=target,
            folder=folder,
            from_where=from_where,
            change_directory=change_directory,
            escape_backslash=escape_backslash,
            wrap_quote=wrap_quote,
            resolve_symlink=resolve_symlink,
            no_copy=no_copy,
            no_color=no_color,
            posix=posix,
            no_posix=no_posix,
            select_first=select_first,
            completions=completions.value if completions else None,
            markdown=markdown,
        )
    except UsageError as exc:
        raise typer.BadParameter(str(exc), ctx=ctx) from exc
    logger.debug("Configuration: %s", configuration)

    if configuration.completions:
        typer.echo(completion_script(ctx.command, configuration.completions, config.PROG_NAME))
        return
    if configuration.markdown:
        typer.echo(markdown_help(ctx.command, config.PROG_NAME))
        return

    try:
        result = run_pipeline(configuration)
    except HereError as exc:
        print_error(str(exc), no_color=no_color)
        raise typer.Exit(code=exc.exit_code)

    echo_result(result.text, no_color=no_color)
    for warning in result.warnings:
        print_warning(warning, no_color=no_color)

    if configuration.change_directory:
        warning = emit_cd(result.text)
        if warning is not None:
            print_warning(warning, no_color=no_color)


def run() -> None:
    """Console script entry point."""
    config.configure_logging()
    app(prog_name=config.PROG_NAME)


if __name__ == "__main__":
    run()
