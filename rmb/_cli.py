"""Shared Typer app factory and console message helpers for rmb commands."""

from __future__ import annotations

from typing import Any, NoReturn

import typer

from .amount import AmountError

HELP_OPTION_NAMES = ("-h", "--help")

# Exit code for input that could not be converted
EXIT_REJECTED = 1


def new_typer_app(**kwargs: Any) -> typer.Typer:
    """Create a Typer app where -h works as well as --help."""
    context_settings = dict(kwargs.pop("context_settings", {}) or {})
    context_settings.setdefault("help_option_names", list(HELP_OPTION_NAMES))
    return typer.Typer(context_settings=context_settings, **kwargs)


def info(message: str) -> None:
    typer.echo(f"[info] {message}")


def warn(message: str, *, err: bool = True) -> None:
    # stderr by default so converted text on stdout stays pipeable
    typer.secho(f"[warn] {message}", fg=typer.colors.YELLOW, err=err)


def error(message: str, *, err: bool = True) -> None:
    typer.secho(f"[error] {message}", fg=typer.colors.RED, err=err)


def report(exc: AmountError, *, source: str | None = None) -> None:
    """Print a rejected amount, naming the text it came from when given."""
    if source is None:
        error(str(exc))
    else:
        error(f"{source!r}: {exc}")


def fatal(exc: AmountError, *, code: int = EXIT_REJECTED) -> NoReturn:
    """Report a rejected amount and stop the command."""
    report(exc)
    raise typer.Exit(code=code)
