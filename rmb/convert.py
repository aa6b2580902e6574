"""CLI: capitalize RMB amounts (人民币大写金额).

Commands:
    - convert: print the capitalized form of one or more amounts, or run an
      interactive prompt when no amount is given
    - check:   exit 0 if the text is a valid amount, 1 otherwise
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .amount import AmountError, is_valid_amount, sanitize_amount
from .numerals import convert_to_chinese
from ._cli import EXIT_REJECTED, fatal, info, report, warn


PLAIN_ENV = "RMB_PLAIN"
QUIT_WORDS = ("q", "quit", "exit")


def register(app: typer.Typer) -> None:
    """Register `convert` and `check` on a parent Typer app."""
    app.command("convert")(convert)
    app.command("check")(check)


def convert(
    amounts: Optional[List[str]] = typer.Argument(None, help="Amounts such as 1234.56. Omit to enter amounts interactively."),
    lenient: bool = typer.Option(False, "-l", "--lenient", help="Drop characters other than digits and '.', keep two decimals at most"),
    plain: bool = typer.Option(False, "--plain", envvar=PLAIN_ENV, help="Print tab separated lines instead of a table"),
):
    """Convert amounts to capitalized Chinese numerals.

    Contract:
    - Input: non-negative amount, at most two decimals, e.g. 1234.56
    - Output: 人民币壹仟贰佰叁拾肆元伍角陆分
    - One amount prints only the result, several print one row per amount.
    - Exit code 1 when any amount is rejected.
    """
    if not amounts:
        _interactive(lenient)
        return

    if len(amounts) == 1:
        try:
            typer.echo(_convert_one(amounts[0], lenient))
        except AmountError as exc:
            fatal(exc)
        return

    # Rows show the text that was converted, i.e. after --lenient cleanup
    rows: list[tuple[str, str | None, AmountError | None]] = []
    for raw in amounts:
        text = _prepare(raw, lenient)
        try:
            rows.append((text, convert_to_chinese(text), None))
        except AmountError as exc:
            rows.append((text, None, exc))

    if plain:
        _print_plain(rows)
    else:
        _print_table(rows)

    if any(exc is not None for _, _, exc in rows):
        raise typer.Exit(code=EXIT_REJECTED)


def check(
    amount: str = typer.Argument(..., help="Text to validate"),
):
    """Validate an amount without converting it."""
    if is_valid_amount(amount):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(code=EXIT_REJECTED)


def _prepare(raw: str, lenient: bool) -> str:
    """Trim, and with --lenient sanitize, the text of a single amount."""
    text = raw.strip()
    if lenient:
        cleaned = sanitize_amount(text)
        if cleaned != text:
            warn(f"Read {text!r} as {cleaned!r}")
        text = cleaned
    return text


def _convert_one(raw: str, lenient: bool) -> str:
    return convert_to_chinese(_prepare(raw, lenient))


def _interactive(lenient: bool) -> None:
    """Convert each entered line until q, end of input or Ctrl+C."""
    info("Enter an amount and press Enter to convert, q to quit")
    while True:
        try:
            raw = typer.prompt("金额", default="", show_default=False)
        except typer.Abort:
            # EOF or Ctrl+C
            break

        if raw.strip().lower() in QUIT_WORDS:
            break

        try:
            typer.echo(_convert_one(raw, lenient))
        except AmountError as exc:
            report(exc)


def _print_plain(rows) -> None:
    for text, result, exc in rows:
        if exc is None:
            typer.echo(f"{text}\t{result}")
        else:
            report(exc, source=text)


def _print_table(rows) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("金额", justify="right", no_wrap=True)
    table.add_column("大写")

    for text, result, exc in rows:
        if exc is None:
            table.add_row(Text(text), result)
        else:
            table.add_row(Text(text), Text(str(exc), style="red"))

    Console().print(table)
