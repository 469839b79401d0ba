"""CLI for the stringcalc string calculator.

Usage:
    python -m stringcalc add "1,2,3"               # Print the sum
    python -m stringcalc add "//;\\n1;2" --json     # Sum as a JSON object
    python -m stringcalc explain "1,1001,2"         # Show each step
    python -m stringcalc check "1,2" "1,-2"         # Evaluate several inputs
    python -m stringcalc add -- "-1,2"            # "--" ends option parsing
"""

from __future__ import annotations

import json
from typing import List, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stringcalc import digits
from stringcalc.calculator import MAX_VALUE, add, evaluate, explain
from stringcalc.errors import CalculatorError
from stringcalc.environment import load_settings, unescape

app = typer.Typer(
    name="stringcalc",
    help="Sum a delimited list of numbers",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

# Inputs such as "-1,2" look like options; pass them through as arguments.
_CONTEXT = {"ignore_unknown_options": True}


def _prepare(text: str, raw: bool) -> str:
    """Apply escape handling to input typed on the command line."""
    if raw or not load_settings().escapes:
        return text
    return unescape(text)


def _fail(e: CalculatorError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(e.message)}")
    raise typer.Exit(1)


@app.command("add", context_settings=_CONTEXT)
def cmd_add(
    numbers: str = typer.Argument(help="Numbers to sum, e.g. '1,2\\n3' or '//;\\n1;2'"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print the outcome as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Do not interpret \\n escapes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show delimiter and tokens on stderr"),
) -> None:
    """Print the sum of the numbers in INPUT."""
    text = _prepare(numbers, raw)

    if as_json or load_settings().json_output:
        outcome = evaluate(text)
        typer.echo(json.dumps(outcome.to_dict()))
        if not outcome.ok:
            raise typer.Exit(1)
        return

    if verbose:
        try:
            b = explain(text)
        except CalculatorError as e:
            _fail(e)
        console.print(f"  [dim]Delimiter: {escape(b.delimiter_label)}[/dim]")
        console.print(f"  [dim]Tokens: {escape(repr(b.tokens))}[/dim]")
        if b.ignored:
            console.print(f"  [dim]Ignored (> {MAX_VALUE}): {digits.join(b.ignored)}[/dim]")

    try:
        total = add(text)
    except CalculatorError as e:
        _fail(e)
    typer.echo(str(total))


@app.command("explain", context_settings=_CONTEXT)
def cmd_explain(
    numbers: str = typer.Argument(help="Numbers to sum"),
    raw: bool = typer.Option(False, "--raw", help="Do not interpret \\n escapes"),
) -> None:
    """Show how INPUT is split, parsed and summed."""
    text = _prepare(numbers, raw)
    try:
        b = explain(text)
    except CalculatorError as e:
        _fail(e)

    table = Table(title="Breakdown", show_header=True, header_style="bold")
    table.add_column("Step", style="dim", min_width=12)
    table.add_column("Value")

    table.add_row("Delimiter", escape(b.delimiter_label))
    table.add_row("Tokens", escape(", ".join(b.tokens)) or "--")
    table.add_row("Numbers", digits.join(b.numbers) or "--")
    if b.negatives:
        table.add_row("Negatives", "[red]" + digits.join(b.negatives) + "[/red]")
    table.add_row(f"Ignored (> {MAX_VALUE})", digits.join(b.ignored) or "--")
    if b.negatives:
        table.add_row("Total", "[red]rejected[/red]")
    else:
        table.add_row("Total", f"[green]{b.total}[/green]")

    out.print()
    out.print(table)
    out.print()

    if b.negatives:
        raise typer.Exit(1)


@app.command("check", context_settings=_CONTEXT)
def cmd_check(
    inputs: List[str] = typer.Argument(help="One or more inputs, each evaluated on its own"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print the outcomes as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Do not interpret \\n escapes"),
) -> None:
    """Evaluate several inputs and show a row per input."""
    outcomes = [evaluate(_prepare(i, raw)) for i in inputs]
    failures = sum(1 for o in outcomes if not o.ok)

    if as_json or load_settings().json_output:
        typer.echo(json.dumps([o.to_dict() for o in outcomes], indent=2))
    else:
        table = Table(title="Results", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Input")
        table.add_column("Status")
        table.add_column("Result", justify="right")

        for n, o in enumerate(outcomes, 1):
            if o.ok:
                status = f"[green]{o.status.value}[/green]"
                value = str(o.result)
            else:
                status = f"[red]{o.status.value}[/red]"
                value = f"[red]{escape(o.error or '')}[/red]"
            table.add_row(str(n), escape(repr(o.input)), status, value)

        out.print()
        out.print(table)
        out.print()
        console.print(f"{len(outcomes) - failures}/{len(outcomes)} succeeded")

    if failures:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
