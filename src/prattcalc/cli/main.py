"""
prattcalc command-line interface.

Commands:
  • eval: evaluate one expression and print the result
  • repl: read expressions line by line until EOF or "quit"
  • tokens: show the token stream of an expression
  • tree: show the parenthesized parse tree of an expression

Expressions starting with "-" must follow "--" so they are not read as
options, e.g. ``prattcalc eval -- -2+3``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prattcalc.cli.utils import load_cli_config, version_callback
from prattcalc.core.errors import CalcError
from prattcalc.core.expression_lang import evaluate_source, parse_expr, tokenize, try_evaluate
from prattcalc.core.formatting import format_result

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

_QUIT_COMMANDS = ("quit", "exit")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to prattcalc.toml (default: ./prattcalc.toml)",
        dir_okay=False,
    ),
]

app = typer.Typer(
    help="prattcalc: evaluate arithmetic expressions",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """prattcalc CLI main callback for global options."""
    ctx.obj = {"verbose": verbose}


def _verbose(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def _fail(error: CalcError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(error.format_detail())}")
    return typer.Exit(code=1)


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: Annotated[str, typer.Argument(help="Expression to evaluate")],
    precision: Annotated[
        int | None,
        typer.Option(
            "--precision",
            "-p",
            min=1,
            max=17,
            help="Significant digits in the printed result",
        ),
    ] = None,
    config_path: ConfigOption = None,
) -> None:
    """Evaluate a single expression and print the result."""
    config = load_cli_config(config_path, _verbose(ctx))
    try:
        value = evaluate_source(expression)
    except CalcError as e:
        raise _fail(e)

    digits = precision if precision is not None else config.repl.precision
    console.print(format_result(value, digits))


@app.command(name="repl")
def repl_command(
    ctx: typer.Context,
    config_path: ConfigOption = None,
) -> None:
    """Read and evaluate expressions line by line until EOF or 'quit'."""
    config = load_cli_config(config_path, _verbose(ctx))

    while True:
        try:
            line = console.input(config.repl.prompt)
        except (EOFError, KeyboardInterrupt):
            break

        line = line.strip()
        if not line:
            continue
        if line in _QUIT_COMMANDS:
            break

        result = try_evaluate(line)
        if result.ok:
            assert result.value is not None
            console.print(format_result(result.value, config.repl.precision))
        else:
            err_console.print(f"[red]Error:[/red] {escape(result.error or '')}")


@app.command(name="tokens")
def tokens_command(
    ctx: typer.Context,
    expression: Annotated[str, typer.Argument(help="Expression to tokenize")],
) -> None:
    """Show the tokens of an expression with their positions."""
    load_cli_config(None, _verbose(ctx))
    try:
        tokens = tokenize(expression)
    except CalcError as e:
        raise _fail(e)

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Text")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    for tok in tokens:
        table.add_row(
            str(tok.kind),
            escape(tok.text),
            str(tok.start),
            str(tok.end),
            str(tok.line),
            str(tok.column),
        )
    console.print(table)


@app.command(name="tree")
def tree_command(
    ctx: typer.Context,
    expression: Annotated[str, typer.Argument(help="Expression to parse")],
) -> None:
    """Show the fully parenthesized parse tree of an expression."""
    load_cli_config(None, _verbose(ctx))
    try:
        expr = parse_expr(expression)
    except CalcError as e:
        raise _fail(e)
    console.print(escape(str(expr)))


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
