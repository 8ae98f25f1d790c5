from __future__ import annotations

"""
Typer CLI entry point for the zero address validation analyzer.

- Accepts a Solidity file or directory (prompts for one when omitted)
- Scans constructors and initialize functions, or every function with --all
- Prints a Rich report, only the summary (--summary), or JSON (--json)
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from zerocheck.analyzer import analyze as run_analysis
from zerocheck.config import get_default_config
from zerocheck.errors import ZeroCheckError
from zerocheck.patterns import build_patterns
from zerocheck.reporting.console import print_report
from zerocheck.reporting.json_report import render_json

logger = logging.getLogger(__name__)

app = typer.Typer(help="zerocheck - find missing zero address validation in Solidity contracts.")

PROMPT = "What is the path to the file or folder?"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    target: Optional[Path] = typer.Argument(
        None,
        help="Path to Solidity file or directory to analyze.",
    ),
    all_functions: bool = typer.Option(
        False, "--all", "-a", help="Analyze all functions taking address parameters."
    ),
    summary: bool = typer.Option(False, "--summary", "-s", help="Show only summary statistics."),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output results in JSON format."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Analyze constructors and initialize functions (or every function with --all)
    for address parameters that are never compared against address(0).
    """
    _configure_logging(verbose)
    err_console = Console(stderr=True)

    if target is None:
        target = Path(typer.prompt(PROMPT))

    config = get_default_config(include_all_functions=all_functions)
    try:
        patterns = build_patterns()
        results = run_analysis(target, patterns=patterns, config=config)
    except ZeroCheckError as exc:
        err_console.print(f"[bold red]Error[/bold red]: {exc}", highlight=False)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(render_json(results))
    else:
        print_report(results, summary_only=summary)


def main() -> None:
    """Entry point for `python -m zerocheck.main` and the zerocheck script."""
    app()


if __name__ == "__main__":
    main()
