# Rich console output: per-function validation report and summary statistics.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from zerocheck.findings.models import FunctionAnalysis, KindTag, ValidationTag

# Function kind -> Rich style
KIND_STYLE = {
    KindTag.CONSTRUCTOR: "bold green",
    KindTag.INITIALIZER: "bold cyan",
    KindTag.NAMED: "bold magenta",
}

TAG_DESCRIPTIONS = {
    ValidationTag.EQUALITY_CHECK: "Direct address(0) comparison",
    ValidationTag.REQUIRE_CHECK: "require() statement with zero address check",
}

NO_RESULTS_MESSAGE = "No functions with address parameters found."


@dataclass(frozen=True)
class Summary:
    """Counts shown in the summary panel."""

    total: int
    with_address_parameters: int
    fully_validated: int
    partially_validated: int
    unvalidated: int


def summarize(results: Sequence[FunctionAnalysis]) -> Summary:
    """Count fully, partially and not validated functions among those with address parameters."""
    with_address = [r for r in results if r.has_address_parameters]
    return Summary(
        total=len(results),
        with_address_parameters=len(with_address),
        fully_validated=sum(1 for r in with_address if r.is_fully_validated),
        partially_validated=sum(1 for r in with_address if r.is_partially_validated),
        unvalidated=sum(1 for r in with_address if r.is_unvalidated),
    )


def print_results(results: Sequence[FunctionAnalysis], console: Optional[Console] = None) -> None:
    """Print one block per analyzed function, in result order."""
    console = console or Console()

    if not results:
        console.print(f"[yellow]{NO_RESULTS_MESSAGE}[/yellow]")
        return

    for result in results:
        _print_single_result(result, console)


def _print_single_result(result: FunctionAnalysis, console: Console) -> None:
    title = Text()
    title.append(result.kind.display_name, style=KIND_STYLE[result.kind.tag])
    title.append(f" in {result.source_file}")
    console.print(title)

    if not result.address_parameters:
        console.print("[blue]ℹ️  No address arguments found[/blue]")
    else:
        formatted = ", ".join(str(p) for p in result.address_parameters)
        console.print(
            f"[blue]📋 Found {len(result.address_parameters)} address argument(s): [/blue]",
            Text(formatted, style="blue"),
            sep="",
        )
        _print_validation(result, console)

    console.print(Text(f"Arguments: {result.raw_parameters}", style="yellow"))
    console.print("[blue]Code:[/blue]")
    for line in result.reconstructed_code.splitlines():
        console.print(Text(f"  {line}", style="blue"))
    console.print("=" * 50)


def _print_validation(result: FunctionAnalysis, console: Console) -> None:
    if result.tags:
        console.print("[green]✅ Zero address validation found:[/green]")
        for tag in result.tags:
            console.print(f"  [green]•[/green] {TAG_DESCRIPTIONS[tag]}")
        for name in result.validated_names:
            console.print("    [blue]→[/blue] Checking variable: ", Text(name, style="yellow"), sep="")

    # An empty missing set means every address parameter was validated, so tags is non-empty.
    if not result.missing_names:
        console.print("[bold green]✅ All address arguments are validated![/bold green]")
        return

    console.print("[red]❌ Missing zero address validation for:[/red]")
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Marker", style="red", width=4)
    table.add_column("Argument", style="yellow")
    for name in result.missing_names:
        table.add_row("  ⚠️", f"Argument: {name}")
    console.print(table)
    if not result.validated_names:
        console.print("[red]❌ No zero address validation detected for any argument[/red]")


def print_summary(results: Sequence[FunctionAnalysis], console: Optional[Console] = None) -> None:
    """Print the summary panel; prints nothing for an empty result list."""
    if not results:
        return
    console = console or Console()
    summary = summarize(results)

    table = Table(show_header=False, box=box.SIMPLE, padding=(0, 1))
    table.add_column("Metric", style="white")
    table.add_column("Count", justify="right")
    table.add_row("Total functions analyzed", Text(str(summary.total), style="yellow"))
    table.add_row(
        "Functions with address arguments",
        Text(str(summary.with_address_parameters), style="yellow"),
    )
    table.add_row("Fully validated", Text(str(summary.fully_validated), style="green"))
    table.add_row("Partially validated", Text(str(summary.partially_validated), style="yellow"))
    table.add_row("Not validated", Text(str(summary.unvalidated), style="red"))

    console.print()
    console.print(
        Panel(
            table,
            title="Analysis Summary",
            border_style="red" if summary.unvalidated or summary.partially_validated else "green",
            box=box.ROUNDED,
        )
    )


def print_report(
    results: Sequence[FunctionAnalysis],
    summary_only: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Full report (per-function blocks plus summary) or just the summary."""
    console = console or Console()
    if summary_only:
        if not results:
            console.print(f"[yellow]{NO_RESULTS_MESSAGE}[/yellow]")
            return
        print_summary(results, console)
        return
    print_results(results, console)
    print_summary(results, console)
