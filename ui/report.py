"""
Console summaries using Rich
"""
from rich.console import Console
from rich.table import Table

from blockchains.base import CheckResult
from core.models import FetchReport
from utils.logger import console as default_console


def render_check_results(results: list[tuple[str, CheckResult]], console: Console = default_console) -> int:
    """Print one row per check and every message; returns the error count"""
    table = Table(
        title="SANITY CHECKS",
        show_header=True,
        header_style="bold magenta",
        border_style="dim"
    )
    table.add_column("Check", style="cyan")
    table.add_column("Errors", justify="right")
    table.add_column("Warnings", justify="right")

    total_errors = 0
    for name, (errors, warnings) in results:
        total_errors += len(errors)
        table.add_row(
            name,
            f"[red]{len(errors)}[/red]" if errors else "[green]0[/green]",
            f"[yellow]{len(warnings)}[/yellow]" if warnings else "0",
        )

    console.print(table)
    for name, (errors, warnings) in results:
        for error in errors:
            console.print(f"[red]❌ {name}: {error}[/red]")
        for warning in warnings:
            console.print(f"[yellow]⚠ {name}: {warning}[/yellow]")
    return total_errors


def render_fetch_report(report: FetchReport, console: Console = default_console):
    if not report.fetched and not report.failed:
        console.print("[dim]No asset images fetched[/dim]")
        return

    table = Table(title="ASSET IMAGES", show_header=True, header_style="bold magenta", border_style="dim")
    table.add_column("Asset", style="cyan")
    table.add_column("Result")
    for symbol in report.fetched:
        table.add_row(symbol, "[green]fetched[/green]")
    for symbol, error in report.failed:
        table.add_row(symbol, f"[red]{error}[/red]")
    console.print(table)
