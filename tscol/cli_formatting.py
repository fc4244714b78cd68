"""Rich CLI formatting helpers for tscol commands."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()


def print_header(title: str):
    """Print a styled section header."""
    console.print(Panel(Text(title, style="bold cyan"), border_style="dim"))


def _format_result(result) -> str:
    if result.ok:
        return str(result.value)
    return f"[red]{result.error}[/red]"


def print_runs(runs):
    """Print RLE runs with their cumulative end offsets."""
    table = Table(title="Runs", border_style="cyan", padding=(0, 2))
    table.add_column("#", justify="right", style="dim")
    table.add_column("TS", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("Run End", justify="right", style="dim")

    end = 0
    for i, run in enumerate(runs):
        end += run.count
        table.add_row(str(i), str(run.ts), str(run.count), str(end))
    console.print(table)


def print_row_results(results: dict, title: str = "Reconstructed Rows"):
    """Print a mapping of row id -> reconstruct result."""
    table = Table(title=title, border_style="cyan", padding=(0, 2))
    table.add_column("Row ID", justify="right", style="dim")
    table.add_column("Result")
    for row_id, result in results.items():
        table.add_row(str(row_id), _format_result(result))
    console.print(table)


def print_ts_lookups(lookups: dict):
    """Print row id -> (linear ts, binary-search ts) pairs."""
    table = Table(title="TS Lookups", border_style="cyan", padding=(0, 2))
    table.add_column("Row ID", justify="right", style="dim")
    table.add_column("Linear")
    table.add_column("Binary Search")
    for row_id, (linear, fast) in lookups.items():
        table.add_row(str(row_id), str(linear), str(fast))
    console.print(table)


def print_ts_counts(counts: dict):
    """Print ts -> (linear count result, binary-search count result) pairs."""
    table = Table(title="TS Counts", border_style="cyan", padding=(0, 2))
    table.add_column("TS", style="bold")
    table.add_column("Linear", justify="right")
    table.add_column("Binary Search", justify="right")
    for ts, (linear, fast) in counts.items():
        table.add_row(str(ts), _format_result(linear), _format_result(fast))
    console.print(table)


def print_compression_stats(stats, verified: bool):
    """Print varint size accounting for a delta encoder."""
    table = Table(title="Varint Encoded Sizes", border_style="cyan",
                  show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Compressed", f"{stats.compressed_bytes:,} bytes")
    table.add_row("Original", f"{stats.original_bytes:,} bytes")
    table.add_row("Saved", f"[green]{stats.saved_bytes:,} bytes "
                           f"({stats.saved_percent:.2f}%)[/green]")
    table.add_row("Ratio", f"{stats.compression_ratio:.2f}x")
    status = "[green]yes[/green]" if verified else "[red]no[/red]"
    table.add_row("Round trip correct", status)
    console.print(table)
