from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from netlat.models import Edge


def _edge_table(title: str, edges: Iterable[Edge]) -> Table:
    table = Table(title=title)
    table.add_column("Edge", style="bold")
    table.add_column("Material")
    table.add_column("Length (m)", justify="right")
    table.add_column("Bandwidth", justify="right")
    table.add_column("Latency (ns)", justify="right")
    for e in edges:
        table.add_row(
            f"{e.source}->{e.destination}",
            e.material.value,
            f"{e.length_m:g}",
            str(e.bandwidth),
            f"{e.latency:.2f}",
        )
    return table


def print_path(report, console: Optional[Console] = None) -> None:
    """Expects a PathReport (source, destination, latency, edges, bandwidth)."""
    console = console or Console()
    if not report.reachable:
        console.print(f"[bold red]No path from {report.source} to {report.destination}[/bold red]")
        return
    console.print(
        f"The lowest latency path for {report.source} to {report.destination} "
        f"([bold]{report.latency:.2f}[/bold] ns):"
    )
    console.print(_edge_table("Path", report.edges))
    console.print(f"The total bandwidth: {report.bandwidth}")


def print_copper(classification, console: Optional[Console] = None) -> None:
    console = console or Console()
    color = "red" if classification.value == "neither" else "green"
    console.print(f"[{color}]-- {classification.message}[/{color}]")


def print_spanning_tree(tree, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(_edge_table("Lowest average latency spanning tree", tree.edges))
    avg = tree.average_latency
    if avg is None:
        console.print("[bold yellow]No edges selected; average latency is undefined.[/bold yellow]")
    else:
        console.print(f"The average latency of this spanning tree is [bold]{avg:.3f}[/bold] nanoseconds.")
    if not tree.is_spanning:
        console.print(
            f"[bold yellow]⚠️ Network is disconnected: {len(tree.edges)} of "
            f"{max(0, tree.vertex_count - 1)} tree edges selected[/bold yellow]"
        )


def print_failure(report, console: Optional[Console] = None) -> None:
    console = console or Console()
    if report.survives:
        console.print("[bold green]✅ The network will survive any failure of any two points[/bold green]")
        return
    console.print(f"[bold red]❌ The network will be disconnected if these links of vertex {report.vertex} all fail:[/bold red]")
    for e in report.edges:
        console.print(f"  {e}")
