import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from netlat.analysis import NetworkAnalyzer
from netlat.config import load_config
from netlat.errors import NetworkError
from netlat.reports.csv_report import write_edges_csv
from netlat.reports.json_report import JSONReporter
from netlat.reports.terminal_report import print_copper, print_failure, print_path, print_spanning_tree
from netlat.viz import plot_network


app = typer.Typer(add_completion=False, help="Latency analysis for copper/optical cable networks.")
console = Console()

MENU = """
Enter 1 to find the lowest latency path between any two points
Enter 2 to determine copper-only
Enter 3 to find the lowest average latency spanning tree
Enter 4 to test if the graph can survive 2-vertex failure
Enter 5 to quit the program"""

NetworkFile = typer.Argument(..., help="Network file: vertex count, then 'source destination material bandwidth length' per cable.")
ConfigOpt = typer.Option(None, "--config", help="JSON config file (strict_ingest, strict_copper, failure_min_degree, ...).")
LogLevelOpt = typer.Option(None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")
LenientOpt = typer.Option(False, "--lenient", help="Skip malformed cable lines instead of aborting.")


def _setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=False)],
        force=True,
    )


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


def _load(network_file: str, config_path: Optional[str], log_level: Optional[str], lenient: bool, **overrides) -> NetworkAnalyzer:
    try:
        config = load_config(config_path).override(
            log_level=log_level,
            strict_ingest=False if lenient else None,
            **overrides,
        )
    except (OSError, ValueError) as e:
        raise typer.BadParameter(f"Invalid config: {e}")
    _setup_logging(config.logging_level)

    try:
        return NetworkAnalyzer.from_file(network_file, config)
    except OSError as e:
        raise typer.BadParameter(str(e))
    except NetworkError as e:
        _fail(str(e))


@app.command("shortest-path")
def shortest_path(
    network_file: str = NetworkFile,
    source: int = typer.Argument(..., help="Starting vertex."),
    destination: int = typer.Argument(..., help="End vertex."),
    out_png: Optional[str] = typer.Option(None, "--out-png", help="Write a PNG of the network with the path highlighted."),
    out_csv: Optional[str] = typer.Option(None, "--out-csv", help="Write the path edges to CSV."),
    config: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
    lenient: bool = LenientOpt,
):
    """Find the lowest latency path between two vertices and its total bandwidth."""
    analyzer = _load(network_file, config, log_level, lenient)
    try:
        report = analyzer.shortest_path(source, destination)
    except NetworkError as e:
        _fail(str(e))
    print_path(report, console)

    if out_csv and report.reachable:
        write_edges_csv(report.edges, out_csv)
        console.print(f"[green]✓[/green] Path CSV: {out_csv}")
    if out_png:
        plot_network(analyzer.graph, out_png, highlight=report.edges, title=f"Lowest latency path {source} -> {destination}")
        console.print(f"[green]✓[/green] Network PNG: {out_png}")


@app.command("copper")
def copper(
    network_file: str = NetworkFile,
    strict_copper: bool = typer.Option(False, "--strict-copper", help="Require the copper cables alone to connect every vertex."),
    config: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
    lenient: bool = LenientOpt,
):
    """Determine whether the network is copper-only or copper-connectable."""
    analyzer = _load(network_file, config, log_level, lenient, strict_copper=strict_copper or None)
    print_copper(analyzer.copper(), console)


@app.command("spanning-tree")
def spanning_tree(
    network_file: str = NetworkFile,
    out_png: Optional[str] = typer.Option(None, "--out-png", help="Write a PNG of the network with the tree highlighted."),
    out_csv: Optional[str] = typer.Option(None, "--out-csv", help="Write the tree edges to CSV."),
    config: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
    lenient: bool = LenientOpt,
):
    """Find the lowest average latency spanning tree."""
    analyzer = _load(network_file, config, log_level, lenient)
    tree = analyzer.spanning_tree()
    print_spanning_tree(tree, console)

    if out_csv:
        write_edges_csv(tree.edges, out_csv)
        console.print(f"[green]✓[/green] Tree CSV: {out_csv}")
    if out_png:
        plot_network(analyzer.graph, out_png, highlight=tree.edges, title="Lowest average latency spanning tree")
        console.print(f"[green]✓[/green] Network PNG: {out_png}")


@app.command("resilience")
def resilience(
    network_file: str = NetworkFile,
    min_degree: Optional[int] = typer.Option(None, "--min-degree", help="Links a vertex needs to survive two failures (default 3)."),
    config: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
    lenient: bool = LenientOpt,
):
    """Test whether the network survives any two simultaneous link failures."""
    analyzer = _load(network_file, config, log_level, lenient, failure_min_degree=min_degree)
    print_failure(analyzer.failure_points(), console)


@app.command("summary")
def summary(
    network_file: str = NetworkFile,
    source: int = typer.Argument(..., help="Starting vertex for the path query."),
    destination: int = typer.Argument(..., help="End vertex for the path query."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Output JSON report path."),
    config: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
    lenient: bool = LenientOpt,
):
    """Run all four queries; optionally save them as one JSON report."""
    analyzer = _load(network_file, config, log_level, lenient)
    try:
        print_path(analyzer.shortest_path(source, destination), console)
    except NetworkError as e:
        _fail(str(e))
    print_copper(analyzer.copper(), console)
    print_spanning_tree(analyzer.spanning_tree(), console)
    print_failure(analyzer.failure_points(), console)

    if out_json:
        JSONReporter().generate(analyzer.summary(source, destination), out_json)
        console.print(f"[green]OK[/green] JSON report saved to: {out_json}")


@app.command("menu")
def menu(
    network_file: str = NetworkFile,
    config: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
    lenient: bool = LenientOpt,
):
    """Interactive numbered menu over one loaded network."""
    analyzer = _load(network_file, config, log_level, lenient)
    while True:
        console.print(MENU)
        choice = typer.prompt("Choice", default="5").strip()
        if choice == "1":
            start = typer.prompt("Enter the starting point", type=int)
            end = typer.prompt("Enter the end point", type=int)
            try:
                print_path(analyzer.shortest_path(start, end), console)
            except NetworkError as e:
                console.print(f"[bold red]Error:[/bold red] {e}")
        elif choice == "2":
            print_copper(analyzer.copper(), console)
        elif choice == "3":
            print_spanning_tree(analyzer.spanning_tree(), console)
        elif choice == "4":
            print_failure(analyzer.failure_points(), console)
        elif choice == "5":
            break
        else:
            console.print(f"[yellow]Unknown option {choice!r}[/yellow]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
