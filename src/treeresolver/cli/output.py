"""Rich output formatting helpers for the treeresolver CLI.

Provides consistent terminal output for resolution summaries and single-node
inspection.

Status Color Mapping:
    root = bold green, linked = cyan, unlinked = bold red
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

_STATUS_STYLES: dict[str, str] = {
    "root": "bold green",
    "linked": "cyan",
    "unlinked": "bold red",
}

console = Console()


def status_style(status: str) -> str:
    """Return the Rich style string for a node status."""
    return _STATUS_STYLES.get(status, "white")


def node_status(result: Any, name: str) -> str:
    """Classify a node of ``result`` as "root", "linked" or "unlinked"."""
    if name in result.roots:
        return "root"
    if name in result.unlinked_names:
        return "unlinked"
    return "linked"


def _join(names: Any) -> str:
    return ", ".join(sorted(names)) or "-"


def _missing_parents(result: Any, node: Any) -> list[str]:
    """Declared required parents of ``node`` that are absent from the index."""
    declared = getattr(node, "parent_names", None)
    if declared is None:
        declared = (node.parent,) if node.parent else ()
    return [name for name in declared if name not in result.index]


def print_resolution(result: Any, mode: str) -> None:
    """Print roots, activation order and unlinked nodes of a resolution.

    Args:
        result: A ``DepResolverResult`` or ``TreeResolverResult``.
        mode: "graph" or "tree", shown in the panel title.
    """
    if not result.index:
        console.print("[dim]No nodes declared.[/dim]")
        return

    if result.is_fully_linked:
        headline = Text("All nodes linked", style="bold green")
    else:
        headline = Text(f"{len(result.unlinked)} unlinked", style="bold red")
    console.print(Panel(headline, title=f"Dependency Resolution ({mode})"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Parents")
    table.add_column("Ancestors", justify="right")
    table.add_column("Descendants", justify="right")

    for position, name in enumerate(result.order, start=1):
        node = result.index[name]
        status = node_status(result, name)
        table.add_row(
            str(position),
            name,
            Text(status.upper(), style=status_style(status)),
            _join(node.parents),
            str(len(node.all_ancestors)),
            str(len(node.all_descendants)),
        )
    console.print(table)

    if result.unlinked:
        console.print("[bold red]Unlinked nodes:[/bold red]")
        for node in result.unlinked:
            missing = _missing_parents(result, node)
            reason = f"missing {', '.join(missing)}" if missing else "circular or blocked"
            console.print(f"  [red]- {node.name}[/red] ({reason})")

    console.print(
        f"[bold]{len(result.index)}[/bold] nodes | "
        f"[green]{len(result.roots)} roots[/green] | "
        f"{len(result.order)} linked | "
        f"[red]{len(result.unlinked)} unlinked[/red]"
    )


def print_node_detail(result: Any, name: str) -> None:
    """Print direct and transitive relations of one node."""
    node = result.index[name]
    status = node_status(result, name)
    header = Text.assemble(
        ("Node: ", "bold"), (name, ""),
        ("  Status: ", "bold"), (status.upper(), status_style(status)),
    )
    console.print(Panel(header, title="Node Detail"))

    table = Table(show_header=False)
    table.add_column("Relation", style="bold")
    table.add_column("Nodes")
    table.add_row("Parents", _join(node.parents))
    table.add_row("Children", _join(node.children))
    table.add_row("Ancestors", _join(node.all_ancestors))
    table.add_row("Descendants", _join(node.all_descendants))
    root_node = getattr(node, "root_node", None)
    if root_node is not None:
        table.add_row("Root", root_node.name)
    console.print(table)
