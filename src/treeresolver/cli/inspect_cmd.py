"""``treeresolver inspect <manifest> <name>`` — Show one node's relations.

Exit Codes:
    0 — Node found and displayed.
    2 — Manifest could not be loaded, or NAME is not declared in it.
"""

from __future__ import annotations

import json
import sys

import click

from treeresolver.cli.resolve_cmd import FORMAT_OPTION, MODE_OPTION, load_or_exit


@click.command("inspect")
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
@MODE_OPTION
@FORMAT_OPTION
def inspect_command(
    manifest: str, name: str, mode: str | None, output_format: str
) -> None:
    """Show parents, children, ancestors and descendants of NAME."""
    loaded = load_or_exit(manifest, mode, output_format)
    result = loaded.resolve()

    if name not in result:
        message = f"Node {name!r} is not declared in {manifest}"
        if output_format == "json":
            click.echo(json.dumps({"error": message}))
        else:
            click.echo(f"Error: {message}")
        sys.exit(2)

    if output_format == "json":
        node_data = result.to_dict()["nodes"][name]
        click.echo(json.dumps({"name": name, **node_data}, indent=2))
    else:
        from treeresolver.cli.output import print_node_detail
        print_node_detail(result, name)
