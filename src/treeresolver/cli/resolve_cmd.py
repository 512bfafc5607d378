"""``treeresolver resolve <manifest>`` — Link a declaration manifest.

Loads the manifest, runs the resolver for its mode (multi-parent graph or
single-parent tree), and prints the activation order, roots, and any nodes
whose parents are missing or circular.

Exit Codes:
    0 — Every declared node was linked.
    1 — One or more nodes are unlinked.
    2 — The manifest could not be loaded.
"""

from __future__ import annotations

import json
import sys

import click

from treeresolver.exceptions import TreeResolverError
from treeresolver.parsers.manifest import MODES, Manifest, load_manifest

MODE_OPTION = click.option(
    "--mode",
    type=click.Choice(list(MODES)),
    default=None,
    help="Override the manifest's resolution mode.",
)
FORMAT_OPTION = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def load_or_exit(path: str, mode: str | None, output_format: str) -> Manifest:
    """Load a manifest, reporting failures and exiting with code 2."""
    try:
        return load_manifest(path, mode=mode)
    except TreeResolverError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)


@click.command("resolve")
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@MODE_OPTION
@FORMAT_OPTION
def resolve_command(manifest: str, mode: str | None, output_format: str) -> None:
    """Resolve the declarations in MANIFEST into a linked graph.

    Exit code 0 if every node links, 1 if any node is unlinked.
    """
    loaded = load_or_exit(manifest, mode, output_format)
    result = loaded.resolve()

    if output_format == "json":
        data = {"mode": loaded.mode, **result.to_dict()}
        click.echo(json.dumps(data, indent=2))
    else:
        from treeresolver.cli.output import print_resolution
        print_resolution(result, loaded.mode)

    sys.exit(0 if result.is_fully_linked else 1)
