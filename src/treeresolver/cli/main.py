"""treeresolver CLI — Link dependency declarations into trees and graphs.

Entry point for the ``treeresolver`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    resolve  — Link a manifest and report roots, order and unlinked nodes.
    inspect  — Show the direct and transitive relations of one node.

Usage::

    treeresolver resolve services.yaml
    treeresolver resolve services.yaml --format json
    treeresolver resolve plugins.yaml --mode tree
    treeresolver inspect services.yaml api
    treeresolver -v resolve services.yaml     # debug logging
"""

from __future__ import annotations

import logging

import click

from treeresolver import __version__
from treeresolver.cli.inspect_cmd import inspect_command
from treeresolver.cli.resolve_cmd import resolve_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """treeresolver: Dependency linking for single- and multi-parent graphs.

    Resolve declaration manifests into linked graphs, detect missing and
    circular dependencies, and inspect transitive relationships.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(resolve_command)
cli.add_command(inspect_command)
