"""Input parsers that turn declaration files into linker declarations."""

from treeresolver.parsers.manifest import (
    MODES,
    Manifest,
    load_manifest,
    parse_manifest,
)

__all__ = ["MODES", "Manifest", "load_manifest", "parse_manifest"]
