"""Declaration manifests: YAML or JSON files listing nodes to link.

Manifest schema::

    mode: graph            # "graph" (multi-parent, default) or "tree"
    nodes:
      - name: db
      - name: api
        parents: [db]      # string or list; "parent: db" is also accepted
        optional: [cache]  # graph mode only; rejected in tree mode
        payload: {port: 8080}

Files ending in ``.json`` are decoded with ``json``; anything else is read
as YAML (a superset of JSON).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from treeresolver.core.linker import (
    Declaration,
    DepResolverResult,
    TreeDeclaration,
    TreeResolverResult,
    coerce_names,
    resolve_dependencies,
    resolve_tree,
)
from treeresolver.exceptions import DuplicateNameError, ManifestError

MODES = ("graph", "tree")

AnyDeclaration = Declaration | TreeDeclaration
AnyResult = DepResolverResult | TreeResolverResult


@dataclass
class Manifest:
    """A decoded manifest: its resolution mode and ordered declarations."""

    mode: str = "graph"
    declarations: list[AnyDeclaration] = field(default_factory=list)
    source: str = "<manifest>"

    def resolve(self) -> AnyResult:
        """Run the resolver matching ``mode`` over the declarations."""
        if self.mode == "tree":
            return resolve_tree(self.declarations)
        return resolve_dependencies(self.declarations)


# --- Field readers -------------------------------------------------------


def _name_list(entry: dict[str, Any], key: str, source: str) -> tuple[str, ...]:
    value = entry.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return coerce_names(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return coerce_names(value)
    raise ManifestError(
        f"node {entry.get('name')!r}: {key!r} must be a string or a list of strings",
        source,
    )


def _check_single_parent_key(entry: dict[str, Any], source: str) -> None:
    if entry.get("parent") is not None and entry.get("parents") is not None:
        raise ManifestError(
            f"node {entry['name']!r}: use either 'parent' or 'parents', not both",
            source,
        )


def _graph_parents(entry: dict[str, Any], source: str) -> tuple[str, ...]:
    _check_single_parent_key(entry, source)
    if entry.get("parent") is not None:
        return _name_list(entry, "parent", source)
    return _name_list(entry, "parents", source)


def _tree_parent(entry: dict[str, Any], source: str) -> str | None:
    _check_single_parent_key(entry, source)
    if entry.get("optional") is not None:
        raise ManifestError(
            f"node {entry['name']!r}: optional parents are not supported in tree mode",
            source,
        )
    parent = entry.get("parent")
    if parent is None:
        parents = _name_list(entry, "parents", source)
        if len(parents) > 1:
            raise ManifestError(
                f"node {entry['name']!r}: tree mode allows a single parent",
                source,
            )
        return parents[0] if parents else None
    if not isinstance(parent, str):
        raise ManifestError(f"node {entry['name']!r}: 'parent' must be a string", source)
    return parent


def _declaration(entry: Any, mode: str, source: str) -> AnyDeclaration:
    if not isinstance(entry, dict):
        raise ManifestError(f"node entries must be mappings, got {entry!r}", source)
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestError(f"node entry without a string 'name': {entry!r}", source)

    payload = entry.get("payload")
    if mode == "tree":
        return TreeDeclaration(name, _tree_parent(entry, source), payload)
    return Declaration(
        name=name,
        parents=_graph_parents(entry, source),
        optional_parents=_name_list(entry, "optional", source),
        payload=payload,
    )


# --- Public API ----------------------------------------------------------


def parse_manifest(
    data: Any, source: str = "<manifest>", mode: str | None = None
) -> Manifest:
    """Validate decoded manifest data and build its declarations.

    Args:
        data: The decoded YAML/JSON document.
        source: Label used in error messages (usually the file path).
        mode: Overrides the document's ``mode`` key when given.

    Returns:
        A ``Manifest`` ready to ``resolve()``.

    Raises:
        ManifestError: On schema violations or an unknown mode.
        DuplicateNameError: If a node name appears twice.
    """
    if not isinstance(data, dict):
        raise ManifestError("top level must be a mapping", source)

    chosen = mode or data.get("mode", "graph")
    if chosen not in MODES:
        raise ManifestError(
            f"unknown mode {chosen!r} (expected one of: {', '.join(MODES)})", source
        )

    nodes = data.get("nodes", [])
    if nodes is None:
        nodes = []
    if not isinstance(nodes, list):
        raise ManifestError("'nodes' must be a list", source)

    declarations: list[AnyDeclaration] = []
    seen: set[str] = set()
    for entry in nodes:
        declaration = _declaration(entry, chosen, source)
        if declaration.name in seen:
            raise DuplicateNameError(declaration.name)
        seen.add(declaration.name)
        declarations.append(declaration)

    return Manifest(mode=chosen, declarations=declarations, source=source)


def load_manifest(path: str | Path, mode: str | None = None) -> Manifest:
    """Read and parse a manifest file.

    Raises:
        ManifestError: If the file is unreadable, malformed, or invalid.
        DuplicateNameError: If a node name appears twice.
    """
    file_path = Path(path)
    source = str(file_path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"cannot read file ({exc})", source) from exc

    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ManifestError(f"malformed document ({exc})", source) from exc

    return parse_manifest(data, source=source, mode=mode)
