"""Declaration and node data models for the linker.

Declarations are the caller-owned input records; nodes are the linked
representation the engine builds from them, one node per declaration, fresh
for every resolution run.

Nodes reference each other through name-keyed dicts and therefore form
reference cycles (parent <-> child). They compare by identity and keep their
relation maps out of ``repr`` so that neither equality nor printing walks the
graph.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


def coerce_names(names: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalise a parent-name argument into a tuple of unique names.

    A single string is wrapped, ``None`` becomes empty, and repeated names
    collapse to their first occurrence.
    """
    if names is None:
        return ()
    if isinstance(names, str):
        return (names,)
    return tuple(dict.fromkeys(names))


# ---------------------------------------------------------------------------
# Declarations: ingest records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Declaration:
    """A multi-parent declaration: a name, its required and optional parents.

    Attributes:
        name: Unique node name within one resolution run.
        parents: Names that must all be linked before this node links.
            Empty means the node is a root candidate.
        optional_parents: Names linked to only if they exist and are linked.
        payload: Opaque value carried through to the node unexamined.
    """

    name: str
    parents: tuple[str, ...] = ()
    optional_parents: tuple[str, ...] = ()
    payload: Any = None

    @classmethod
    def create(
        cls,
        name: str,
        parents: str | Iterable[str] | None = None,
        optional_parents: str | Iterable[str] | None = None,
        payload: Any = None,
    ) -> Declaration:
        """Build a declaration, coercing parent arguments into name tuples."""
        return cls(
            name=name,
            parents=coerce_names(parents),
            optional_parents=coerce_names(optional_parents),
            payload=payload,
        )


@dataclass(frozen=True)
class TreeDeclaration:
    """A single-parent declaration. ``parent`` of None or "" marks a root."""

    name: str
    parent: str | None = None
    payload: Any = None


# ---------------------------------------------------------------------------
# Nodes: engine-owned, linked representation
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class DepNode:
    """A node of the multi-parent dependency graph.

    ``parents``/``children`` hold the edges actually established;
    ``all_ancestors``/``all_descendants`` hold their transitive closures.
    The declared names are kept so callers can see why a node stayed
    unlinked.
    """

    name: str
    parent_names: tuple[str, ...] = ()
    optional_parent_names: tuple[str, ...] = ()
    payload: Any = field(default=None, repr=False)
    parents: dict[str, DepNode] = field(default_factory=dict, repr=False)
    children: dict[str, DepNode] = field(default_factory=dict, repr=False)
    all_ancestors: dict[str, DepNode] = field(default_factory=dict, repr=False)
    all_descendants: dict[str, DepNode] = field(default_factory=dict, repr=False)

    @classmethod
    def from_declaration(cls, declaration: Declaration) -> DepNode:
        return cls(
            name=declaration.name,
            parent_names=coerce_names(declaration.parents),
            optional_parent_names=coerce_names(declaration.optional_parents),
            payload=declaration.payload,
        )


@dataclass(eq=False)
class TreeNode:
    """A node of the single-parent forest.

    ``root_node`` is the top of the node's chain, or None when the node is
    itself a root (or was never linked).
    """

    name: str
    parent: str | None = None
    payload: Any = field(default=None, repr=False)
    parent_node: TreeNode | None = field(default=None, repr=False)
    root_node: TreeNode | None = field(default=None, repr=False)
    children: dict[str, TreeNode] = field(default_factory=dict, repr=False)
    all_ancestors: dict[str, TreeNode] = field(default_factory=dict, repr=False)
    all_descendants: dict[str, TreeNode] = field(default_factory=dict, repr=False)

    @classmethod
    def from_declaration(cls, declaration: TreeDeclaration) -> TreeNode:
        return cls(
            name=declaration.name,
            parent=declaration.parent or None,
            payload=declaration.payload,
        )

    @property
    def parents(self) -> dict[str, TreeNode]:
        """Established parent edge as a one-entry (or empty) mapping."""
        if self.parent_node is None:
            return {}
        return {self.parent_node.name: self.parent_node}
