"""Result snapshots returned by the resolvers.

A result is a frozen view over one resolution run: the root set, the full
name index (linked or not), the unlinked nodes, and the activation order in
which linked nodes became available. The root and index mappings are
read-only proxies. A result holds no reference back to the resolver that
produced it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from treeresolver.core.linker.models import DepNode, TreeNode


def _names(nodes: Mapping[str, Any]) -> list[str]:
    return sorted(nodes)


@dataclass(frozen=True)
class _ResolverResult:
    """Fields and queries shared by both result types."""

    roots: Mapping[str, Any] = field(default_factory=dict)
    index: Mapping[str, Any] = field(default_factory=dict)
    unlinked: tuple[Any, ...] = ()
    order: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "roots", MappingProxyType(dict(self.roots)))
        object.__setattr__(self, "index", MappingProxyType(dict(self.index)))
        object.__setattr__(self, "unlinked", tuple(self.unlinked))
        object.__setattr__(self, "order", tuple(self.order))

    def __len__(self) -> int:
        return len(self.index)

    def __contains__(self, name: object) -> bool:
        return name in self.index

    def get(self, name: str) -> Any:
        """Return the node called ``name``, or None if it was never declared."""
        return self.index.get(name)

    @property
    def unlinked_names(self) -> list[str]:
        return [node.name for node in self.unlinked]

    @property
    def is_fully_linked(self) -> bool:
        """True if every declared node was linked."""
        return not self.unlinked

    def _node_dict(self, node: Any, linked: bool) -> dict[str, Any]:
        return {
            "parents": _names(node.parents),
            "children": _names(node.children),
            "ancestors": _names(node.all_ancestors),
            "descendants": _names(node.all_descendants),
            "linked": linked,
        }

    def to_dict(self) -> dict[str, Any]:
        """Render the result as a JSON-serialisable dict.

        Payloads are opaque and therefore left out.
        """
        unlinked = set(self.unlinked_names)
        return {
            "roots": list(self.roots),
            "order": list(self.order),
            "unlinked": self.unlinked_names,
            "nodes": {
                name: self._node_dict(node, name not in unlinked)
                for name, node in self.index.items()
            },
        }


@dataclass(frozen=True)
class DepResolverResult(_ResolverResult):
    """Outcome of a multi-parent resolution.

    Attributes:
        roots: Linked nodes without any parent edge, keyed by name.
        index: Every declared node keyed by name, linked or not.
        unlinked: Nodes with a missing or cyclic required parent.
        order: Names of linked nodes in activation order; each node appears
            after all of its required parents.
    """

    roots: Mapping[str, DepNode] = field(default_factory=dict)
    index: Mapping[str, DepNode] = field(default_factory=dict)
    unlinked: tuple[DepNode, ...] = ()


@dataclass(frozen=True)
class TreeResolverResult(_ResolverResult):
    """Outcome of a single-parent resolution; adds each node's root."""

    roots: Mapping[str, TreeNode] = field(default_factory=dict)
    index: Mapping[str, TreeNode] = field(default_factory=dict)
    unlinked: tuple[TreeNode, ...] = ()

    def _node_dict(self, node: TreeNode, linked: bool) -> dict[str, Any]:
        data = super()._node_dict(node, linked)
        data["root"] = node.root_node.name if node.root_node is not None else None
        return data
