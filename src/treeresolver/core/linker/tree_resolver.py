"""Single-parent tree linker.

The single-parent specialisation of the two-pass worklist in
``dep_resolver``: every node names at most one parent, so the result is a
forest, and each linked node also learns the root of its chain.

A node is linked as soon as its parent activates. Nodes in a parent cycle
never see their parent activate (no cycle member is a root), so they stay in
their buckets and come back as unlinked, exactly like nodes whose parent was
never declared.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Sequence
from typing import Any

from treeresolver.core.linker.models import TreeDeclaration, TreeNode
from treeresolver.core.linker.pump import flatten_unlinked, index_node, lookup
from treeresolver.core.linker.results import TreeResolverResult
from treeresolver.exceptions import DuplicateNameError

logger = logging.getLogger(__name__)


def _link_to_parent(node: TreeNode, parent: TreeNode) -> None:
    parent.children[node.name] = node
    node.parent_node = parent
    node.root_node = parent.root_node if parent.root_node is not None else parent

    # walk up the chain: every ancestor gains this node as a descendant
    ancestor: TreeNode | None = parent
    while ancestor is not None:
        ancestor.all_descendants[node.name] = node
        node.all_ancestors[ancestor.name] = ancestor
        ancestor = ancestor.parent_node


def resolve_tree(declarations: Sequence[TreeDeclaration]) -> TreeResolverResult:
    """Link single-parent declarations into a forest.

    Args:
        declarations: Declarations in caller order.

    Returns:
        A ``TreeResolverResult``; nodes with a missing or circular parent are
        in ``unlinked``.

    Raises:
        DuplicateNameError: If two declarations share a name.
    """
    index: dict[str, TreeNode] = {}
    roots: dict[str, TreeNode] = {}
    buckets: dict[str, list[TreeNode]] = {}
    activation: deque[str] = deque()

    for declaration in declarations:
        node = TreeNode.from_declaration(declaration)
        index_node(index, node)
        if node.parent is None:
            roots[node.name] = node
            activation.append(node.name)
        else:
            buckets.setdefault(node.parent, []).append(node)

    order: list[str] = []
    while activation:
        key = activation.popleft()
        order.append(key)
        for node in buckets.pop(key, ()):
            _link_to_parent(node, lookup(index, key))
            activation.append(node.name)
            logger.debug("Activated %r under %r", node.name, key)

    unlinked = flatten_unlinked(buckets)
    logger.info(
        "Resolved %d nodes: %d roots, %d unlinked",
        len(index),
        len(roots),
        len(unlinked),
    )
    return TreeResolverResult(
        roots=roots,
        index=index,
        unlinked=unlinked,
        order=tuple(order),
    )


class TreeResolver:
    """Collects single-parent declarations and links them on demand.

    Usage::

        tree = TreeResolver()
        tree.add_instance("app")
        tree.add_instance("plugin", "app")
        result = tree.build()
        result.index["plugin"].root_node.name   # "app"
    """

    def __init__(self) -> None:
        self._declarations: list[TreeDeclaration] = []
        self._names: set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._declarations)

    def add_instance(
        self, name: str, parent: str | None = None, payload: Any = None
    ) -> None:
        """Queue a node for the next build.

        Raises:
            DuplicateNameError: If ``name`` is already pending.
        """
        with self._lock:
            if name in self._names:
                raise DuplicateNameError(name)
            self._names.add(name)
            self._declarations.append(TreeDeclaration(name, parent, payload))

    def clear(self) -> None:
        """Drop every pending declaration. Earlier results are unaffected."""
        with self._lock:
            self._declarations = []
            self._names = set()

    def build(self) -> TreeResolverResult:
        """Link the pending declarations into a fresh result."""
        with self._lock:
            snapshot = list(self._declarations)
        return resolve_tree(snapshot)
