"""Multi-parent dependency linker.

Links a flat list of declarations, each naming any number of required and
optional parents, into a DAG with direct and transitive edges, and reports
the declarations whose required parents are missing or circular.

Algorithm (two-pass worklist):
    1. Index every declaration. Nodes without required parents are roots
       and seed the activation queue; every other node is parked in one
       bucket per required parent name.
    2. Dequeue a name, drain its bucket, and link each waiting node whose
       required parents are now all linked. A linked node is enqueued in
       turn so its own dependents get a chance to link.
    3. Link optional parents between nodes that were linked in step 2.

Buckets left undrained when the queue empties belong to names that never
activated: a missing declaration or a cycle. Their contents are the
unlinked nodes.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

from treeresolver.core.linker.models import Declaration, DepNode
from treeresolver.core.linker.pump import (
    flatten_unlinked,
    index_node,
    lookup,
    propagate,
)
from treeresolver.core.linker.results import DepResolverResult
from treeresolver.exceptions import DuplicateNameError

logger = logging.getLogger(__name__)


def resolve_dependencies(declarations: Sequence[Declaration]) -> DepResolverResult:
    """Link multi-parent declarations into a dependency graph.

    Never raises for missing or circular parents; those nodes are returned
    in ``unlinked``.

    Args:
        declarations: Declarations in caller order. The order determines
            the activation order and the order of ``unlinked``.

    Returns:
        A ``DepResolverResult`` snapshot of the fresh node set.

    Raises:
        DuplicateNameError: If two declarations share a name.
    """
    index: dict[str, DepNode] = {}
    buckets: dict[str, list[DepNode]] = {}
    activation: deque[str] = deque()
    linked: set[str] = set()

    # -- pass 1: index everything, seed roots, bucket the rest by parent
    for declaration in declarations:
        node = DepNode.from_declaration(declaration)
        index_node(index, node)
        if not node.parent_names:
            linked.add(node.name)
            activation.append(node.name)
        else:
            for parent_name in node.parent_names:
                buckets.setdefault(parent_name, []).append(node)

    root_names = list(activation)

    # -- pass 2: breadth-first activation
    order: list[str] = []
    while activation:
        key = activation.popleft()
        order.append(key)
        for node in buckets.pop(key, ()):
            if node.name in linked:
                continue
            pending = [name for name in node.parent_names if name not in linked]
            if pending:
                logger.debug("Deferring %r: waiting on %s", node.name, pending)
                continue
            for parent_name in node.parent_names:
                propagate(lookup(index, parent_name), node)
            linked.add(node.name)
            activation.append(node.name)
            logger.debug("Activated %r via %r", node.name, key)

    # -- pass 3: optional parents, only between linked nodes
    for node in index.values():
        if node.name not in linked:
            continue
        for parent_name in node.optional_parent_names:
            parent = index.get(parent_name)
            if parent is None or parent_name not in linked:
                continue
            if parent is node or parent_name in node.all_descendants:
                logger.debug(
                    "Skipping optional edge %r -> %r: it would close a cycle",
                    parent_name,
                    node.name,
                )
                continue
            propagate(parent, node)

    roots = {name: index[name] for name in root_names if not index[name].parents}
    unlinked = flatten_unlinked(buckets)
    logger.info(
        "Resolved %d nodes: %d roots, %d unlinked",
        len(index),
        len(roots),
        len(unlinked),
    )
    return DepResolverResult(
        roots=roots,
        index=index,
        unlinked=unlinked,
        order=tuple(order),
    )


class DepResolver:
    """Collects multi-parent declarations and links them on demand.

    Usage::

        tree = DepResolver()
        tree.add_instance("db")
        tree.add_instance("api", ["db"], optional_parents="cache")
        result = tree.build()
        result.index["api"].all_ancestors   # {"db": <DepNode db>}

    ``add_instance`` and ``build`` may be called from different threads; the
    pending list is snapshotted under a lock.
    """

    def __init__(self) -> None:
        self._declarations: list[Declaration] = []
        self._names: set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._declarations)

    def add_instance(
        self,
        name: str,
        parents: str | Iterable[str] | None = None,
        optional_parents: str | Iterable[str] | None = None,
        payload: Any = None,
    ) -> None:
        """Queue a node for the next build.

        Args:
            name: The node's unique name.
            parents: Required parent name(s). A single string is accepted.
            optional_parents: Optional parent name(s), linked only if present.
            payload: Anything to carry on the resulting node.

        Raises:
            DuplicateNameError: If ``name`` is already pending.
        """
        declaration = Declaration.create(name, parents, optional_parents, payload)
        with self._lock:
            if name in self._names:
                raise DuplicateNameError(name)
            self._names.add(name)
            self._declarations.append(declaration)

    def clear(self) -> None:
        """Drop every pending declaration. Earlier results are unaffected."""
        with self._lock:
            self._declarations = []
            self._names = set()

    def build(self) -> DepResolverResult:
        """Link the pending declarations into a fresh result."""
        with self._lock:
            snapshot = list(self._declarations)
        return resolve_dependencies(snapshot)
