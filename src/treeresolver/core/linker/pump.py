"""Shared pieces of the two-pass "pump" linker.

Both resolvers index every declaration up front, park non-root nodes in
per-parent buckets, and drain those buckets from a FIFO activation queue.
Whatever is left in the buckets once the queue runs dry is the unlinked set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol, TypeVar

from treeresolver.core.linker.models import DepNode
from treeresolver.exceptions import DuplicateNameError, LinkError

logger = logging.getLogger(__name__)


class _Named(Protocol):
    name: str


N = TypeVar("N", bound=_Named)


def index_node(index: dict[str, N], node: N) -> None:
    """Add ``node`` to the run's name index, rejecting duplicate names."""
    if node.name in index:
        raise DuplicateNameError(node.name)
    index[node.name] = node


def lookup(index: Mapping[str, N], name: str) -> N:
    """Fetch a node the linker already knows to exist.

    Raises:
        LinkError: If ``name`` is not indexed. Pass 1 indexes every
            declaration before any edge is made, so this is a linker bug.
    """
    try:
        return index[name]
    except KeyError:
        raise LinkError(
            f"Parent {name!r} is missing from the index while linking"
        ) from None


def flatten_unlinked(buckets: Mapping[str, Iterable[N]]) -> tuple[N, ...]:
    """Flatten leftover buckets into the unlinked list.

    Order is bucket key as first encountered, then declaration order within
    the bucket. A node parked in several leftover buckets is listed once.
    """
    seen: dict[str, N] = {}
    for key, waiting in buckets.items():
        for node in waiting:
            if node.name not in seen:
                logger.debug("Node %r left waiting on %r", node.name, key)
                seen[node.name] = node
    return tuple(seen.values())


def propagate(parent: DepNode, child: DepNode) -> None:
    """Link ``child`` under ``parent`` and extend both transitive closures.

    Every ancestor of ``parent`` (and ``parent`` itself) gains every
    descendant of ``child`` (and ``child`` itself), and vice versa. Unions
    are keyed by name, so repeating a link is harmless.
    """
    parent.children[child.name] = child
    child.parents[parent.name] = parent

    upstream = [parent, *parent.all_ancestors.values()]
    downstream = [child, *child.all_descendants.values()]
    for ancestor in upstream:
        for descendant in downstream:
            ancestor.all_descendants[descendant.name] = descendant
            descendant.all_ancestors[ancestor.name] = ancestor
