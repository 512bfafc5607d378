"""treeresolver: Two-pass dependency linker for single- and multi-parent graphs."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from treeresolver.core.linker import (
    Declaration,
    DepNode,
    DepResolver,
    DepResolverResult,
    TreeDeclaration,
    TreeNode,
    TreeResolver,
    TreeResolverResult,
    resolve_dependencies,
    resolve_tree,
)
from treeresolver.exceptions import (
    DuplicateNameError,
    LinkError,
    ManifestError,
    TreeResolverError,
)

__all__ = [
    "Declaration",
    "DepNode",
    "DepResolver",
    "DepResolverResult",
    "TreeDeclaration",
    "TreeNode",
    "TreeResolver",
    "TreeResolverResult",
    "resolve_dependencies",
    "resolve_tree",
    "DuplicateNameError",
    "LinkError",
    "ManifestError",
    "TreeResolverError",
]
