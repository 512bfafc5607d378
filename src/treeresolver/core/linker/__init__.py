"""Two-pass dependency linker: single-parent trees and multi-parent graphs.

All public names are re-exported here so callers can use
``from treeresolver.core.linker import X`` without knowing the module layout.

Both resolvers share one shape:

- **Ingest**: ``add_instance`` accumulates declarations; ``clear`` drops them.
- **Resolve**: ``build`` (or the pure ``resolve_*`` functions) links the
  declarations with a FIFO worklist and returns a fresh snapshot.
- **Result**: roots, the full name index, unlinked nodes (missing or cyclic
  parents), and the activation order.
"""

from treeresolver.core.linker.dep_resolver import (
    DepResolver,
    resolve_dependencies,
)
from treeresolver.core.linker.models import (
    Declaration,
    DepNode,
    TreeDeclaration,
    TreeNode,
    coerce_names,
)
from treeresolver.core.linker.results import (
    DepResolverResult,
    TreeResolverResult,
)
from treeresolver.core.linker.tree_resolver import (
    TreeResolver,
    resolve_tree,
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
    "coerce_names",
    "resolve_dependencies",
    "resolve_tree",
]
