"""treeresolver exception hierarchy.

All public exceptions inherit from TreeResolverError, giving callers a single
base class to catch when they want to handle any treeresolver-specific failure
without swallowing unrelated errors.

Missing and circular dependencies are NOT exceptions: the linker reports them
as unlinked nodes on the result.
"""

from __future__ import annotations


class TreeResolverError(Exception):
    """Base exception for all treeresolver errors."""


class DuplicateNameError(TreeResolverError, ValueError):
    """Raised when the same node name is declared twice in one pending set.

    Overwriting a name would silently corrupt the index that established
    edges refer to, so duplicates are rejected at ingest time.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Node {name!r} is already declared")
        self.name = name


class LinkError(TreeResolverError):
    """Raised when the linker breaks one of its own invariants.

    Every declared node is indexed before any edge is established, so a
    failed lookup for a satisfiable edge signals a programming error rather
    than bad input.
    """


class ManifestError(TreeResolverError):
    """Raised when a declaration manifest cannot be read or validated.

    Covers unreadable files, malformed YAML/JSON, unknown resolution modes,
    and node entries with missing or mistyped fields.
    """

    def __init__(self, message: str, source: str = "<manifest>") -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
