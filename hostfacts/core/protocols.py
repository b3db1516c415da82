"""
Core Protocols - Interfaces for filesystem access.

Collectors depend on these abstractions, not on the host filesystem.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """
    Protocol for read-only filesystem access.

    Implementations must raise ``OSError`` (usually ``FileNotFoundError``)
    from ``read_file`` when a path cannot be read.
    """

    def read_file(self, path: str) -> bytes:
        """Return the full contents of ``path``."""
        ...

    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists."""
        ...
