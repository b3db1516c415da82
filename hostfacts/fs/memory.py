"""
In-memory filesystem for tests and dry runs.
"""
import errno
import os
import posixpath
from typing import Dict, Mapping, Optional, Union


class MemoryFileSystem:
    """
    Synthetic filesystem holding a flat map of absolute path to contents.

    Parent directories of every file are implied, so ``exists("/etc")`` is
    True once ``/etc/os-release`` is present.

    Example:
        >>> fs = MemoryFileSystem({"/proc/sys/kernel/ostype": "Linux\\n"})
        >>> fs.read_file("/proc/sys/kernel/ostype")
        b'Linux\\n'
    """

    def __init__(self, files: Optional[Mapping[str, Union[str, bytes]]] = None):
        self._files: Dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self.write_file(path, content)

    @staticmethod
    def _normalize(path: str) -> str:
        return posixpath.normpath(path)

    def write_file(self, path: str, content: Union[str, bytes]) -> None:
        """Add or replace a file."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._files[self._normalize(path)] = content

    def remove(self, path: str) -> None:
        """Delete a file, raising FileNotFoundError if absent."""
        key = self._normalize(path)
        if key not in self._files:
            raise _not_found(path)
        del self._files[key]

    def read_file(self, path: str) -> bytes:
        key = self._normalize(path)
        try:
            return self._files[key]
        except KeyError:
            raise _not_found(path) from None

    def exists(self, path: str) -> bool:
        key = self._normalize(path)
        if key in self._files:
            return True
        prefix = key.rstrip("/") + "/"
        return any(name.startswith(prefix) for name in self._files)

    def __repr__(self) -> str:
        return f"MemoryFileSystem({len(self._files)} files)"


def _not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
