"""
Host filesystem access.
"""
import errno
import os
import posixpath
from pathlib import Path
from typing import Union


class OSFileSystem:
    """Read files from the running host."""

    def read_file(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def __repr__(self) -> str:
        return "OSFileSystem()"


class RootedFileSystem:
    """
    Read files below a root directory, as if it were ``/``.

    Useful for inspecting a container rootfs or a mounted image, and for
    tests that lay out a fake tree under ``tmp_path``.

    Paths never leave the root: ``..`` components are clamped at ``/`` and a
    symlink whose target lies outside the root (an absolute link into the
    host, say) is treated as missing by ``exists`` and refused by
    ``read_file``. Symlinks are followed on the host, not re-rooted, so an
    image's absolute links only work when they point back inside the root.

    Args:
        root: Directory that absolute paths are resolved against.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        """Map an absolute ``path`` to its location under the root."""
        if not posixpath.isabs(path):
            raise ValueError(f"Path must be absolute: {path!r}")
        # normpath clamps leading ".." at "/", so the result stays under root
        normalized = posixpath.normpath(path).lstrip("/")
        return self.root / normalized

    def _contained(self, target: Path) -> bool:
        return target.resolve().is_relative_to(self.root.resolve())

    def read_file(self, path: str) -> bytes:
        target = self.resolve(path)
        if not self._contained(target):
            raise PermissionError(errno.EACCES, "Symlink points outside the root", path)
        return target.read_bytes()

    def exists(self, path: str) -> bool:
        target = self.resolve(path)
        return target.exists() and self._contained(target)

    def __repr__(self) -> str:
        return f"RootedFileSystem({str(self.root)!r})"
