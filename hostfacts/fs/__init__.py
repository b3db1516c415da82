"""
hostfacts filesystems - implementations of the FileSystem protocol.
"""

from hostfacts.fs.memory import MemoryFileSystem
from hostfacts.fs.real import OSFileSystem, RootedFileSystem
from hostfacts.fs.text import read_text

__all__ = [
    "MemoryFileSystem",
    "OSFileSystem",
    "RootedFileSystem",
    "read_text",
]
