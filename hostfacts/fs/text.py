"""
Text reads through a FileSystem.
"""
from hostfacts.core.exceptions import FactReadError
from hostfacts.core.protocols import FileSystem


def read_text(fs: FileSystem, path: str) -> str:
    """Read ``path`` as UTF-8 text, wrapping OS errors in FactReadError."""
    try:
        data = fs.read_file(path)
    except OSError as e:
        raise FactReadError(path, e.strerror or str(e)) from e
    return data.decode("utf-8", errors="replace")
