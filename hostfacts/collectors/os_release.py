"""
OS-release collector.

Probes the well-known os-release locations in order and parses the first one
that exists.
"""
from typing import Dict, Optional, Sequence

from loguru import logger

from hostfacts.fs.text import read_text
from hostfacts.core.protocols import FileSystem
from hostfacts.parser.os_release import parse_os_release

DEFAULT_OS_RELEASE_PATHS = (
    "/etc/os-release",
    "/usr/lib/os-release",
)


class OSReleaseCollector:
    """
    Collect distribution identity from an os-release file.

    A host with none of the candidate files is an unknown OS, not an error:
    ``collect()`` returns an empty mapping.
    """

    def __init__(
        self,
        fs: FileSystem,
        candidates: Optional[Sequence[str]] = None,
        strict: bool = False,
    ):
        self.fs = fs
        self.candidates = list(candidates if candidates is not None else DEFAULT_OS_RELEASE_PATHS)
        self.strict = strict

    def find(self) -> Optional[str]:
        """Return the first candidate path that exists, or None."""
        for path in self.candidates:
            if self.fs.exists(path):
                return path
        return None

    def collect(self) -> Dict[str, str]:
        path = self.find()
        if path is None:
            logger.debug(f"No os-release file found in {self.candidates}")
            return {}

        logger.debug(f"Reading os-release from {path}")
        return parse_os_release(read_text(self.fs, path), strict=self.strict)


def get_os_release(
    fs: FileSystem,
    candidates: Optional[Sequence[str]] = None,
    strict: bool = False,
) -> Dict[str, str]:
    """Return the parsed os-release mapping, or ``{}`` if no file exists."""
    return OSReleaseCollector(fs, candidates, strict=strict).collect()
