"""
Parser for os-release files.

Format documentation:
https://www.freedesktop.org/software/systemd/man/os-release.html

Only the subset used by real distributions is handled: one KEY=VALUE
assignment per line, optional surrounding double quotes, ``#`` comments and
blank lines. No shell escape processing is done.
"""
from typing import Dict

from loguru import logger

from hostfacts.core.exceptions import OSReleaseFormatError


def unquote(value: str) -> str:
    """Strip exactly one pair of surrounding double quotes, if present."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_os_release(text: str, strict: bool = False) -> Dict[str, str]:
    """
    Parse os-release content into a flat mapping.

    Args:
        text: Raw file content.
        strict: Raise on lines without '=' instead of skipping them.

    Returns:
        Mapping of key to unquoted value. Repeated keys keep the last value.

    Raises:
        OSReleaseFormatError: In strict mode, for a line that is not an
            assignment.
    """
    result: Dict[str, str] = {}

    # Only "\n" ends a line; values may hold other Unicode line separators
    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        if not sep:
            if strict:
                raise OSReleaseFormatError(line_number, raw_line)
            logger.debug(f"Skipping os-release line {line_number} without '=': {line!r}")
            continue

        result[key] = unquote(value)

    return result
