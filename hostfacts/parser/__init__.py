"""
hostfacts parsers.
"""

from hostfacts.parser.os_release import parse_os_release, unquote

__all__ = ["parse_os_release", "unquote"]
