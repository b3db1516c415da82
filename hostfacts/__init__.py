"""
hostfacts - Host facts for templates.

Collects kernel info and os-release identity through a pluggable
filesystem so the same code reads the live host, a mounted image, or a
synthetic tree in tests.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hostfacts")
except PackageNotFoundError:
    # Package not installed, fallback to pyproject.toml
    __version__ = "0.1.0"

__author__ = "hostfacts Contributors"

from hostfacts.collectors import (  # noqa: E402
    DEFAULT_KERNEL_PATHS,
    DEFAULT_OS_RELEASE_PATHS,
    HostFacts,
    KernelInfoCollector,
    OSReleaseCollector,
    gather_host_facts,
    get_kernel_info,
    get_os_release,
)
from hostfacts.core import (  # noqa: E402
    ConfigError,
    FactReadError,
    FileSystem,
    HostFactsError,
    OSReleaseFormatError,
)
from hostfacts.fs import MemoryFileSystem, OSFileSystem, RootedFileSystem  # noqa: E402
from hostfacts.parser import parse_os_release  # noqa: E402

__all__ = [
    "ConfigError",
    "DEFAULT_KERNEL_PATHS",
    "DEFAULT_OS_RELEASE_PATHS",
    "FactReadError",
    "FileSystem",
    "HostFacts",
    "HostFactsError",
    "KernelInfoCollector",
    "MemoryFileSystem",
    "OSFileSystem",
    "OSReleaseCollector",
    "OSReleaseFormatError",
    "RootedFileSystem",
    "gather_host_facts",
    "get_kernel_info",
    "get_os_release",
    "parse_os_release",
]
