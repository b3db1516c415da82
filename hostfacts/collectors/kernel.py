"""
Kernel info collector.

Reads the kernel version, type and release from /proc/sys/kernel.
"""
from typing import Dict, Mapping, Optional

from loguru import logger

from hostfacts.core.protocols import FileSystem
from hostfacts.fs.text import read_text

DEFAULT_KERNEL_PATHS: Dict[str, str] = {
    "version": "/proc/sys/kernel/version",
    "ostype": "/proc/sys/kernel/ostype",
    "osrelease": "/proc/sys/kernel/osrelease",
}


def kernel_paths(overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Merge ``overrides`` over DEFAULT_KERNEL_PATHS.

    The result always holds exactly the keys ``version``, ``ostype`` and
    ``osrelease``.

    Raises:
        ValueError: If ``overrides`` names a key outside that set.
    """
    overrides = dict(overrides or {})
    unknown = sorted(set(overrides) - set(DEFAULT_KERNEL_PATHS))
    if unknown:
        raise ValueError(
            f"Unknown kernel fact keys {unknown}; expected {sorted(DEFAULT_KERNEL_PATHS)}"
        )
    return {**DEFAULT_KERNEL_PATHS, **overrides}


class KernelInfoCollector:
    """
    Collect the kernel info triplet.

    All files are required: if any read fails the whole collection fails and
    no partial mapping is returned. ``paths`` overrides individual default
    locations; keys it leaves out keep their /proc/sys/kernel path.
    """

    def __init__(self, fs: FileSystem, paths: Optional[Mapping[str, str]] = None):
        self.fs = fs
        self.paths = kernel_paths(paths)

    def collect(self) -> Dict[str, str]:
        info: Dict[str, str] = {}
        for key, path in self.paths.items():
            info[key] = read_text(self.fs, path).strip()
        logger.debug(f"Collected kernel info from {len(info)} files")
        return info


def get_kernel_info(fs: FileSystem, paths: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return ``{"version", "ostype", "osrelease"}`` read through ``fs``."""
    return KernelInfoCollector(fs, paths).collect()
