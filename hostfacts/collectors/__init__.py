"""
hostfacts collectors.
"""

from hostfacts.collectors.host import HostFacts, filesystem_for, gather_host_facts
from hostfacts.collectors.kernel import (
    DEFAULT_KERNEL_PATHS,
    KernelInfoCollector,
    get_kernel_info,
    kernel_paths,
)
from hostfacts.collectors.os_release import (
    DEFAULT_OS_RELEASE_PATHS,
    OSReleaseCollector,
    get_os_release,
)

__all__ = [
    "DEFAULT_KERNEL_PATHS",
    "DEFAULT_OS_RELEASE_PATHS",
    "HostFacts",
    "KernelInfoCollector",
    "OSReleaseCollector",
    "filesystem_for",
    "gather_host_facts",
    "get_kernel_info",
    "get_os_release",
    "kernel_paths",
]
