"""
Host facts aggregation.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from loguru import logger

from hostfacts.collectors.kernel import get_kernel_info
from hostfacts.collectors.os_release import get_os_release
from hostfacts.core.protocols import FileSystem
from hostfacts.fs import OSFileSystem, RootedFileSystem

if TYPE_CHECKING:
    from hostfacts.config.models import Config


@dataclass
class HostFacts:
    """Facts about the running host, as exposed to templates."""

    kernel: Dict[str, str] = field(default_factory=dict)
    os_release: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the template data layout."""
        return {
            "kernel": dict(self.kernel),
            "osRelease": dict(self.os_release),
        }


def filesystem_for(config: "Config") -> FileSystem:
    """Return the filesystem selected by ``config.general.root``."""
    if config.general.root is not None:
        return RootedFileSystem(config.general.root)
    return OSFileSystem()


def gather_host_facts(
    fs: Optional[FileSystem] = None,
    config: Optional["Config"] = None,
) -> HostFacts:
    """
    Collect every enabled fact section.

    Args:
        fs: Filesystem to read from (default: chosen from config).
        config: Configuration (default: the loaded global config).

    Raises:
        FactReadError: If an enabled collector fails to read a file.
    """
    if config is None:
        from hostfacts.config.loader import get_config
        config = get_config()
    if fs is None:
        fs = filesystem_for(config)

    facts = HostFacts()

    if config.kernel.enabled:
        facts.kernel = get_kernel_info(fs, config.kernel.paths)
    else:
        logger.debug("Kernel info collection disabled")

    if config.os_release.enabled:
        facts.os_release = get_os_release(
            fs, config.os_release.candidates, strict=config.os_release.strict
        )
    else:
        logger.debug("os-release collection disabled")

    return facts
