"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from hostfacts.config import reset_config
from hostfacts.fs import MemoryFileSystem

FEDORA_OS_RELEASE = """NAME=Fedora
VERSION="17 (Beefy Miracle)"
ID=fedora
VERSION_ID=17
PRETTY_NAME="Fedora 17 (Beefy Miracle)"
ANSI_COLOR="0;34"
CPE_NAME="cpe:/o:fedoraproject:fedora:17"
HOME_URL="https://fedoraproject.org/"
BUG_REPORT_URL="https://bugzilla.redhat.com/"
"""

FEDORA_FACTS = {
    "NAME": "Fedora",
    "VERSION": "17 (Beefy Miracle)",
    "ID": "fedora",
    "VERSION_ID": "17",
    "PRETTY_NAME": "Fedora 17 (Beefy Miracle)",
    "ANSI_COLOR": "0;34",
    "CPE_NAME": "cpe:/o:fedoraproject:fedora:17",
    "HOME_URL": "https://fedoraproject.org/",
    "BUG_REPORT_URL": "https://bugzilla.redhat.com/",
}

UBUNTU_OS_RELEASE = """NAME="Ubuntu"
VERSION="18.04.1 LTS (Bionic Beaver)"
ID=ubuntu
ID_LIKE=debian
PRETTY_NAME="Ubuntu 18.04.1 LTS"
VERSION_ID="18.04"
HOME_URL="https://www.ubuntu.com/"
SUPPORT_URL="https://help.ubuntu.com/"
BUG_REPORT_URL="https://bugs.launchpad.net/ubuntu/"
PRIVACY_POLICY_URL="https://www.ubuntu.com/legal/terms-and-policies/privacy-policy"
# comment

  # comment
VERSION_CODENAME=bionic
UBUNTU_CODENAME=bionic"""

UBUNTU_FACTS = {
    "NAME": "Ubuntu",
    "VERSION": "18.04.1 LTS (Bionic Beaver)",
    "ID": "ubuntu",
    "ID_LIKE": "debian",
    "PRETTY_NAME": "Ubuntu 18.04.1 LTS",
    "VERSION_ID": "18.04",
    "HOME_URL": "https://www.ubuntu.com/",
    "SUPPORT_URL": "https://help.ubuntu.com/",
    "BUG_REPORT_URL": "https://bugs.launchpad.net/ubuntu/",
    "PRIVACY_POLICY_URL": "https://www.ubuntu.com/legal/terms-and-policies/privacy-policy",
    "VERSION_CODENAME": "bionic",
    "UBUNTU_CODENAME": "bionic",
}

KERNEL_FILES = {
    "/proc/sys/kernel/version": "#1 SMP Fri Nov 1 14:28:19 UTC 2019",
    "/proc/sys/kernel/ostype": "Linux",
    "/proc/sys/kernel/osrelease": "4.19.81-microsoft-standard",
}

KERNEL_FACTS = {
    "version": "#1 SMP Fri Nov 1 14:28:19 UTC 2019",
    "ostype": "Linux",
    "osrelease": "4.19.81-microsoft-standard",
}


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the user's config file and HOSTFACTS_* vars."""
    for var in ("HOSTFACTS_ROOT", "HOSTFACTS_LOG_LEVEL", "HOSTFACTS_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOSTFACTS_CONFIG", str(tmp_path / "no-such-config.yaml"))
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fedora_text() -> str:
    return FEDORA_OS_RELEASE


@pytest.fixture
def fedora_facts() -> dict[str, str]:
    return dict(FEDORA_FACTS)


@pytest.fixture
def ubuntu_text() -> str:
    return UBUNTU_OS_RELEASE


@pytest.fixture
def ubuntu_facts() -> dict[str, str]:
    return dict(UBUNTU_FACTS)


@pytest.fixture
def kernel_files() -> dict[str, str]:
    return dict(KERNEL_FILES)


@pytest.fixture
def kernel_facts() -> dict[str, str]:
    return dict(KERNEL_FACTS)


@pytest.fixture
def kernel_fs() -> MemoryFileSystem:
    """Filesystem with only the kernel info files."""
    return MemoryFileSystem(KERNEL_FILES)


@pytest.fixture
def fedora_fs() -> MemoryFileSystem:
    """Filesystem with kernel info and a Fedora /etc/os-release."""
    return MemoryFileSystem({**KERNEL_FILES, "/etc/os-release": FEDORA_OS_RELEASE})


@pytest.fixture
def write_tree():
    """Return a helper writing ``{absolute_path: content}`` below a root dir."""

    def _write(root, files):
        for path, content in files.items():
            target = root / path.lstrip("/")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _write
