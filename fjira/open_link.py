"""Open a URL in the system's default handler."""

from __future__ import annotations

import subprocess
import sys

_PLATFORMS = {"linux": "linux", "win32": "windows", "darwin": "darwin"}


def open_link_for_system(system: str, url: str) -> subprocess.Popen:
    """Start the opener for the given system name; ValueError if unsupported."""
    if system == "linux":
        cmd = ["xdg-open", url]
    elif system == "windows":
        cmd = ["rundll32", "url.dll,FileProtocolHandler", url]
    elif system == "darwin":
        cmd = ["open", url]
    else:
        raise ValueError("unsupported platform")
    return subprocess.Popen(cmd)


def open_link(url: str) -> subprocess.Popen:
    system = _PLATFORMS.get(sys.platform, sys.platform)
    if system == "linux" and sys.platform.startswith("linux"):
        system = "linux"
    return open_link_for_system(system, url)