"""Platform family detection.

A platform tag is whatever ``sys.platform`` reports (``linux``, ``win32``,
``darwin``, ``freebsd14`` ...). The family decides which resolver builds the
domain mapping.
"""

import sys
from enum import StrEnum


class PlatformFamily(StrEnum):
    """Groups of platforms that share a directory convention."""

    XDG = "xdg"
    REGISTRY = "registry"
    MACOS = "macos"
    GENERIC = "generic"


_XDG_PREFIXES = ("linux", "freebsd", "openbsd", "netbsd", "dragonfly", "sunos", "cygwin")


def detect_family(platform: str | None = None) -> PlatformFamily:
    """Map a platform tag (default: ``sys.platform``) to its family."""
    tag = (platform or sys.platform).strip().lower()

    match tag:
        case "win32":
            return PlatformFamily.REGISTRY
        case "darwin":
            return PlatformFamily.MACOS
        case _ if tag.startswith(_XDG_PREFIXES):
            return PlatformFamily.XDG
        case _:
            return PlatformFamily.GENERIC
