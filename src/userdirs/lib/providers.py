"""Directory providers - OS facilities that know where user folders live.

Resolvers never talk to the OS directly. They ask a provider for a key and
fall back to a home-relative default when the provider has no answer, so
tests can hand in a fake provider instead of running real helpers.
"""

import logging
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

USER_SHELL_FOLDERS_KEY = r"Software\Microsoft\Windows\CurrentVersion\Explorer\User Shell Folders"


class DirectoryProvider(Protocol):
    """Look up a user directory by provider-specific key."""

    def lookup(self, key: str, env: Mapping[str, str]) -> str | None:
        """Return the raw directory string for *key*, or None if unknown.

        *env* is the environment the locator resolves against, which is not
        necessarily the process environment.
        """
        ...


@dataclass(frozen=True, slots=True)
class XdgUserDirProvider:
    """Ask the ``xdg-user-dir`` helper (from xdg-user-dirs) for a folder.

    Keys are the helper's names: DOCUMENTS, PICTURES, MUSIC, VIDEOS,
    DOWNLOAD, PUBLICSHARE, TEMPLATES. The helper runs with *env* as its whole
    environment, so it reads ``user-dirs.dirs`` below the locator's HOME and
    XDG_CONFIG_HOME.
    """

    command: str = "xdg-user-dir"

    def lookup(self, key: str, env: Mapping[str, str]) -> str | None:
        try:
            proc = subprocess.run(
                [self.command, key],
                check=True,
                capture_output=True,
                text=True,
                env=dict(env),
            )
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug("User directory helper unavailable for %s: %s", key, e)
            return None
        return proc.stdout.strip() or None


@dataclass(frozen=True, slots=True)
class RegistryShellFolderProvider:
    """Read a value from the current user's "User Shell Folders" registry key.

    Values are returned unexpanded (they are usually REG_EXPAND_SZ such as
    ``%USERPROFILE%\\Documents``); the resolver expands them from *env*.
    """

    key_path: str = USER_SHELL_FOLDERS_KEY

    def lookup(self, key: str, env: Mapping[str, str]) -> str | None:
        if sys.platform != "win32":
            return None

        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, self.key_path) as handle:
                value, _ = winreg.QueryValueEx(handle, key)
        except OSError as e:
            logger.debug("Shell folder lookup failed for %s: %s", key, e)
            return None
        return str(value).strip() or None


@dataclass(frozen=True, slots=True)
class NullProvider:
    """Provider that never knows anything; every lookup uses the fallback."""

    def lookup(self, key: str, env: Mapping[str, str]) -> str | None:
        return None
