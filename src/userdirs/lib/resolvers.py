"""Family resolvers - build the domain mapping for one platform family.

Each resolver answers a single question: given the application name, the
environment and the home directory, which directory backs each domain?
They never create anything on disk.

Flow for the base domains (config/data/cache/runtime):
1. Environment variable, if set to an absolute path
2. Home-relative default otherwise
3. Application name appended

Shared user folders (documents, pictures, ...) come from a DirectoryProvider
with a home-relative fallback and no application subdirectory.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Protocol

from userdirs.lib.domains import (
    GENERIC_DOMAINS,
    REGISTRY_DOMAINS,
    XDG_DOMAINS,
    Domain,
)
from userdirs.lib.errors import UnsupportedPlatformError
from userdirs.lib.platforms import PlatformFamily
from userdirs.lib.providers import (
    DirectoryProvider,
    RegistryShellFolderProvider,
    XdgUserDirProvider,
)

# domain -> (environment variable, home-relative default)
XDG_BASE_DIRS: dict[Domain, tuple[str, tuple[str, ...]]] = {
    Domain.CONFIG: ("XDG_CONFIG_HOME", (".config",)),
    Domain.DATA: ("XDG_DATA_HOME", (".local", "share")),
    Domain.CACHE: ("XDG_CACHE_HOME", (".cache",)),
    Domain.RUNTIME: ("XDG_RUNTIME_DIR", (".local", "run")),
}

# domain -> (xdg-user-dir key, home-relative fallback)
XDG_USER_DIRS: dict[Domain, tuple[str, str]] = {
    Domain.DOCUMENTS: ("DOCUMENTS", "Documents"),
    Domain.PICTURES: ("PICTURES", "Pictures"),
    Domain.MUSIC: ("MUSIC", "Music"),
    Domain.VIDEOS: ("VIDEOS", "Videos"),
    Domain.DOWNLOADS: ("DOWNLOAD", "Downloads"),
    Domain.PUBLIC: ("PUBLICSHARE", "Public"),
    Domain.TEMPLATES: ("TEMPLATES", "Templates"),
}

# domain -> (environment variable, home-relative default, subdirectory below the app)
REGISTRY_BASE_DIRS: dict[Domain, tuple[str, tuple[str, ...], tuple[str, ...]]] = {
    Domain.CONFIG: ("APPDATA", ("AppData", "Roaming"), ()),
    Domain.DATA: ("LOCALAPPDATA", ("AppData", "Local"), ()),
    Domain.CACHE: ("LOCALAPPDATA", ("AppData", "Local"), ("cache",)),
    Domain.RUNTIME: ("TEMP", ("AppData", "Local", "Temp"), ()),
}

# domain -> (registry value name, home-relative fallback)
REGISTRY_SHELL_FOLDERS: dict[Domain, tuple[str, str]] = {
    Domain.DOCUMENTS: ("Personal", "Documents"),
    Domain.PICTURES: ("My Pictures", "Pictures"),
    Domain.MUSIC: ("My Music", "Music"),
    Domain.VIDEOS: ("My Video", "Videos"),
}

GENERIC_USER_DIRS: dict[Domain, str] = {
    Domain.DOCUMENTS: "Documents",
    Domain.DOWNLOADS: "Downloads",
}

_ENV_REFERENCE = re.compile(r"%([^%]+)%")


class FamilyResolver(Protocol):
    """Uniform "resolve the domain mapping" operation for one family."""

    family: ClassVar[PlatformFamily]
    domains: ClassVar[frozenset[Domain]]

    def resolve(self, app_name: str, env: Mapping[str, str], home: Path) -> dict[Domain, Path]:
        """Return a directory for every domain in ``domains``."""
        ...


def _absolute(value: str | None) -> Path | None:
    """Path for *value* if it is a non-empty absolute path, else None."""
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else None


def _expand(value: str, env: Mapping[str, str]) -> str:
    """Expand %VAR% references from *env*, leaving unknown ones untouched."""
    return _ENV_REFERENCE.sub(lambda m: env.get(m.group(1), m.group(0)), value)


@dataclass(frozen=True, slots=True)
class XdgResolver:
    """XDG Base Directory layout (Linux and the BSDs)."""

    family: ClassVar[PlatformFamily] = PlatformFamily.XDG
    domains: ClassVar[frozenset[Domain]] = XDG_DOMAINS

    provider: DirectoryProvider = field(default_factory=XdgUserDirProvider)

    def resolve(self, app_name: str, env: Mapping[str, str], home: Path) -> dict[Domain, Path]:
        mapping: dict[Domain, Path] = {}

        for domain, (var, default) in XDG_BASE_DIRS.items():
            base = _absolute(env.get(var)) or home.joinpath(*default)
            mapping[domain] = base / app_name

        helper_env = {**env, "HOME": str(home)}
        for domain, (key, fallback) in XDG_USER_DIRS.items():
            mapping[domain] = _absolute(self.provider.lookup(key, helper_env)) or home / fallback

        return mapping


@dataclass(frozen=True, slots=True)
class RegistryResolver:
    """Windows layout: AppData variables plus registry shell folders."""

    family: ClassVar[PlatformFamily] = PlatformFamily.REGISTRY
    domains: ClassVar[frozenset[Domain]] = REGISTRY_DOMAINS

    provider: DirectoryProvider = field(default_factory=RegistryShellFolderProvider)

    def resolve(self, app_name: str, env: Mapping[str, str], home: Path) -> dict[Domain, Path]:
        mapping: dict[Domain, Path] = {}

        for domain, (var, default, suffix) in REGISTRY_BASE_DIRS.items():
            base = _absolute(env.get(var)) or home.joinpath(*default)
            mapping[domain] = base.joinpath(app_name, *suffix)

        for domain, (value_name, fallback) in REGISTRY_SHELL_FOLDERS.items():
            raw = self.provider.lookup(value_name, env)
            folder = _absolute(_expand(raw, env)) if raw else None
            mapping[domain] = folder or home / fallback

        return mapping


@dataclass(frozen=True, slots=True)
class GenericResolver:
    """Everything under one ``~/.<app>`` directory, plus two home folders."""

    family: ClassVar[PlatformFamily] = PlatformFamily.GENERIC
    domains: ClassVar[frozenset[Domain]] = GENERIC_DOMAINS

    def resolve(self, app_name: str, env: Mapping[str, str], home: Path) -> dict[Domain, Path]:
        root = home / f".{app_name}"
        mapping: dict[Domain, Path] = {
            Domain.CONFIG: root,
            Domain.DATA: root / "data",
            Domain.CACHE: root / "cache",
            Domain.RUNTIME: root / "runtime",
        }
        for domain, folder in GENERIC_USER_DIRS.items():
            mapping[domain] = home / folder
        return mapping


@dataclass(frozen=True, slots=True)
class MacosResolver:
    """Placeholder for the macOS family, which has no layout yet."""

    family: ClassVar[PlatformFamily] = PlatformFamily.MACOS
    domains: ClassVar[frozenset[Domain]] = frozenset()

    platform: str = "darwin"

    def resolve(self, app_name: str, env: Mapping[str, str], home: Path) -> dict[Domain, Path]:
        # TODO: map to ~/Library/{Application Support,Caches,Preferences} once a
        # layout for the shared user folders is settled.
        raise UnsupportedPlatformError(self.platform, self.family)


def resolver_for(
    family: PlatformFamily,
    platform: str,
    provider: DirectoryProvider | None = None,
) -> FamilyResolver:
    """Pick the resolver for *family*, wiring in *provider* where one is used."""
    match family:
        case PlatformFamily.XDG:
            return XdgResolver(provider) if provider is not None else XdgResolver()
        case PlatformFamily.REGISTRY:
            return RegistryResolver(provider) if provider is not None else RegistryResolver()
        case PlatformFamily.MACOS:
            return MacosResolver(platform)
        case PlatformFamily.GENERIC:
            return GenericResolver()
