"""Domain mapping ownership and file location.

Flow:
1. create_locator() detects the platform family once and picks its resolver
2. DomainResolver builds the domain -> directory mapping lazily, once
3. FileLocator joins a domain directory with a relative name and makes sure
   the containing directory exists

Nothing here is global: keep the FileLocator returned by create_locator()
and pass it to whatever needs paths.
"""

import logging
import os
import sys
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from userdirs.lib.domains import Domain, parse_domain
from userdirs.lib.errors import (
    DirectoryCreateError,
    DomainNotFoundError,
    InvalidNameError,
    LocateError,
    UnsupportedPlatformError,
)
from userdirs.lib.platforms import PlatformFamily, detect_family
from userdirs.lib.providers import DirectoryProvider
from userdirs.lib.resolvers import FamilyResolver, resolver_for
from userdirs.lib.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class DomainResolver:
    """Owns the domain mapping for one application on one platform family.

    The mapping is built on first use and is read-only afterwards; rebuild()
    replaces it with one computed from the current environment.

    Args:
        resolver: Family resolver that knows the directory layout.
        app_name: Subdirectory appended to the application's own domains.
        env: Environment to read (default: ``os.environ`` at build time).
        home: Home directory (default: ``Path.home()`` at build time).
    """

    def __init__(
        self,
        resolver: FamilyResolver,
        app_name: str,
        env: Mapping[str, str] | None = None,
        home: Path | None = None,
    ) -> None:
        self._resolver = resolver
        self._app_name = app_name
        self._env = env
        self._home = home
        self._mapping: Mapping[Domain, Path] | None = None
        self._lock = threading.Lock()

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def family(self) -> PlatformFamily:
        return self._resolver.family

    def mapping(self) -> Mapping[Domain, Path]:
        """Read-only domain mapping, built on first call."""
        mapping = self._mapping
        if mapping is None:
            with self._lock:
                if self._mapping is None:
                    self._mapping = self._build()
                mapping = self._mapping
        return mapping

    def rebuild(self) -> Mapping[Domain, Path]:
        """Recompute the mapping from the current environment.

        Mappings handed out earlier are left as they were.
        """
        with self._lock:
            self._mapping = self._build()
            logger.debug("Rebuilt domain mapping for %s", self._app_name)
            return self._mapping

    def directory(self, domain: Domain | str) -> Path | None:
        """Directory backing *domain*, or None if the family does not define it."""
        parsed = parse_domain(domain)
        if parsed is None:
            return None
        return self.mapping().get(parsed)

    def _build(self) -> Mapping[Domain, Path]:
        env = os.environ if self._env is None else self._env
        home = self._home or Path.home()

        resolved = self._resolver.resolve(self._app_name, env, home)

        if set(resolved) != self._resolver.domains:
            raise ValueError(
                f"{self.family} resolver returned {sorted(resolved)}, "
                f"expected {sorted(self._resolver.domains)}"
            )
        for domain, directory in resolved.items():
            if not directory.is_absolute():
                raise ValueError(f"Directory for '{domain}' is not absolute: {directory}")

        mapping = {domain: Path(os.path.normpath(d)) for domain, d in resolved.items()}
        logger.debug("Resolved %d domains for %s family", len(mapping), self.family)
        return MappingProxyType(mapping)


class FileLocator:
    """Locate files inside domain directories, creating parents as needed."""

    def __init__(self, resolver: DomainResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> DomainResolver:
        return self._resolver

    def domains(self) -> Mapping[Domain, Path]:
        """Read-only view of the current domain mapping."""
        return self._resolver.mapping()

    def rebuild_domains(self) -> Mapping[Domain, Path]:
        """Re-read the environment and replace the domain mapping."""
        return self._resolver.rebuild()

    def locate_file(self, domain: Domain | str, name: str) -> Result[Path, LocateError]:
        """Absolute path of *name* inside *domain*'s directory.

        Creates every missing directory above the returned path. Whether the
        file itself exists is not checked.

        Returns:
            Ok(path) on success.
            Err(DomainNotFoundError) if the domain is not defined here.
            Err(InvalidNameError) if *name* is empty, absolute, or leaves the
            domain directory.
            Err(DirectoryCreateError) if the parent directory cannot be made.
        """
        root = self._resolver.directory(domain)
        if root is None:
            logger.debug("Domain %s not defined for %s family", domain, self._resolver.family)
            return Err(DomainNotFoundError(str(domain), str(self._resolver.family)))

        if not name.strip():
            return Err(InvalidNameError(str(domain), name, "name is empty"))
        if Path(name).is_absolute():
            return Err(InvalidNameError(str(domain), name, "name must be relative"))

        path = Path(os.path.normpath(root / name))
        if path == root or not path.is_relative_to(root):
            return Err(InvalidNameError(str(domain), name, "name escapes the domain directory"))

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            # ValueError covers names the OS cannot encode (NUL bytes, lone surrogates).
            logger.warning("Could not create %s: %s", path.parent, e)
            return Err(DirectoryCreateError(path.parent, getattr(e, "strerror", None) or str(e)))

        return Ok(path)

    def config_file(self, name: str) -> Result[Path, LocateError]:
        return self.locate_file(Domain.CONFIG, name)

    def data_file(self, name: str) -> Result[Path, LocateError]:
        return self.locate_file(Domain.DATA, name)

    def cache_file(self, name: str) -> Result[Path, LocateError]:
        return self.locate_file(Domain.CACHE, name)

    def runtime_file(self, name: str) -> Result[Path, LocateError]:
        return self.locate_file(Domain.RUNTIME, name)

    def documents_file(self, name: str) -> Result[Path, LocateError]:
        return self.locate_file(Domain.DOCUMENTS, name)


def create_locator(
    app_name: str,
    platform: str | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    provider: DirectoryProvider | None = None,
) -> FileLocator:
    """Build a FileLocator for *app_name* on *platform* (default: ``sys.platform``).

    Raises:
        ValueError: app_name is empty or contains a path separator.
        UnsupportedPlatformError: the platform family has no resolver.
    """
    if app_name in ("", ".", "..") or "/" in app_name or "\\" in app_name:
        raise ValueError(f"Invalid application name: {app_name!r}")

    tag = platform or sys.platform
    family = detect_family(tag)
    if family is PlatformFamily.MACOS:
        raise UnsupportedPlatformError(tag, family)

    resolver = resolver_for(family, tag, provider)
    logger.debug("Using %s resolver for platform %s", family, tag)
    return FileLocator(DomainResolver(resolver, app_name, env=env, home=home))
