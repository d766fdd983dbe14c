"""Tests for lib/resolvers.py - per-family domain layouts."""

from pathlib import Path

import pytest

from conftest import FakeProvider
from userdirs.lib.domains import GENERIC_DOMAINS, REGISTRY_DOMAINS, XDG_DOMAINS, Domain
from userdirs.lib.errors import UnsupportedPlatformError
from userdirs.lib.platforms import PlatformFamily
from userdirs.lib.providers import NullProvider
from userdirs.lib.resolvers import (
    GenericResolver,
    MacosResolver,
    RegistryResolver,
    XdgResolver,
    resolver_for,
)

HOME = Path("/home/u")


class TestXdgResolver:
    def test_defaults_when_env_empty(self) -> None:
        mapping = XdgResolver(NullProvider()).resolve("emacs", {}, HOME)

        assert set(mapping) == XDG_DOMAINS
        assert mapping[Domain.CONFIG] == Path("/home/u/.config/emacs")
        assert mapping[Domain.DATA] == Path("/home/u/.local/share/emacs")
        assert mapping[Domain.CACHE] == Path("/home/u/.cache/emacs")
        assert mapping[Domain.RUNTIME] == Path("/home/u/.local/run/emacs")

    def test_env_overrides_base_dirs(self) -> None:
        env = {
            "XDG_CONFIG_HOME": "/cfg",
            "XDG_DATA_HOME": "/dat",
            "XDG_CACHE_HOME": "/cch",
            "XDG_RUNTIME_DIR": "/run/user/1000",
        }
        mapping = XdgResolver(NullProvider()).resolve("emacs", env, HOME)

        assert mapping[Domain.CONFIG] == Path("/cfg/emacs")
        assert mapping[Domain.DATA] == Path("/dat/emacs")
        assert mapping[Domain.CACHE] == Path("/cch/emacs")
        assert mapping[Domain.RUNTIME] == Path("/run/user/1000/emacs")

    @pytest.mark.parametrize("value", ["", "relative/config"])
    def test_empty_or_relative_env_ignored(self, value: str) -> None:
        mapping = XdgResolver(NullProvider()).resolve("emacs", {"XDG_CONFIG_HOME": value}, HOME)
        assert mapping[Domain.CONFIG] == Path("/home/u/.config/emacs")

    def test_user_dirs_from_provider(self) -> None:
        provider = FakeProvider({"DOCUMENTS": "/home/u/Dokumente", "DOWNLOAD": "/data/dl"})
        mapping = XdgResolver(provider).resolve("emacs", {}, HOME)

        assert mapping[Domain.DOCUMENTS] == Path("/home/u/Dokumente")
        assert mapping[Domain.DOWNLOADS] == Path("/data/dl")
        assert set(provider.calls) == {
            "DOCUMENTS",
            "PICTURES",
            "MUSIC",
            "VIDEOS",
            "DOWNLOAD",
            "PUBLICSHARE",
            "TEMPLATES",
        }

    def test_helper_sees_injected_env_and_home(self) -> None:
        provider = FakeProvider()
        env = {"XDG_CONFIG_HOME": "/srv/u/cfg", "LANG": "de_DE.UTF-8"}

        XdgResolver(provider).resolve("emacs", env, Path("/srv/u"))

        assert provider.envs
        for seen in provider.envs:
            assert seen["HOME"] == "/srv/u"
            assert seen["XDG_CONFIG_HOME"] == "/srv/u/cfg"
            assert seen["LANG"] == "de_DE.UTF-8"

    def test_user_dirs_fall_back_to_home(self) -> None:
        mapping = XdgResolver(NullProvider()).resolve("emacs", {}, HOME)

        assert mapping[Domain.DOCUMENTS] == HOME / "Documents"
        assert mapping[Domain.PICTURES] == HOME / "Pictures"
        assert mapping[Domain.MUSIC] == HOME / "Music"
        assert mapping[Domain.VIDEOS] == HOME / "Videos"
        assert mapping[Domain.DOWNLOADS] == HOME / "Downloads"
        assert mapping[Domain.PUBLIC] == HOME / "Public"
        assert mapping[Domain.TEMPLATES] == HOME / "Templates"

    def test_relative_provider_answer_falls_back(self) -> None:
        provider = FakeProvider({"MUSIC": "Music"})
        mapping = XdgResolver(provider).resolve("emacs", {}, HOME)
        assert mapping[Domain.MUSIC] == HOME / "Music"

    def test_user_dirs_have_no_app_subdir(self) -> None:
        mapping = XdgResolver(NullProvider()).resolve("emacs", {}, HOME)
        assert mapping[Domain.TEMPLATES].name == "Templates"


class TestRegistryResolver:
    ENV = {
        "APPDATA": "/users/u/AppData/Roaming",
        "LOCALAPPDATA": "/users/u/AppData/Local",
        "TEMP": "/users/u/AppData/Local/Temp",
        "USERPROFILE": "/users/u",
    }

    def test_base_dirs_from_env(self) -> None:
        mapping = RegistryResolver(NullProvider()).resolve("emacs", self.ENV, HOME)

        assert set(mapping) == REGISTRY_DOMAINS
        assert mapping[Domain.CONFIG] == Path("/users/u/AppData/Roaming/emacs")
        assert mapping[Domain.DATA] == Path("/users/u/AppData/Local/emacs")
        assert mapping[Domain.CACHE] == Path("/users/u/AppData/Local/emacs/cache")
        assert mapping[Domain.RUNTIME] == Path("/users/u/AppData/Local/Temp/emacs")

    def test_base_dirs_fall_back_to_home(self) -> None:
        mapping = RegistryResolver(NullProvider()).resolve("emacs", {}, HOME)

        assert mapping[Domain.CONFIG] == HOME / "AppData" / "Roaming" / "emacs"
        assert mapping[Domain.DATA] == HOME / "AppData" / "Local" / "emacs"
        assert mapping[Domain.RUNTIME] == HOME / "AppData" / "Local" / "Temp" / "emacs"

    def test_shell_folders_expanded(self) -> None:
        provider = FakeProvider(
            {
                "Personal": "%USERPROFILE%/Documents",
                "My Pictures": "/media/pictures",
            }
        )
        mapping = RegistryResolver(provider).resolve("emacs", self.ENV, HOME)

        assert mapping[Domain.DOCUMENTS] == Path("/users/u/Documents")
        assert mapping[Domain.PICTURES] == Path("/media/pictures")
        assert set(provider.calls) == {"Personal", "My Pictures", "My Music", "My Video"}

    def test_provider_gets_resolver_env(self) -> None:
        provider = FakeProvider()
        RegistryResolver(provider).resolve("emacs", self.ENV, HOME)
        assert all(seen == self.ENV for seen in provider.envs)

    def test_unexpandable_shell_folder_falls_back(self) -> None:
        provider = FakeProvider({"My Music": "%ONEDRIVE%/Music"})
        mapping = RegistryResolver(provider).resolve("emacs", self.ENV, HOME)
        assert mapping[Domain.MUSIC] == HOME / "Music"

    def test_no_downloads_domain(self) -> None:
        mapping = RegistryResolver(NullProvider()).resolve("emacs", self.ENV, HOME)
        assert Domain.DOWNLOADS not in mapping


class TestGenericResolver:
    def test_layout(self) -> None:
        mapping = GenericResolver().resolve("emacs", {}, HOME)

        assert set(mapping) == GENERIC_DOMAINS
        assert mapping[Domain.CONFIG] == HOME / ".emacs"
        assert mapping[Domain.DATA] == HOME / ".emacs" / "data"
        assert mapping[Domain.CACHE] == HOME / ".emacs" / "cache"
        assert mapping[Domain.RUNTIME] == HOME / ".emacs" / "runtime"
        assert mapping[Domain.DOCUMENTS] == HOME / "Documents"
        assert mapping[Domain.DOWNLOADS] == HOME / "Downloads"

    def test_ignores_xdg_env(self) -> None:
        mapping = GenericResolver().resolve("emacs", {"XDG_CONFIG_HOME": "/cfg"}, HOME)
        assert mapping[Domain.CONFIG] == HOME / ".emacs"


class TestMacosResolver:
    def test_resolve_fails(self) -> None:
        with pytest.raises(UnsupportedPlatformError, match="darwin") as exc_info:
            MacosResolver().resolve("emacs", {}, HOME)
        assert exc_info.value.family == PlatformFamily.MACOS


class TestResolverFor:
    def test_xdg_uses_given_provider(self) -> None:
        provider = FakeProvider()
        resolver = resolver_for(PlatformFamily.XDG, "linux", provider)
        assert isinstance(resolver, XdgResolver)
        assert resolver.provider is provider

    def test_registry_default_provider(self) -> None:
        resolver = resolver_for(PlatformFamily.REGISTRY, "win32")
        assert isinstance(resolver, RegistryResolver)

    def test_generic(self) -> None:
        assert isinstance(resolver_for(PlatformFamily.GENERIC, "plan9"), GenericResolver)

    def test_macos_keeps_platform_tag(self) -> None:
        resolver = resolver_for(PlatformFamily.MACOS, "darwin")
        assert isinstance(resolver, MacosResolver)
        assert resolver.platform == "darwin"
