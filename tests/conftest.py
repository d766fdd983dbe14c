"""Shared pytest fixtures for userdirs tests."""

from collections.abc import Mapping
from pathlib import Path

import pytest
from click.testing import CliRunner

from userdirs.lib.locator import FileLocator, create_locator

XDG_VARS = ("XDG_CONFIG_HOME", "XDG_DATA_HOME", "XDG_CACHE_HOME", "XDG_RUNTIME_DIR")


class FakeProvider:
    """DirectoryProvider answering from a dict and recording lookups."""

    def __init__(self, answers: dict[str, str] | None = None) -> None:
        self.answers = answers or {}
        self.calls: list[str] = []
        self.envs: list[dict[str, str]] = []

    def lookup(self, key: str, env: Mapping[str, str]) -> str | None:
        self.calls.append(key)
        self.envs.append(dict(env))
        return self.answers.get(key)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Empty home directory inside tmp_path."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def clean_xdg_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset every XDG base directory variable."""
    for var in XDG_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def xdg_locator(home: Path, clean_xdg_env: None, fake_provider: FakeProvider) -> FileLocator:
    """Locator for app 'emacs' on linux, reading os.environ and a fake provider."""
    return create_locator("emacs", platform="linux", home=home, provider=fake_provider)


@pytest.fixture
def generic_locator(home: Path) -> FileLocator:
    """Locator for app 'emacs' on a platform without a dedicated layout."""
    return create_locator("emacs", platform="plan9", env={}, home=home)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli_env(home: Path, clean_xdg_env: None, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at the temp home and clear USERDIRS_* overrides."""
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERDIRS_APP", raising=False)
    monkeypatch.delenv("USERDIRS_PLATFORM", raising=False)
    return home
