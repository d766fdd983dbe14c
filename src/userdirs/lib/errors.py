"""Error types for userdirs.

Recoverable outcomes are frozen dataclasses returned inside ``Err``.
Pattern match on these in the CLI layer to provide user-friendly messages.
The only exception raised is ``UnsupportedPlatformError``, since a platform
without a resolver cannot produce any mapping at all.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

# =============================================================================
# Locate Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class DomainNotFoundError:
    """Domain is not defined for the current platform family."""

    domain: str
    family: str


@dataclass(frozen=True, slots=True)
class InvalidNameError:
    """File name is empty, absolute, or escapes the domain directory."""

    domain: str
    name: str
    reason: str


@dataclass(frozen=True, slots=True)
class DirectoryCreateError:
    """Containing directory could not be created."""

    path: Path
    reason: str


# =============================================================================
# Fatal Errors
# =============================================================================


class UnsupportedPlatformError(RuntimeError):
    """No resolver is implemented for this platform family."""

    def __init__(self, platform: str, family: str) -> None:
        self.platform = platform
        self.family = family
        super().__init__(
            f"User directory resolution is not implemented for platform "
            f"'{platform}' ({family} family)"
        )


# =============================================================================
# Type Aliases for Error Unions
# =============================================================================

LocateError: TypeAlias = DomainNotFoundError | InvalidNameError | DirectoryCreateError
