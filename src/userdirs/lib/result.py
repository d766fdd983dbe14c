"""Result type for recoverable outcomes.

Locating a file can fail in ways the caller is expected to handle (unknown
domain, bad name, directory creation refused). Those come back as ``Err``
instead of being raised:

    match locator.locate_file(Domain.CONFIG, "init.toml"):
        case Ok(path):
            ...
        case Err(error):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case containing a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error case containing an error."""

    error: E


Result: TypeAlias = Ok[T] | Err[E]


def map_ok(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply f to the value if Ok, otherwise return the Err unchanged."""
    match result:
        case Ok(value):
            return Ok(f(value))
        case Err() as e:
            return e


def unwrap(result: Result[T, E]) -> T:
    """Extract the value from Ok, or raise ValueError if Err.

    Use sparingly - prefer pattern matching.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise ValueError(f"Called unwrap on Err: {error}")
