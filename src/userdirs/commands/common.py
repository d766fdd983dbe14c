"""Shared CLI utilities.

Common options, locator creation, error handling, output formatting.
"""

import json
import sys
from collections.abc import Callable
from dataclasses import asdict, dataclass, is_dataclass
from enum import Enum
from typing import Any, ParamSpec, TypeVar

import click

from userdirs.lib.errors import (
    DirectoryCreateError,
    DomainNotFoundError,
    InvalidNameError,
    UnsupportedPlatformError,
)
from userdirs.lib.locator import FileLocator, create_locator
from userdirs.lib.result import Err, Ok, Result

# Default values
DEFAULT_APP_NAME = "userdirs"

# Type variables for decorators
P = ParamSpec("P")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CliContext:
    """Global options, stored in ``click.Context.obj`` by the root group."""

    app_name: str
    platform: str | None


def json_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --json flag for JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Output as JSON",
    )(fn)


def make_locator(obj: CliContext) -> FileLocator:
    """Create a FileLocator from global CLI options.

    Construction problems (unsupported platform, bad app name) become
    ClickExceptions so they print cleanly and exit with code 1.
    """
    try:
        return create_locator(obj.app_name, platform=obj.platform)
    except (UnsupportedPlatformError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def handle_result(result: Result[T, Any], success_message: str | None = None) -> T:
    """Handle a Result, exiting on error with appropriate message.

    On Ok: returns the value, optionally prints success message
    On Err: prints error and exits with code 1
    """
    match result:
        case Ok(value):
            if success_message:
                click.secho(success_message, fg="green", bold=True)
            return value
        case Err(error):
            handle_error(error)
            sys.exit(1)  # Should never reach here, but for type checker


def handle_error(error: Any) -> None:
    """Print error message and exit."""
    message = _format_error(error)
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _format_error(error: Any) -> str:
    """Format error for display."""
    match error:
        case DomainNotFoundError(domain, family):
            return (
                f"Domain '{domain}' is not defined on {family} platforms. "
                "Run 'userdirs domains' to list the available ones."
            )

        case InvalidNameError(domain, name, reason):
            return f"Invalid file name '{name}' for domain '{domain}': {reason}."

        case DirectoryCreateError(path, reason):
            return f"Failed to create directory '{path}': {reason}"

        case _:
            return str(error)


def to_json(obj: Any) -> str:
    """Convert object to JSON string."""
    return json.dumps(_to_serializable(obj), indent=2)


def _to_serializable(obj: Any) -> Any:
    """Convert object to JSON-serializable form."""
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, dict):
        return {str(_to_serializable(k)): _to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_serializable(v) for v in obj]
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_serializable(asdict(obj))
    return str(obj)


def echo_key_value(key: str, value: Any, indent: int = 0) -> None:
    """Print a key-value pair with optional indentation."""
    prefix = "  " * indent
    click.echo(f"{prefix}{key}: {value}")


def echo_section(title: str) -> None:
    """Print a section header."""
    click.echo()
    click.secho(title, bold=True)
    click.echo("-" * len(title))
