"""Per-user directory resolution for applications."""

from userdirs.lib.domains import Domain
from userdirs.lib.errors import (
    DirectoryCreateError,
    DomainNotFoundError,
    InvalidNameError,
    LocateError,
    UnsupportedPlatformError,
)
from userdirs.lib.locator import DomainResolver, FileLocator, create_locator
from userdirs.lib.platforms import PlatformFamily
from userdirs.lib.result import Err, Ok, Result

__version__ = "0.1.0"

__all__ = [
    "DirectoryCreateError",
    "Domain",
    "DomainNotFoundError",
    "DomainResolver",
    "Err",
    "FileLocator",
    "InvalidNameError",
    "LocateError",
    "Ok",
    "PlatformFamily",
    "Result",
    "UnsupportedPlatformError",
    "__version__",
    "create_locator",
]
