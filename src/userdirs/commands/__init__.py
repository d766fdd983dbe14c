"""Commands layer - CLI facade over the locator."""

from userdirs.commands.domains import domains
from userdirs.commands.locate import locate
from userdirs.commands.status import status

__all__ = [
    "domains",
    "locate",
    "status",
]
