"""Domain identifiers and the domain set each platform family defines."""

from enum import StrEnum


class Domain(StrEnum):
    """A per-user location kind."""

    CONFIG = "config"
    DATA = "data"
    CACHE = "cache"
    RUNTIME = "runtime"
    DOCUMENTS = "documents"
    PICTURES = "pictures"
    MUSIC = "music"
    VIDEOS = "videos"
    DOWNLOADS = "downloads"
    PUBLIC = "public"
    TEMPLATES = "templates"


# Domains holding the application's own files; the rest are shared user folders.
BASE_DOMAINS: tuple[Domain, ...] = (
    Domain.CONFIG,
    Domain.DATA,
    Domain.CACHE,
    Domain.RUNTIME,
)

XDG_DOMAINS = frozenset(Domain)

REGISTRY_DOMAINS = frozenset(
    {
        *BASE_DOMAINS,
        Domain.DOCUMENTS,
        Domain.PICTURES,
        Domain.MUSIC,
        Domain.VIDEOS,
    }
)

GENERIC_DOMAINS = frozenset({*BASE_DOMAINS, Domain.DOCUMENTS, Domain.DOWNLOADS})


def parse_domain(value: str | Domain) -> Domain | None:
    """Return the Domain named by *value*, or None if there is no such domain."""
    if isinstance(value, Domain):
        return value
    try:
        return Domain(value.strip().lower())
    except ValueError:
        return None
