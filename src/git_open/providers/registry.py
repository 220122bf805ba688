"""Provider registry: built-in providers, user configuration and lookup."""

from collections.abc import Iterable, Sequence

import structlog

from git_open.core.exceptions import ProviderNotFoundError
from git_open.core.models.provider import Provider

logger = structlog.get_logger(__name__)

# Ordered list of providers - first match wins
DEFAULT_PROVIDERS: tuple[Provider, ...] = (
    Provider(base_url="https://github.com", commit_segment="commit", tree_segment="tree"),
    Provider(base_url="https://gitlab.com", commit_segment="-/commit", tree_segment="-/tree"),
    Provider(base_url="https://bitbucket.org", commit_segment="commits", tree_segment="src"),
)

# Key pattern for `git config --get-regexp`
PROVIDER_CONFIG_PATTERN = r"^open\..*prefix$"

_CONFIG_PREFIX = "open."
_COMMIT_PROPERTY = "commitprefix"
_TREE_PROPERTY = "pathprefix"


def default_providers() -> list[Provider]:
    """Return the built-in providers in matching order."""
    return list(DEFAULT_PROVIDERS)


def load_user_providers(lines: Iterable[str]) -> list[Provider]:
    """Build providers from ``git config --get-regexp`` output lines.

    The global git config declares one subsection per base URL::

        [open "https://git.mydomain.dev"]
          commitprefix = commit
          pathprefix = tree

    which git reports as ``open.https://git.mydomain.dev.commitprefix commit``.
    The last dot-segment of the key is the property; everything between
    ``open.`` and that segment is the base URL. Unknown properties are
    ignored and a missing property becomes an empty segment. Providers are
    returned in order of first discovery.
    """
    segments: dict[str, dict[str, str]] = {}
    for line in lines:
        fields = line.strip().removeprefix(_CONFIG_PREFIX).split(maxsplit=1)
        if not fields:
            continue
        key = fields[0]
        value = fields[1] if len(fields) == 2 else ""

        base_url, _, prop = key.rpartition(".")
        prop = prop.lower()
        if prop not in (_COMMIT_PROPERTY, _TREE_PROPERTY):
            logger.debug("Ignoring provider config key", key=key)
            continue
        if not base_url:
            logger.debug("Ignoring provider config key without base URL", key=key)
            continue

        entry = segments.setdefault(base_url, {"commit_segment": "", "tree_segment": ""})
        if prop == _COMMIT_PROPERTY:
            entry["commit_segment"] = value
        else:
            entry["tree_segment"] = value

    providers = [Provider(base_url=url, **entry) for url, entry in segments.items()]
    logger.debug("Loaded user providers", count=len(providers))
    return providers


def merge_providers(*sources: Iterable[Provider]) -> list[Provider]:
    """Concatenate provider sources, keyed by base URL.

    A provider whose base URL was already seen replaces the earlier entry
    but keeps its position, so later sources override without reordering.
    """
    merged: dict[str, Provider] = {}
    for source in sources:
        for provider in source:
            merged[provider.base_url] = provider
    return list(merged.values())


def find_provider(registry: Sequence[Provider], host: str) -> Provider:
    """Return the first provider whose base URL contains ``host``.

    Matching is substring containment in registry order, so a base URL
    with a path prefix still matches its host. An empty host never
    matches.

    Raises:
        ProviderNotFoundError: If no provider matches.
    """
    if host:
        for provider in registry:
            if host in provider.base_url:
                return provider
    raise ProviderNotFoundError(host)
