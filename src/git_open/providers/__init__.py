"""Hosting providers for git-open."""

from git_open.providers.registry import (
    DEFAULT_PROVIDERS,
    PROVIDER_CONFIG_PATTERN,
    default_providers,
    find_provider,
    load_user_providers,
    merge_providers,
)

__all__ = [
    "DEFAULT_PROVIDERS",
    "PROVIDER_CONFIG_PATTERN",
    "default_providers",
    "find_provider",
    "load_user_providers",
    "merge_providers",
]
