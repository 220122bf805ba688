"""Domain models for git-open."""

from git_open.core.models.provider import Provider
from git_open.core.models.resolution import ArgumentKind, ResolutionContext

__all__ = [
    "Provider",
    "ArgumentKind",
    "ResolutionContext",
]
