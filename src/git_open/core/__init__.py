"""Core domain models and exceptions for git-open."""

from git_open.core.exceptions import (
    BrowserLaunchError,
    GitCommandError,
    GitOpenError,
    NotARepositoryError,
    PathNotFoundError,
    PathOutsideRepositoryError,
    ProviderNotFoundError,
    RemoteUnavailableError,
    TooManyArgumentsError,
)
from git_open.core.models import ArgumentKind, Provider, ResolutionContext

__all__ = [
    # Models
    "Provider",
    "ArgumentKind",
    "ResolutionContext",
    # Exceptions
    "GitOpenError",
    "GitCommandError",
    "NotARepositoryError",
    "PathNotFoundError",
    "PathOutsideRepositoryError",
    "RemoteUnavailableError",
    "ProviderNotFoundError",
    "TooManyArgumentsError",
    "BrowserLaunchError",
]
