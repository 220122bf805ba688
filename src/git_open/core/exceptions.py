"""Exceptions raised while resolving a URL."""

from typing import Any


class GitOpenError(Exception):
    """Base exception for git-open.

    Carries a human readable message and a ``details`` mapping used as
    structured logging context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class GitCommandError(GitOpenError):
    """A git subprocess failed or could not be started."""


class NotARepositoryError(GitOpenError):
    """The working directory is not inside a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__("not a git repository", details={"path": path})


class PathNotFoundError(GitOpenError):
    """The path argument does not exist on the filesystem."""

    def __init__(self, path: str) -> None:
        super().__init__(f"path does not exist: {path}", details={"path": path})


class PathOutsideRepositoryError(GitOpenError):
    """The path argument resolves outside the repository root."""

    def __init__(self, path: str, repo_root: str) -> None:
        super().__init__(
            f"path is outside of the repository: {path}; {repo_root}",
            details={"path": path, "repo_root": repo_root},
        )


class RemoteUnavailableError(GitOpenError):
    """The remote URL or current ref could not be read."""


class ProviderNotFoundError(GitOpenError):
    """No provider matches the remote host."""

    def __init__(self, host: str) -> None:
        super().__init__(f'unable to find provider for: "{host}"', details={"host": host})
        self.host = host


class TooManyArgumentsError(GitOpenError):
    """More than one positional argument was given."""

    def __init__(self, count: int) -> None:
        super().__init__(f"received {count} args, accepts 1", details={"count": count})
        self.count = count


class BrowserLaunchError(GitOpenError):
    """The default browser could not be started."""
