"""Git access through the git CLI."""

import subprocess
from abc import ABC, abstractmethod

import structlog

from git_open.core.exceptions import GitCommandError

logger = structlog.get_logger(__name__)


class GitAccessor(ABC):
    """Read-only view of a local repository."""

    @abstractmethod
    def git_dir(self, path: str) -> str:
        """Return the git directory for the working directory ``path``."""

    @abstractmethod
    def remote_url(self, git_dir: str, remote: str | None = None) -> str:
        """Return the URL of ``remote``, or of the default remote."""

    @abstractmethod
    def current_ref(self, git_dir: str) -> str:
        """Return the current branch name or symbolic ref."""


class ConfigStore(ABC):
    """Read-only key/value configuration store."""

    @abstractmethod
    def get_regexp(self, pattern: str) -> list[str]:
        """Return ``"key value"`` lines for every key matching ``pattern``."""


class GitCLI(GitAccessor, ConfigStore):
    """Talks to git with subprocess + git CLI directly (no gitpython dependency)."""

    def __init__(self, binary: str = "git", timeout: float | None = None) -> None:
        self._binary = binary
        self._timeout = timeout

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stripped stdout."""
        command = [self._binary, *args]
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self._timeout,
            )
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                (e.stderr or "").strip() or f"git exited with status {e.returncode}",
                details={"args": list(args), "returncode": e.returncode},
            ) from e
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(
                f"git timed out after {self._timeout}s",
                details={"args": list(args)},
            ) from e
        except OSError as e:
            raise GitCommandError(
                f"unable to run {self._binary}: {e}",
                details={"args": list(args)},
            ) from e
        return result.stdout.strip()

    def git_dir(self, path: str) -> str:
        """git -C path rev-parse --git-dir"""
        return self._run_git("-C", path, "rev-parse", "--git-dir")

    def remote_url(self, git_dir: str, remote: str | None = None) -> str:
        """git -C git_dir ls-remote --get-url [remote]"""
        args = ["-C", git_dir, "ls-remote", "--get-url"]
        if remote:
            args.append(remote)
        return self._run_git(*args)

    def current_ref(self, git_dir: str) -> str:
        """git -C git_dir rev-parse --abbrev-ref HEAD"""
        return self._run_git("-C", git_dir, "rev-parse", "--abbrev-ref", "HEAD")

    def get_regexp(self, pattern: str) -> list[str]:
        """git config --global --get-regexp pattern

        git exits with status 1 when nothing matches; that is an empty
        result, not a failure.
        """
        try:
            output = self._run_git("config", "--global", "--get-regexp", pattern)
        except GitCommandError as e:
            if e.details.get("returncode") == 1:
                logger.debug("No global config entries matched", pattern=pattern)
                return []
            raise
        return output.splitlines() if output else []
