"""Resolves a command-line argument to a provider URL."""

import os
from collections.abc import Sequence

import structlog

from git_open.core.exceptions import (
    GitCommandError,
    NotARepositoryError,
    RemoteUnavailableError,
)
from git_open.core.models.provider import Provider
from git_open.core.models.resolution import ArgumentKind, ResolutionContext
from git_open.git.accessor import GitAccessor
from git_open.git.remote import parse_remote
from git_open.providers.registry import default_providers, find_provider
from git_open.resolution.classifier import classify
from git_open.resolution.paths import resolve_path
from git_open.resolution.urls import commit_url, path_url, root_url

logger = structlog.get_logger(__name__)


class URLResolver:
    """Resolves an argument (empty, a path or a commit SHA) to a web URL.

    Three URL shapes are produced:
    - Root: https://github.com/org/repo
    - Path: https://github.com/org/repo/tree/main/docs/file.md
    - Commit: https://github.com/org/repo/commit/7605d91

    Only the built-in providers are consulted unless ``providers`` is given;
    merging user-configured providers is left to the caller.
    """

    def __init__(
        self,
        git: GitAccessor,
        providers: Sequence[Provider] | None = None,
        cwd: str | None = None,
        remote: str | None = None,
    ) -> None:
        self._git = git
        self._providers = list(providers) if providers is not None else default_providers()
        self._cwd = cwd
        self._remote = remote

    @property
    def providers(self) -> list[Provider]:
        return list(self._providers)

    def resolve(self, arg: str) -> str:
        """Resolve ``arg`` to a URL.

        Raises:
            NotARepositoryError: If the working directory is not in a repository.
            PathNotFoundError: If a path argument does not exist.
            PathOutsideRepositoryError: If a path argument leaves the repository.
            RemoteUnavailableError: If the remote URL or ref cannot be read.
            ProviderNotFoundError: If no provider matches the remote host.
        """
        context = self.context(arg)
        provider = find_provider(self._providers, context.host)
        url = self.render(provider, context)
        logger.debug("Resolved URL", url=url, provider=provider.base_url, kind=context.kind.value)
        return url

    def context(self, arg: str) -> ResolutionContext:
        """Gather repository, path and remote state for ``arg``."""
        cwd = self._cwd if self._cwd is not None else os.getcwd()

        try:
            git_dir = self._git.git_dir(cwd)
        except GitCommandError as e:
            raise NotARepositoryError(cwd) from e
        git_dir = os.path.abspath(os.path.join(cwd, git_dir))
        repo_root = git_dir.removesuffix(".git")
        logger.debug("Found repository", git_dir=git_dir, repo_root=repo_root)

        kind = classify(arg)
        path = ""
        if kind is ArgumentKind.PATH:
            path = resolve_path(arg, repo_root, cwd=cwd)
        logger.debug("Classified argument", arg=arg, kind=kind.value, path=path)

        remote_url, ref = self._remote_ref(git_dir)
        host, repo = parse_remote(remote_url)
        logger.debug("Parsed remote", remote_url=remote_url, host=host, repo=repo, ref=ref)

        return ResolutionContext(
            repo_root=repo_root,
            kind=kind,
            argument=arg,
            path=path,
            remote_url=remote_url,
            ref=ref,
            host=host,
            repo=repo,
        )

    @staticmethod
    def render(provider: Provider, context: ResolutionContext) -> str:
        """Render the URL for an already gathered context."""
        if context.kind is ArgumentKind.COMMIT:
            return commit_url(provider, context.repo, context.argument)
        if context.kind is ArgumentKind.PATH:
            return path_url(provider, context.repo, context.ref, context.path)
        return root_url(provider, context.repo)

    def _remote_ref(self, git_dir: str) -> tuple[str, str]:
        """Read the remote URL and current ref of the repository."""
        try:
            remote_url = self._git.remote_url(git_dir, self._remote)
        except GitCommandError as e:
            raise RemoteUnavailableError(
                f"unable to get remote URL: {e.message}",
                details={"git_dir": git_dir, "remote": self._remote},
            ) from e
        try:
            ref = self._git.current_ref(git_dir)
        except GitCommandError as e:
            raise RemoteUnavailableError(
                f"unable to get current ref: {e.message}",
                details={"git_dir": git_dir},
            ) from e
        return remote_url, ref
