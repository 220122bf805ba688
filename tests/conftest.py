"""Pytest configuration and fixtures."""

import os
import subprocess
from pathlib import Path

import pytest

from git_open.browser.launcher import BrowserLauncher
from git_open.config.settings import get_settings
from git_open.core.exceptions import BrowserLaunchError, GitCommandError
from git_open.git.accessor import ConfigStore, GitAccessor

GIT_OPEN_REMOTE = "https://github.com/arbourd/git-open"


class FakeGit(GitAccessor, ConfigStore):
    """In-memory stand-in for the git CLI."""

    def __init__(
        self,
        git_dir: str | None = None,
        remote_url: str | None = GIT_OPEN_REMOTE,
        ref: str | None = "main",
        config_lines: list[str] | None = None,
    ) -> None:
        self._git_dir = git_dir
        self._remote_url = remote_url
        self._ref = ref
        self._config_lines = config_lines or []
        self.calls: list[tuple[str, ...]] = []

    def git_dir(self, path: str) -> str:
        self.calls.append(("git_dir", path))
        if self._git_dir is None:
            raise GitCommandError("fatal: not a git repository")
        return self._git_dir

    def remote_url(self, git_dir: str, remote: str | None = None) -> str:
        self.calls.append(("remote_url", git_dir, remote or ""))
        if self._remote_url is None:
            raise GitCommandError("fatal: no remote configured")
        return self._remote_url

    def current_ref(self, git_dir: str) -> str:
        self.calls.append(("current_ref", git_dir))
        if self._ref is None:
            raise GitCommandError("fatal: ambiguous argument 'HEAD'")
        return self._ref

    def get_regexp(self, pattern: str) -> list[str]:
        self.calls.append(("get_regexp", pattern))
        return list(self._config_lines)


class FakeBrowser(BrowserLauncher):
    """Records launched URLs instead of opening a browser."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.launched: list[str] = []

    def launch(self, url: str) -> None:
        if self.fail:
            raise BrowserLaunchError("unable to open in browser: no browser")
        self.launched.append(url)


@pytest.fixture
def work_tree(tmp_path: Path) -> Path:
    """Create a checkout-shaped directory tree (no git involved)."""
    root = tmp_path.resolve() / "git-open"
    (root / ".git").mkdir(parents=True)
    (root / "open").mkdir()
    (root / "open" / "open.go").write_text("package open\n")
    (root / "LICENSE").write_text("MIT\n")
    (root / "docs").mkdir()
    (root / "docs" / "file with a space.txt").write_text("spaces\n")
    return root


@pytest.fixture
def fake_git(work_tree: Path) -> FakeGit:
    """A FakeGit pointing at the work_tree fixture."""
    return FakeGit(git_dir=str(work_tree / ".git"))


@pytest.fixture
def fake_browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from GIT_OPEN_* variables and the settings cache."""

    for key in list(os.environ):
        if key.startswith("GIT_OPEN_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _git(repo_path: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo_path, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture
def git_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point git's global config at an empty file under tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    gitconfig = home / ".gitconfig"
    gitconfig.write_text("")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    return home


@pytest.fixture
def git_repo(tmp_path: Path, git_home: Path) -> Path:
    """Create a temporary Git repository with an origin remote."""
    repo_path = tmp_path.resolve() / "git-open"
    repo_path.mkdir()

    # Init repo on a fixed branch name regardless of git version
    _git(repo_path, "init")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "remote", "add", "origin", GIT_OPEN_REMOTE + ".git")

    (repo_path / "open").mkdir()
    (repo_path / "open" / "open.go").write_text("package open\n")
    (repo_path / "LICENSE").write_text("MIT\n")
    (repo_path / "file with a space.txt").write_text("spaces\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")

    return repo_path
