"""Tests for the click based browser launcher."""

import pytest

from git_open.browser.launcher import ClickBrowserLauncher
from git_open.core.exceptions import BrowserLaunchError


@pytest.mark.unit
class TestClickBrowserLauncher:
    """Tests for ClickBrowserLauncher."""

    def test_launch(self, monkeypatch: pytest.MonkeyPatch) -> None:
        launched: list[str] = []

        def fake_launch(url: str, wait: bool = False, locate: bool = False) -> int:
            launched.append(url)
            return 0

        monkeypatch.setattr("click.launch", fake_launch)
        ClickBrowserLauncher().launch("https://github.com/arbourd/git-open")
        assert launched == ["https://github.com/arbourd/git-open"]

    def test_non_zero_status(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("click.launch", lambda url, wait=False, locate=False: 1)
        with pytest.raises(BrowserLaunchError, match="unable to open in browser"):
            ClickBrowserLauncher().launch("https://github.com/arbourd/git-open")

    def test_os_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken_launch(url: str, wait: bool = False, locate: bool = False) -> int:
            raise OSError("xdg-open not found")

        monkeypatch.setattr("click.launch", broken_launch)
        with pytest.raises(BrowserLaunchError) as exc_info:
            ClickBrowserLauncher().launch("https://github.com/arbourd/git-open")
        assert exc_info.value.details == {"url": "https://github.com/arbourd/git-open"}
