"""Browser integration for git-open."""

from git_open.browser.launcher import BrowserLauncher, ClickBrowserLauncher

__all__ = ["BrowserLauncher", "ClickBrowserLauncher"]
