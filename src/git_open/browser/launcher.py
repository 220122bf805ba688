"""Browser launcher abstraction for testability."""

from abc import ABC, abstractmethod

import click
import structlog

from git_open.core.exceptions import BrowserLaunchError

logger = structlog.get_logger(__name__)


class BrowserLauncher(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """Launch a URL in the default web browser.

        Args:
            url: The URL to open in the browser

        Raises:
            BrowserLaunchError: If the browser could not be started.
        """
        ...


class ClickBrowserLauncher(BrowserLauncher):
    """Opens URLs in the system browser using click.launch.

    click picks ``open`` on macOS, ``start`` on Windows and ``xdg-open``
    elsewhere, and does not wait for the browser to exit.
    """

    def launch(self, url: str) -> None:
        try:
            status = click.launch(url)
        except OSError as e:
            raise BrowserLaunchError(f"unable to open in browser: {e}", details={"url": url}) from e
        if status != 0:
            raise BrowserLaunchError(
                f"unable to open in browser: launcher exited with status {status}",
                details={"url": url, "status": status},
            )
        logger.debug("Launched browser", url=url)
