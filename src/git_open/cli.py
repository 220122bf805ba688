"""CLI for git-open."""

import sys

import click
import structlog

from git_open import __version__
from git_open.browser.launcher import BrowserLauncher, ClickBrowserLauncher
from git_open.config.logging import configure_logging
from git_open.config.settings import get_settings
from git_open.core.exceptions import GitCommandError, GitOpenError, TooManyArgumentsError
from git_open.core.models.provider import Provider
from git_open.git.accessor import ConfigStore, GitAccessor, GitCLI
from git_open.providers.registry import (
    PROVIDER_CONFIG_PATTERN,
    default_providers,
    load_user_providers,
    merge_providers,
)
from git_open.resolution.resolver import URLResolver

logger = structlog.get_logger(__name__)


def build_registry(config: ConfigStore | None) -> list[Provider]:
    """Built-in providers, overridden and extended by the global git config."""
    if config is None:
        return default_providers()
    try:
        lines = config.get_regexp(PROVIDER_CONFIG_PATTERN)
    except GitCommandError as e:
        logger.warning("Unable to read provider config, using built-in providers", error=e.message)
        return default_providers()
    user = sorted(load_user_providers(lines), key=lambda p: p.base_url)
    return merge_providers(default_providers(), user)


@click.command()
@click.argument("args", nargs=-1, metavar="[PATH|COMMIT]")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--print-only", "-p", is_flag=True, help="Print the URL without opening a browser")
@click.option("--remote", "-r", default=None, help="Remote to open (default: git's default remote)")
@click.option("--no-user-providers", is_flag=True, help="Ignore providers from the global git config")
@click.option("--list-providers", is_flag=True, help="List known providers and exit")
@click.version_option(__version__, prog_name="git-open")
@click.pass_context
def cli(
    ctx: click.Context,
    args: tuple[str, ...],
    verbose: bool,
    print_only: bool,
    remote: str | None,
    no_user_providers: bool,
    list_providers: bool,
) -> None:
    """Open the repository, a path or a commit on its hosting provider.

    With no argument the repository home page is opened. A 7 to 64
    character lowercase hex string opens that commit; anything else is
    treated as a path in the working tree.
    """
    settings = get_settings()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.json_logs,
    )

    # Collaborators may be swapped through ctx.obj (used by tests)
    obj = ctx.ensure_object(dict)
    git_cli = GitCLI(binary=settings.git_binary, timeout=settings.git_timeout)
    git: GitAccessor = obj.get("git", git_cli)
    config: ConfigStore = obj.get("config", git_cli)
    browser: BrowserLauncher = obj.get("browser", ClickBrowserLauncher())

    try:
        if len(args) > 1:
            raise TooManyArgumentsError(len(args))
        arg = args[0] if args else ""

        use_user_providers = settings.user_providers and not no_user_providers
        providers = build_registry(config if use_user_providers else None)

        if list_providers:
            for provider in providers:
                click.echo(
                    f"{provider.base_url}  commit={provider.commit_segment}  "
                    f"tree={provider.tree_segment}"
                )
            return

        resolver = URLResolver(
            git,
            providers=providers,
            cwd=obj.get("cwd"),
            remote=remote or settings.remote,
        )
        url = resolver.resolve(arg)

        if print_only or not settings.open_browser:
            click.echo(url)
            return

        click.echo(f"Opening {url} in your browser.")
        browser.launch(url)
    except GitOpenError as e:
        logger.debug("git-open failed", error_type=type(e).__name__, **e.details)
        click.echo(f'error: "{e.message}"', err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
