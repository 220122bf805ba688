"""URL rendering for providers."""

from urllib.parse import quote

from git_open.core.models.provider import Provider

# Characters a URL path segment may carry unescaped, plus the separator
_PATH_SAFE = "/$&+:=@"


def escape_path(url: str) -> str:
    """Percent-encode ``url`` as a path, keeping ``/`` literal.

    "https://github.com/org/repo/tree/main/a file.txt" becomes
    "https://github.com/org/repo/tree/main/a%20file.txt". A trailing ``/``
    is dropped.
    """
    # surrogateescape keeps undecodable file name bytes as %XX
    return quote(url, safe=_PATH_SAFE, errors="surrogateescape").rstrip("/")


def _join(*segments: str) -> str:
    return escape_path("/".join(segments))


def root_url(provider: Provider, repo: str) -> str:
    """URL of the repository home page."""
    return _join(provider.base_url, repo)


def path_url(provider: Provider, repo: str, ref: str, path: str) -> str:
    """URL of a file or directory at ``ref``."""
    return _join(provider.base_url, repo, provider.tree_segment, ref, path)


def commit_url(provider: Provider, repo: str, sha: str) -> str:
    """URL of a single commit."""
    return _join(provider.base_url, repo, provider.commit_segment, sha)
