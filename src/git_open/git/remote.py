"""Parsing of git remote URLs."""

import posixpath
import re
from urllib.parse import urlsplit

import structlog

logger = structlog.get_logger(__name__)

# C:/repos/x.git and C:\repos\x.git are local paths
_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:[\\/]")

# user@host:path/to/repo.git, without a scheme
_SCP_LIKE = re.compile(r"^(?P<user>[^@/:]+@)?(?P<host>[^/:]+):(?P<path>.+)$")


def _scp_to_url(remote: str) -> str:
    """Rewrite an scp-like SSH remote into an ``ssh://`` URL."""
    if "://" in remote or _WINDOWS_DRIVE.match(remote):
        return remote
    match = _SCP_LIKE.match(remote)
    if not match:
        return remote
    user = match.group("user") or ""
    return f"ssh://{user}{match.group('host')}/{match.group('path')}"


def _clean_repo_path(path: str) -> str:
    path = re.sub(r"/+", "/", path)
    path = posixpath.normpath(path) if path else ""
    if path in (".", "/"):
        return ""
    path = path.removesuffix(".git")
    return path.strip("/")


def parse_remote(remote: str) -> tuple[str, str]:
    """Split a remote into ``(host, repo)``.

    - https://github.com/org/repo.git -> ("github.com", "org/repo")
    - git@github.com:org/repo.git -> ("github.com", "org/repo")

    The host keeps any port but drops user-info. Input that cannot be
    parsed yields ``("", "")``; an empty host is reported later when no
    provider matches.
    """
    try:
        parts = urlsplit(_scp_to_url(remote.strip()))
    except ValueError:
        logger.debug("Unparseable remote", remote=remote)
        return "", ""

    host = parts.netloc.rpartition("@")[2]
    if not host:
        return "", ""
    return host, _clean_repo_path(parts.path)
