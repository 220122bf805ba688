"""Resolution of filesystem paths to repository-relative paths."""

import os

from git_open.core.exceptions import PathNotFoundError, PathOutsideRepositoryError


def resolve_path(arg_path: str, repo_root: str, cwd: str | None = None) -> str:
    """Turn ``arg_path`` into a forward-slash path relative to ``repo_root``.

    Relative paths are taken from ``cwd`` (the process working directory
    by default). The repository root itself resolves to ``""``, as does an
    empty argument.

    Raises:
        PathNotFoundError: If the path does not exist.
        PathOutsideRepositoryError: If the path is not inside ``repo_root``.
    """
    if not arg_path:
        return ""

    base = cwd if cwd is not None else os.getcwd()
    path = os.path.normpath(os.path.join(base, arg_path))
    if not os.path.exists(path):
        raise PathNotFoundError(arg_path)
    path = os.path.abspath(path)

    # Containment is checked per path segment: /repo-other is not inside /repo
    root = os.path.abspath(repo_root).rstrip(os.sep) or os.sep
    if path == root:
        return ""
    prefix = root if root.endswith(os.sep) else root + os.sep
    if not path.startswith(prefix):
        raise PathOutsideRepositoryError(path, repo_root)

    relative = path[len(prefix):]
    return relative.replace(os.sep, "/").strip("/")
