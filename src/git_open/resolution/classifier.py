"""Classification of the command-line argument."""

import re

from git_open.core.models.resolution import ArgumentKind

# Abbreviated (7) up to SHA-256 (64) object names
COMMIT_SHA_PATTERN = re.compile(r"[0-9a-f]{7,64}")


def classify(arg: str) -> ArgumentKind:
    """Return whether ``arg`` names the repository root, a commit or a path."""
    if not arg:
        return ArgumentKind.ROOT
    if COMMIT_SHA_PATTERN.fullmatch(arg):
        return ArgumentKind.COMMIT
    return ArgumentKind.PATH
