"""Argument classification and resolution state models."""

from enum import Enum

from pydantic import BaseModel


class ArgumentKind(str, Enum):
    """What the command-line argument refers to."""

    ROOT = "root"
    COMMIT = "commit"
    PATH = "path"


class ResolutionContext(BaseModel):
    """State gathered while resolving one argument.

    Built fresh for every invocation and never persisted.
    """

    repo_root: str
    kind: ArgumentKind
    argument: str = ""

    # Repository-relative, forward-slash path ("" for the root)
    path: str = ""

    # Remote metadata
    remote_url: str = ""
    ref: str = ""
    host: str = ""
    repo: str = ""
