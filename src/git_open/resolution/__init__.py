"""Argument resolution pipeline for git-open."""

from git_open.resolution.classifier import classify
from git_open.resolution.paths import resolve_path
from git_open.resolution.resolver import URLResolver
from git_open.resolution.urls import commit_url, escape_path, path_url, root_url

__all__ = [
    "URLResolver",
    "classify",
    "commit_url",
    "escape_path",
    "path_url",
    "resolve_path",
    "root_url",
]
