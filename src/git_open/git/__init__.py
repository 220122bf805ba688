"""Git integration module for git-open."""

from git_open.git.accessor import ConfigStore, GitAccessor, GitCLI
from git_open.git.remote import parse_remote

__all__ = ["ConfigStore", "GitAccessor", "GitCLI", "parse_remote"]
