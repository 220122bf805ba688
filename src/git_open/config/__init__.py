"""Configuration for git-open."""

from git_open.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
