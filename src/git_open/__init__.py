"""git-open: open repositories, paths and commits on their hosting provider."""

__version__ = "0.1.0"
