"""git-lazy - A utility tool for simplifying common git operations."""

__version__ = "0.1.0"
__author__ = "git-lazy contributors"
