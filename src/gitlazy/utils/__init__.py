"""Utility modules for git-lazy."""
