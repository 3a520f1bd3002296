"""Tests for git-lazy."""
