"""Commit workflow tests."""
