"""Tests for porcelain status parsing."""

from __future__ import annotations

import pytest

from gitlazy.git.status import StatusEntry, parse_status, staged_files, unstaged_files


@pytest.mark.unit
@pytest.mark.git
class TestParseStatus:
	"""Test cases for parse_status."""

	def test_parses_markers_and_path(self) -> None:
		"""Each line yields index state, worktree state and the path after the prefix."""
		entries = parse_status("M  a.py\n M b.py\n?? c.py")

		assert entries == [
			StatusEntry("M", " ", "a.py"),
			StatusEntry(" ", "M", "b.py"),
			StatusEntry("?", "?", "c.py"),
		]

	def test_discards_short_lines(self) -> None:
		"""Lines shorter than three characters are malformed and skipped."""
		entries = parse_status("M \n\nA  ok.py\nxx")

		assert [entry.path for entry in entries] == ["ok.py"]

	def test_empty_output(self) -> None:
		"""A clean repository has no entries."""
		assert parse_status("") == []

	def test_path_with_spaces_kept_verbatim(self) -> None:
		"""Paths are taken as-is after the fixed prefix."""
		entries = parse_status("A  docs/my file.md")

		assert entries[0].path == "docs/my file.md"

	def test_only_newline_separates_entries(self) -> None:
		"""Other Unicode line boundaries are part of the path."""
		entries = parse_status("?? a b.txt\n?? c\x0cd.txt\n?? e\x85f.txt")

		assert unstaged_files(entries) == ["a b.txt", "c\x0cd.txt", "e\x85f.txt"]

	def test_rename_line_is_not_split(self) -> None:
		"""Rename entries keep the arrow form as the path."""
		entries = parse_status("R  old.py -> new.py")

		assert entries[0].path == "old.py -> new.py"
		assert entries[0].is_staged


@pytest.mark.unit
@pytest.mark.git
class TestStagedAndUnstaged:
	"""Test cases for the staged/unstaged filters."""

	def test_staged_and_untracked(self) -> None:
		"""Index changes are staged; untracked files are unstaged only."""
		entries = parse_status("M  a.js\nA  b.js\n?? c.js")

		assert staged_files(entries) == ["a.js", "b.js"]
		assert unstaged_files(entries) == ["c.js"]

	def test_worktree_modifications(self) -> None:
		"""Worktree modifications and untracked files are unstaged, index-only changes are not."""
		entries = parse_status("M  staged.js\n M unstaged.js\n?? untracked.js")

		assert unstaged_files(entries) == ["unstaged.js", "untracked.js"]

	@pytest.mark.parametrize("marker", ["A", "M", "D", "R", "C"])
	def test_every_staged_marker(self, marker: str) -> None:
		"""All index markers that record a change count as staged."""
		assert staged_files(parse_status(f"{marker}  file.txt")) == ["file.txt"]

	def test_file_in_both_lists(self) -> None:
		"""A file modified in index and worktree appears in both lists."""
		entries = parse_status("MM both.py\nAD gone.py")

		assert staged_files(entries) == ["both.py", "gone.py"]
		assert unstaged_files(entries) == ["both.py", "gone.py"]

	def test_entry_in_neither_list(self) -> None:
		"""Ignored and unmerged markers fall in neither list."""
		entries = parse_status("!! build/\nUU conflict.py")

		assert staged_files(entries) == []
		assert unstaged_files(entries) == []

	def test_order_is_preserved(self) -> None:
		"""Paths come back in the order git reported them."""
		entries = parse_status("?? z.py\n D y.py\n M x.py")

		assert unstaged_files(entries) == ["z.py", "y.py", "x.py"]
