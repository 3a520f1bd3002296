"""
Parsing of `git status --porcelain` output.

Each porcelain line carries two state markers (index, worktree), a single
space, then the path. Paths containing newlines are not supported, and
rename lines (``old -> new``) are reported verbatim as the path.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Git output constants
MIN_PORCELAIN_LINE_LENGTH = 3  # Minimum length of a valid porcelain status line
PATH_OFFSET = 3  # Two state markers plus the separating space

STAGED_MARKERS = frozenset({"A", "M", "D", "R", "C"})
UNSTAGED_MARKERS = frozenset({"M", "D"})
UNTRACKED_MARKER = "?"


@dataclass(frozen=True)
class StatusEntry:
	"""One entry of porcelain status output."""

	index_state: str
	worktree_state: str
	path: str

	@property
	def is_untracked(self) -> bool:
		"""Whether both markers flag the entry as untracked."""
		return self.index_state == UNTRACKED_MARKER and self.worktree_state == UNTRACKED_MARKER

	@property
	def is_staged(self) -> bool:
		"""Whether the index holds a change for this path."""
		return self.index_state in STAGED_MARKERS

	@property
	def is_unstaged(self) -> bool:
		"""Whether the working tree holds a change the index does not."""
		return self.is_untracked or self.worktree_state in UNSTAGED_MARKERS


def parse_status(raw_status: str) -> list[StatusEntry]:
	"""
	Parse porcelain status text into entries.

	Args:
	    raw_status: Output of ``git status --porcelain``

	Returns:
	    Entries in the order git reported them. Lines shorter than
	    three characters are discarded as malformed.

	"""
	entries: list[StatusEntry] = []
	for line in raw_status.split("\n"):
		if len(line) < MIN_PORCELAIN_LINE_LENGTH:
			if line:
				logger.debug("Skipping malformed status line: %r", line)
			continue
		entries.append(StatusEntry(index_state=line[0], worktree_state=line[1], path=line[PATH_OFFSET:]))
	return entries


def staged_files(entries: list[StatusEntry]) -> list[str]:
	"""Paths whose index state is added, modified, deleted, renamed or copied."""
	return [entry.path for entry in entries if entry.is_staged]


def unstaged_files(entries: list[StatusEntry]) -> list[str]:
	"""Paths that are untracked or modified/deleted in the working tree."""
	return [entry.path for entry in entries if entry.is_unstaged]
