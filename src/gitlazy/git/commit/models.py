"""Data models for the commit workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class EmptyCommitMessageError(ValueError):
	"""Raised when the user supplies a blank commit message."""

	def __init__(self) -> None:
		"""Initialize with the user-facing validation message."""
		super().__init__("Commit message cannot be empty.")


class CommitOutcome(Enum):
	"""How a commit invocation ended."""

	COMMITTED = auto()
	NOTHING_TO_COMMIT = auto()


@dataclass(frozen=True)
class CommitOptions:
	"""
	Options for a single commit invocation.

	``amend`` and ``no_verify`` are ``None`` when the caller did not decide;
	the interactive path asks for them and the direct path treats them as False.

	"""

	message: str | None = None
	add_all: bool = False
	amend: bool | None = None
	no_verify: bool | None = None
	interactive: bool = False
	files: tuple[str, ...] = field(default_factory=tuple)

	@property
	def needs_prompt(self) -> bool:
		"""Whether the workflow has to ask the user before committing."""
		return self.interactive or not self.message
