"""Commit workflow for git-lazy."""

from gitlazy.git.commit.command import CommitCommand
from gitlazy.git.commit.interactive import (
	CommitUI,
	ConsolePromptSession,
	PromptRequest,
	PromptSession,
	ScriptedPromptSession,
)
from gitlazy.git.commit.models import CommitOptions, CommitOutcome, EmptyCommitMessageError

__all__ = [
	"CommitCommand",
	"CommitOptions",
	"CommitOutcome",
	"CommitUI",
	"ConsolePromptSession",
	"EmptyCommitMessageError",
	"PromptRequest",
	"PromptSession",
	"ScriptedPromptSession",
]
