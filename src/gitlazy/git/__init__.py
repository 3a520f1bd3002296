"""Git utilities for git-lazy."""

from gitlazy.git.status import StatusEntry, parse_status, staged_files, unstaged_files
from gitlazy.git.utils import (
	CommandFailedError,
	GitError,
	GitRepoContext,
	NotARepositoryError,
	run_git_command,
	run_git_command_async,
)

__all__ = [
	# Errors
	"CommandFailedError",
	"GitError",
	"NotARepositoryError",
	# Subprocess gateway
	"GitRepoContext",
	"run_git_command",
	"run_git_command_async",
	# Status parsing
	"StatusEntry",
	"parse_status",
	"staged_files",
	"unstaged_files",
]
