"""Global test fixtures and configuration."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import Mock, create_autospec

import pytest
from rich.console import Console

from gitlazy.git.commit.interactive import CommitUI
from gitlazy.git.utils import GitRepoContext


@pytest.fixture
def mock_repo() -> Mock:
	"""A GitRepoContext stand-in for a repository with one staged file on main."""
	repo = create_autospec(GitRepoContext, instance=True)
	repo.path = Path("/mock/repo")
	repo.is_git_repository.return_value = True
	repo.get_current_branch.return_value = "main"
	repo.get_staged_files.return_value = ["file1.py"]
	repo.get_unstaged_files.return_value = []
	repo.has_commits.return_value = True
	repo.get_last_commit_message.return_value = "Previous commit"
	repo.commit.return_value = "[main abc1234] Test commit"
	return repo


@pytest.fixture
def ui() -> CommitUI:
	"""A CommitUI that renders plain text into a buffer."""
	console = Console(file=io.StringIO(), width=200, color_system=None, highlight=False)
	return CommitUI(console=console)
