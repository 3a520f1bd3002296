"""Shared base classes for git-lazy tests."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

from gitlazy.git.commit.interactive import CommitUI


class GitTestBase:
	"""
	Base class for tests that exercise the git gateway.

	``subprocess.run`` is patched for the duration of each test. Responses are
	keyed by the git arguments joined with spaces (``"status --porcelain"``);
	a value may be stdout text or a ``CalledProcessError`` / ``OSError`` to raise.
	Unknown commands succeed with empty output. Every argv is recorded in
	``self.calls``.

	"""

	repo_path = Path("/mock/repo")

	def setup_method(self) -> None:
		"""Patch subprocess.run with the scripted fake."""
		self.responses: dict[str, str | Exception] = {"rev-parse --git-dir": ".git"}
		self.calls: list[list[str]] = []
		self._patcher = patch("gitlazy.git.utils.subprocess.run", side_effect=self._fake_run)
		self.mock_run = self._patcher.start()

	def teardown_method(self) -> None:
		"""Undo the subprocess.run patch."""
		self._patcher.stop()

	def _fake_run(self, argv: list[str], **_kwargs: object) -> subprocess.CompletedProcess[str]:
		self.calls.append(argv)
		key = " ".join(argv[1:])
		response = self.responses.get(key, "")
		if isinstance(response, Exception):
			raise response
		return subprocess.CompletedProcess(argv, 0, stdout=response, stderr="")

	def fail(self, key: str, stderr: str = "fatal: something went wrong") -> None:
		"""Make the given git command exit non-zero."""
		self.responses[key] = subprocess.CalledProcessError(128, ["git", *key.split()], output="", stderr=stderr)

	def not_a_repository(self) -> None:
		"""Make repository detection fail."""
		self.fail("rev-parse --git-dir", "fatal: not a git repository (or any of the parent directories): .git")

	def git_calls(self) -> list[str]:
		"""Git commands issued so far, excluding repository detection."""
		return [" ".join(argv[1:]) for argv in self.calls if argv[1:] != ["rev-parse", "--git-dir"]]


def ui_output(ui: CommitUI) -> str:
	"""Everything a buffered CommitUI has printed so far."""
	return ui.console.file.getvalue()
