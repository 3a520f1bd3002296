"""Git subprocess gateway for git-lazy."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from asyncer import asyncify

from gitlazy.git.status import parse_status, staged_files, unstaged_files

logger = logging.getLogger(__name__)

GitCommand = str | list[str]


class GitError(Exception):
	"""Custom exception for Git-related errors."""


class NotARepositoryError(GitError):
	"""Raised when the working directory is not inside a Git repository."""

	def __init__(self, path: Path | None = None) -> None:
		"""Initialize with the directory that was checked."""
		self.path = path
		super().__init__("Not in a git repository")


class CommandFailedError(GitError):
	"""Raised when git exits non-zero or cannot be spawned."""

	def __init__(self, command: str, detail: str) -> None:
		"""
		Initialize the error.

		Args:
		    command: The git command line that failed
		    detail: Diagnostic text from git (stderr) or from the spawn failure

		"""
		self.command = command
		self.detail = detail
		message = f"Git command failed: {command}"
		if detail:
			message += f"\n{detail}"
		super().__init__(message)


def _quote(value: str) -> str:
	"""Wrap a value in double quotes, escaping backslashes and embedded double quotes."""
	escaped = value.replace("\\", "\\\\").replace('"', '\\"')
	return f'"{escaped}"'


def _to_argv(executable: str, command: GitCommand) -> list[str]:
	args = shlex.split(command) if isinstance(command, str) else list(command)
	return [executable, *args]


def run_git_command(
	command: GitCommand,
	cwd: Path | None = None,
	executable: str = "git",
	strip: bool = True,
) -> str:
	"""
	Run a Git command and return its output.

	Args:
	    command: Git subcommand, either a shell-style string (``"status --porcelain"``)
	        or a list of arguments
	    cwd: Working directory (optional)
	    executable: Name or path of the git binary
	    strip: Whether to strip surrounding whitespace from the output

	Returns:
	    Command output as string

	Raises:
	    CommandFailedError: If the command fails or git cannot be started

	"""
	argv = _to_argv(executable, command)
	command_str = " ".join(argv)
	logger.debug("Running: %s (cwd=%s)", command_str, cwd)
	try:
		# Arguments are passed as a list and never through a shell
		result = subprocess.run(  # noqa: S603
			argv,
			cwd=cwd,
			capture_output=True,
			text=True,
			check=True,
		)
	except subprocess.CalledProcessError as e:
		detail = (e.stderr or e.stdout or "").strip()
		logger.debug("Git command failed: %s", command_str, exc_info=True)
		raise CommandFailedError(command_str, detail) from e
	except OSError as e:
		logger.debug("Could not start git: %s", command_str, exc_info=True)
		raise CommandFailedError(command_str, str(e)) from e
	return result.stdout.strip() if strip else result.stdout


async def run_git_command_async(
	command: GitCommand,
	cwd: Path | None = None,
	executable: str = "git",
	strip: bool = True,
) -> str:
	"""Run a Git command in a worker thread so the event loop stays responsive."""
	return await asyncify(run_git_command)(command, cwd=cwd, executable=executable, strip=strip)


class GitRepoContext:
	"""
	Handle on a repository working directory.

	All git invocations run with ``cwd`` set to ``path`` rather than relying on
	the process working directory.

	"""

	def __init__(self, path: Path | None = None, executable: str = "git") -> None:
		"""
		Initialize the context.

		Args:
		    path: Working directory inside the repository (defaults to the current directory)
		    executable: Name or path of the git binary

		"""
		self.path = path or Path.cwd()
		self.executable = executable

	def is_git_repository(self) -> bool:
		"""Check whether ``path`` is inside a Git repository. Never raises."""
		try:
			run_git_command("rev-parse --git-dir", cwd=self.path, executable=self.executable)
		except GitError:
			logger.debug("%s is not inside a git repository", self.path)
			return False
		return True

	def run(self, command: GitCommand, strip: bool = True) -> str:
		"""
		Run a git command inside the repository.

		Raises:
		    NotARepositoryError: If ``path`` is not inside a repository
		    CommandFailedError: If the command fails

		"""
		if not self.is_git_repository():
			raise NotARepositoryError(self.path)
		return run_git_command(command, cwd=self.path, executable=self.executable, strip=strip)

	async def run_async(self, command: GitCommand, strip: bool = True) -> str:
		"""Async counterpart of :meth:`run` with the same success and failure rules."""
		if not await asyncify(self.is_git_repository)():
			raise NotARepositoryError(self.path)
		return await run_git_command_async(command, cwd=self.path, executable=self.executable, strip=strip)

	def get_status(self) -> str:
		"""Get raw porcelain status. Leading spaces are significant and kept."""
		return self.run("status --porcelain", strip=False).rstrip("\n")

	def get_current_branch(self) -> str:
		"""
		Get the current branch name.

		Before the first commit HEAD does not resolve, so the name comes from
		the symbolic ref instead.

		"""
		if not self.has_commits():
			return self.run("symbolic-ref --short HEAD")
		return self.run("rev-parse --abbrev-ref HEAD")

	def get_repo_root(self) -> Path:
		"""Get the root directory of the repository."""
		return Path(self.run("rev-parse --show-toplevel"))

	def is_working_directory_clean(self) -> bool:
		"""Check whether git reports no changes at all."""
		return not self.get_status()

	def get_staged_files(self) -> list[str]:
		"""Get paths with changes recorded in the index."""
		return staged_files(parse_status(self.get_status()))

	def get_unstaged_files(self) -> list[str]:
		"""Get untracked paths and paths with working tree changes."""
		return unstaged_files(parse_status(self.get_status()))

	def has_commits(self) -> bool:
		"""Check whether HEAD resolves to a commit. Never raises."""
		try:
			self.run("rev-parse HEAD")
		except GitError:
			return False
		return True

	@staticmethod
	def _add_command(files: list[str]) -> str:
		return "add -- " + " ".join(_quote(file) for file in files)

	def stage_files(self, files: list[str]) -> None:
		"""
		Stage the specified files.

		Raises:
		    CommandFailedError: If staging fails

		"""
		if not files:
			logger.warning("No files provided to stage_files")
			return
		self.run(self._add_command(files))

	async def stage_files_async(self, files: list[str]) -> None:
		"""Stage the specified files without blocking the event loop."""
		if not files:
			logger.warning("No files provided to stage_files_async")
			return
		await self.run_async(self._add_command(files))

	def stage_all(self) -> None:
		"""Stage every change in the working tree."""
		self.run("add .")

	async def stage_all_async(self) -> None:
		"""Stage every change in the working tree without blocking the event loop."""
		await self.run_async("add .")

	@staticmethod
	def build_commit_command(message: str, amend: bool = False, no_verify: bool = False) -> str:
		"""
		Build the commit command line.

		The message is double-quoted with embedded double quotes backslash-escaped,
		so ``Fix "bug"`` becomes ``-m "Fix \\"bug\\""``.

		"""
		command = "commit"
		if amend:
			command += " --amend"
		if no_verify:
			command += " --no-verify"
		return f"{command} -m {_quote(message)}"

	def commit(self, message: str, amend: bool = False, no_verify: bool = False) -> str:
		"""
		Create a commit.

		Args:
		    message: Commit message
		    amend: Replace the previous commit instead of creating a new one
		    no_verify: Bypass pre-commit and commit-msg hooks

		Returns:
		    Git's confirmation output

		"""
		output = self.run(self.build_commit_command(message, amend=amend, no_verify=no_verify))
		logger.info("Created commit with message: %s", message)
		return output

	def get_last_commit_message(self) -> str:
		"""Get the subject and body of the most recent commit."""
		return self.run("log -1 --pretty=%B")
