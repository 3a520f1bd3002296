"""Main commit command implementation for git-lazy."""

from __future__ import annotations

import logging
from dataclasses import replace

from gitlazy.git.commit.interactive import CommitUI, ConsolePromptSession, PromptRequest, PromptSession
from gitlazy.git.commit.models import CommitOptions, CommitOutcome, EmptyCommitMessageError
from gitlazy.git.utils import GitRepoContext, NotARepositoryError

logger = logging.getLogger(__name__)


class CommitCommand:
	"""
	Handles the commit command workflow.

	With a message and no ``interactive`` flag the commit runs directly.
	Otherwise the user is walked through staging, the message and the
	amend / hook decisions, and the direct path then runs with every
	decision resolved.

	"""

	def __init__(
		self,
		repo: GitRepoContext | None = None,
		ui: CommitUI | None = None,
		prompts: PromptSession | None = None,
	) -> None:
		"""
		Initialize the commit command.

		Args:
		    repo: Repository to operate on (defaults to the current directory)
		    ui: Terminal output
		    prompts: Source of answers for interactive questions

		"""
		self.repo = repo or GitRepoContext()
		self.ui = ui or CommitUI()
		self.prompts: PromptSession = prompts or ConsolePromptSession()

	async def run(self, options: CommitOptions) -> CommitOutcome:
		"""
		Run the commit workflow.

		Args:
		    options: Options for this invocation

		Returns:
		    ``COMMITTED`` or ``NOTHING_TO_COMMIT``

		Raises:
		    NotARepositoryError: If the working directory is not a repository
		    CommandFailedError: If any git command fails
		    EmptyCommitMessageError: If the user enters a blank message

		"""
		if not self.repo.is_git_repository():
			raise NotARepositoryError(self.repo.path)

		if options.needs_prompt:
			return await self._interactive_commit(options)
		return self._commit(options)

	def _commit(self, options: CommitOptions) -> CommitOutcome:
		message = options.message or ""
		amend = bool(options.amend)
		no_verify = bool(options.no_verify)

		if options.add_all:
			self.ui.show_info("Staging all files...")
			self.repo.stage_all()
		elif options.files:
			self.ui.show_info(f"Staging files: {', '.join(options.files)}")
			self.repo.stage_files(list(options.files))

		staged = self.repo.get_staged_files()
		if not staged and not amend:
			logger.debug("Nothing staged and not amending; skipping commit")
			self.ui.show_nothing_staged(self.repo.get_unstaged_files())
			return CommitOutcome.NOTHING_TO_COMMIT

		if staged:
			self.ui.show_files_to_commit(staged)

		self.ui.show_info(f"\n{'Amending' if amend else 'Creating'} commit...")
		self.repo.commit(message, amend=amend, no_verify=no_verify)

		self.ui.show_commit_result(self.repo.get_current_branch(), message)
		return CommitOutcome.COMMITTED

	async def _interactive_commit(self, options: CommitOptions) -> CommitOutcome:
		# Staging requested on the command line is applied before asking anything
		if options.add_all:
			await self.repo.stage_all_async()
		elif options.files:
			await self.repo.stage_files_async(list(options.files))

		self.ui.show_status(
			self.repo.get_current_branch(),
			self.repo.get_staged_files(),
			self.repo.get_unstaged_files(),
		)

		unstaged = self.repo.get_unstaged_files()
		if unstaged:
			await self._stage_interactively(unstaged)

		if not self.repo.get_staged_files() and not options.amend:
			self.ui.show_warning("No files staged for commit.")
			return CommitOutcome.NOTHING_TO_COMMIT

		message = options.message
		if not message:
			if options.amend and self.repo.has_commits():
				self.ui.show_previous_message(self.repo.get_last_commit_message())
			message = await self.prompts.ask(PromptRequest.text("\nEnter commit message:"))
			if not message.strip():
				raise EmptyCommitMessageError

		amend = options.amend
		if amend is None and self.repo.has_commits():
			amend = await self.prompts.ask(PromptRequest.confirm("Amend previous commit?"))

		no_verify = options.no_verify
		if no_verify is None:
			no_verify = await self.prompts.ask(PromptRequest.confirm("Skip pre-commit hooks?"))

		resolved = replace(
			options,
			message=message,
			amend=bool(amend),
			no_verify=no_verify,
			interactive=False,
			add_all=False,
			files=(),
		)
		return await self.run(resolved)

	async def _stage_interactively(self, unstaged: list[str]) -> None:
		if await self.prompts.ask(PromptRequest.confirm("\nStage all files?")):
			await self.repo.stage_all_async()
			self.ui.show_success("All files staged.")
			return

		if not await self.prompts.ask(PromptRequest.confirm("Stage specific files?")):
			return

		self.ui.show_numbered_files(unstaged)
		indices = await self.prompts.ask(
			PromptRequest.selection("\nEnter file numbers (comma-separated):", len(unstaged))
		)
		selected = [unstaged[i] for i in indices]
		if selected:
			await self.repo.stage_files_async(selected)
			self.ui.show_success(f"Staged: {', '.join(selected)}")
		else:
			logger.debug("No valid file numbers selected")
