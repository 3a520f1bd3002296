"""Command for creating commits with optional interactive staging."""

import logging
from pathlib import Path
from typing import Annotated

import asyncer
import typer

from gitlazy.config import ConfigError, ConfigLoader
from gitlazy.git.commit import CommitCommand, CommitOptions, EmptyCommitMessageError
from gitlazy.git.utils import GitError, GitRepoContext
from gitlazy.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_warning

logger = logging.getLogger(__name__)

COMMIT_EPILOG = """\
Examples:

  git-lazy commit -m "Fix bug in user authentication"

  git-lazy commit -a -m "Update documentation"

  git-lazy commit --interactive

  git-lazy commit --amend -m "Fix typo in previous commit"

  git-lazy commit -f "src/index.py,README.md" -m "Update main files"

When no message is provided or -i is used, git-lazy walks you through
the commit interactively.
"""

# --- Command Argument Annotations ---

MessageOption = Annotated[str | None, typer.Option("--message", "-m", help="Commit message")]

AddAllFlag = Annotated[bool, typer.Option("--add-all", "-a", help="Stage all files before committing")]

FilesOption = Annotated[
	str | None,
	typer.Option("--files", "-f", help="Comma-separated list of files to stage"),
]

AmendFlag = Annotated[
	bool | None,
	typer.Option("--amend/--no-amend", help="Amend the previous commit (asked interactively if omitted)"),
]

NoVerifyFlag = Annotated[
	bool | None,
	typer.Option("--no-verify/--verify", help="Skip pre-commit hooks (asked interactively if omitted)"),
]

InteractiveFlag = Annotated[bool, typer.Option("--interactive", "-i", help="Interactive commit mode")]


def parse_files(value: str | None) -> tuple[str, ...]:
	"""Split a comma-separated file list, trimming whitespace and dropping empty entries."""
	if not value:
		return ()
	return tuple(part.strip() for part in value.split(",") if part.strip())


# --- Registration Function ---


def register_command(app: typer.Typer) -> None:
	"""Register the commit command with the CLI app."""

	@app.command(name="commit", epilog=COMMIT_EPILOG)
	@asyncer.runnify
	async def commit_command(
		ctx: typer.Context,
		message: MessageOption = None,
		add_all: AddAllFlag = False,
		files: FilesOption = None,
		amend: AmendFlag = None,
		no_verify: NoVerifyFlag = None,
		interactive: InteractiveFlag = False,
	) -> None:
		"""Create a git commit with an enhanced interface."""
		await _commit_command_impl(
			config_file=ctx.meta.get("config_file"),
			message=message,
			add_all=add_all,
			files=parse_files(files),
			amend=amend,
			no_verify=no_verify,
			interactive=interactive,
		)


# --- Implementation Function ---


async def _commit_command_impl(
	config_file: Path | None,
	message: str | None,
	add_all: bool,
	files: tuple[str, ...],
	amend: bool | None,
	no_verify: bool | None,
	interactive: bool,
) -> None:
	"""Actual implementation of the commit command."""
	try:
		config = ConfigLoader(config_file=config_file).get

		# Determine parameters (CLI > Config > Default)
		options = CommitOptions(
			message=message,
			add_all=add_all or config.commit.add_all,
			files=files,
			amend=amend,
			no_verify=no_verify if no_verify is not None else config.commit.bypass_hooks,
			interactive=interactive or config.commit.interactive,
		)
		logger.debug("Resolved commit options: %s", options)

		command = CommitCommand(repo=GitRepoContext(executable=config.git.executable))
		await command.run(options)

	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except EmptyCommitMessageError as e:
		show_warning(str(e))
		raise typer.Exit(1) from e
	except (GitError, ConfigError) as e:
		exit_with_error(str(e), exception=e)
