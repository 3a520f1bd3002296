"""Command-line interface package for git-lazy."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from typer.core import TyperGroup

from gitlazy import __version__
from gitlazy.utils.log_setup import setup_logging

from .commit_cmd import register_command as register_commit_command

logger = logging.getLogger(__name__)


UNKNOWN_COMMAND_MESSAGE = "Unknown command: {command}"


class GitLazyGroup(TyperGroup):
	"""Root command group that reports unrecognized subcommands by name."""

	def resolve_command(self, ctx: typer.Context, args: list[str]) -> tuple[str | None, Any, list[str]]:
		"""Resolve the subcommand, failing with a usage error for unrecognized names."""
		cmd_name = args[0]
		if not ctx.resilient_parsing and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
			ctx.fail(UNKNOWN_COMMAND_MESSAGE.format(command=cmd_name))
		return super().resolve_command(ctx, args)


app = typer.Typer(
	cls=GitLazyGroup,
	help=f"git-lazy - A utility tool for simplifying common git operations\n\nVersion: {__version__}",
	context_settings={"help_option_names": ["-h", "--help"]},
	epilog="For command-specific help, use: git-lazy <command> --help",
)

# --- Global Options Callback ---


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"git-lazy version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	log_file: Annotated[
		Path | None,
		typer.Option("--log-file", help="Also write debug logs to this file.", dir_okay=False),
	] = None,
	config_file: Annotated[
		Path | None,
		typer.Option("--config", help="Path to a configuration file (default: .gitlazy.yml)."),
	] = None,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	if ctx.invoked_subcommand is None:
		typer.echo(ctx.get_help())
		raise typer.Exit

	ctx.meta["is_verbose"] = is_verbose
	ctx.meta["config_file"] = config_file

	setup_logging(is_verbose=is_verbose, log_file_path=log_file)
	logger.debug("git-lazy %s invoked with subcommand %s", __version__, ctx.invoked_subcommand)


register_commit_command(app)


# --- Main Entry Point ---
def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
