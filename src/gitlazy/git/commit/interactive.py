"""Interactive prompts and terminal output for the commit workflow."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

import questionary
from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_yes_no(answer: str) -> bool:
	"""Any answer starting with "y" (any case) is affirmative; everything else is not."""
	return answer.strip().lower().startswith("y")


def parse_text(answer: str) -> str:
	"""Return the answer unchanged."""
	return answer


def parse_selection(answer: str, count: int) -> list[int]:
	"""
	Parse a comma-separated list of 1-based numbers.

	Args:
	    answer: Raw user input, e.g. ``"1, 3,x,9"``
	    count: Number of selectable items

	Returns:
	    0-based indices in the order given. Non-numeric and out-of-range
	    entries are dropped silently.

	"""
	indices: list[int] = []
	for part in answer.split(","):
		token = part.strip()
		if not token.isdigit():
			continue
		index = int(token) - 1
		if 0 <= index < count:
			indices.append(index)
	return indices


@dataclass(frozen=True)
class PromptRequest(Generic[T]):
	"""A question for the user and the parser that turns the raw answer into a value."""

	question: str
	parse: Callable[[str], T]

	@classmethod
	def confirm(cls, question: str) -> PromptRequest[bool]:
		"""Build a y/N question."""
		return PromptRequest(f"{question} (y/N):", parse_yes_no)

	@classmethod
	def text(cls, question: str) -> PromptRequest[str]:
		"""Build a free-text question."""
		return PromptRequest(question, parse_text)

	@classmethod
	def selection(cls, question: str, count: int) -> PromptRequest[list[int]]:
		"""Build a numbered-selection question over ``count`` items."""
		return PromptRequest(question, lambda answer: parse_selection(answer, count))


class PromptSession(Protocol):
	"""Answers prompt requests one at a time."""

	async def ask(self, request: PromptRequest[T]) -> T:
		"""Ask a single question and return the parsed answer."""
		...


class ConsolePromptSession:
	"""Prompt session backed by questionary on the terminal."""

	async def ask(self, request: PromptRequest[T]) -> T:
		"""
		Ask the user on the terminal.

		Raises:
		    KeyboardInterrupt: If the user cancels the prompt

		"""
		answer = await questionary.text(request.question, qmark="").ask_async()
		if answer is None:
			raise KeyboardInterrupt
		return request.parse(answer)


class ScriptedPromptSession:
	"""Prompt session that replays canned answers, for scripting and tests."""

	def __init__(self, answers: Iterable[str]) -> None:
		"""
		Initialize the session.

		Args:
		    answers: Raw answers, consumed in order

		"""
		self._answers = list(answers)
		self.questions: list[str] = []

	async def ask(self, request: PromptRequest[T]) -> T:
		"""
		Return the next canned answer, parsed.

		Raises:
		    RuntimeError: If more questions are asked than answers were scripted

		"""
		self.questions.append(request.question)
		if not self._answers:
			msg = f"No scripted answer left for prompt: {request.question}"
			raise RuntimeError(msg)
		answer = self._answers.pop(0)
		logger.debug("Scripted answer %r for %r", answer, request.question)
		return request.parse(answer)


class CommitUI:
	"""Terminal output for the commit process."""

	def __init__(self, console: Console | None = None) -> None:
		"""Initialize the commit UI."""
		self.console = console or Console()

	def show_status(self, branch: str, staged: list[str], unstaged: list[str]) -> None:
		"""Show branch, staged and unstaged files."""
		self.console.print("[bold]Current Status:[/bold]")
		self.console.print(f"Branch: [cyan]{escape(branch)}[/cyan]")

		if staged:
			self.console.print("\n[bold green]Staged files:[/]")
			for file in staged:
				self.console.print(f"  {escape(file)}")

		if unstaged:
			self.console.print("\n[bold yellow]Unstaged changes:[/]")
			for file in unstaged:
				self.console.print(f"  {escape(file)}")

		if not staged and not unstaged:
			self.console.print("[green]Working directory is clean.[/green]")

	def show_numbered_files(self, files: list[str]) -> None:
		"""List files with 1-based numbers for selection."""
		self.console.print("\n[bold]Available files:[/bold]")
		for index, file in enumerate(files, start=1):
			self.console.print(f"  {index}. {escape(file)}")

	def show_files_to_commit(self, files: list[str]) -> None:
		"""List the files that will go into the commit."""
		self.console.print("\n[bold]Files to be committed:[/bold]")
		for file in files:
			self.console.print(f"  [green]✓[/green] {escape(file)}")

	def show_nothing_staged(self, unstaged: list[str]) -> None:
		"""Explain that there is nothing to commit and how to stage changes."""
		self.console.print("[yellow]No changes staged for commit.[/yellow]")
		if unstaged:
			self.console.print("\n[bold yellow]Unstaged changes:[/]")
			for file in unstaged:
				self.console.print(f"  {escape(file)}")
			self.console.print("\n[dim]Use --add-all to stage all files, or specify files with --files[/dim]")
		else:
			self.console.print("[dim]Working directory is clean.[/dim]")

	def show_previous_message(self, message: str) -> None:
		"""Show the message of the commit about to be amended."""
		self.console.print("\n[bold blue]Previous commit message:[/]")
		self.console.print(f"[dim]{escape(message)}[/dim]")

	def show_commit_result(self, branch: str, message: str) -> None:
		"""Report a successful commit."""
		self.show_success("Commit successful!")
		self.console.print(f"Branch: [cyan]{escape(branch)}[/cyan]")
		self.console.print(f"Message: {escape(message)}")

	def show_info(self, message: str) -> None:
		"""Show a progress line."""
		self.console.print(escape(message))

	def show_success(self, message: str) -> None:
		"""Show a success message."""
		self.console.print(f"[bold green]✓[/] {escape(message)}")

	def show_warning(self, message: str) -> None:
		"""Show a warning message."""
		self.console.print(f"[yellow]{escape(message)}[/yellow]")
