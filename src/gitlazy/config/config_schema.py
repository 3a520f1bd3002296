"""Schemas for the git-lazy configuration file."""

from pydantic import BaseModel, ConfigDict, Field


class GitSchema(BaseModel):
	"""Settings for invoking git."""

	model_config = ConfigDict(extra="forbid")

	executable: str = Field(default="git", min_length=1)


class CommitSchema(BaseModel):
	"""Defaults for the commit command."""

	model_config = ConfigDict(extra="forbid")

	add_all: bool = False
	# None means "ask" in the interactive flow
	bypass_hooks: bool | None = None
	interactive: bool = False


class AppConfigSchema(BaseModel):
	"""Top-level configuration."""

	model_config = ConfigDict(extra="forbid")

	git: GitSchema = Field(default_factory=GitSchema)
	commit: CommitSchema = Field(default_factory=CommitSchema)
