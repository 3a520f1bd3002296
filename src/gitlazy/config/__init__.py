"""Configuration for git-lazy."""

from gitlazy.config.config_loader import (
	ConfigError,
	ConfigFileNotFoundError,
	ConfigLoader,
	ConfigParsingError,
)
from gitlazy.config.config_schema import AppConfigSchema, CommitSchema, GitSchema

__all__ = [
	"AppConfigSchema",
	"CommitSchema",
	"ConfigError",
	"ConfigFileNotFoundError",
	"ConfigLoader",
	"ConfigParsingError",
	"GitSchema",
]
