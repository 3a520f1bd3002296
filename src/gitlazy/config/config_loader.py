"""
Configuration loader for git-lazy.

This module provides functionality for loading and managing
configuration settings.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from gitlazy.config.config_schema import AppConfigSchema

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".gitlazy.yml"


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigFileNotFoundError(ConfigError):
	"""Exception raised when configuration file is not found."""


class ConfigParsingError(ConfigError):
	"""Exception raised when configuration file cannot be parsed."""


class ConfigLoader:
	"""
	Loads configuration for git-lazy using Pydantic schemas.

	Values missing from the file fall back to the schema defaults.

	"""

	def __init__(self, config_file: Path | None = None, search_from: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
			config_file: Path to configuration file (optional)
			search_from: Directory to start looking for .gitlazy.yml (defaults to the current directory)

		Raises:
			ConfigFileNotFoundError: If ``config_file`` is given but does not exist
			ConfigParsingError: If the file cannot be parsed or validated

		"""
		self.search_from = search_from or Path.cwd()
		self._resolved_config_file = self._resolve_config_file(config_file)
		self._app_config = self._load_config()

	def _resolve_config_file(self, config_file: Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. .gitlazy.yml in ``search_from`` or a parent, stopping at the repository root
		2. $XDG_CONFIG_HOME/gitlazy/config.yml

		"""
		if config_file:
			path = config_file.expanduser().resolve()
			if not path.exists():
				msg = f"Configuration file not found: {path}"
				raise ConfigFileNotFoundError(msg)
			return path

		local_config = self._find_local_config(self.search_from)
		if local_config is not None:
			return local_config

		xdg_config_file = Path(xdg_config_home) / "gitlazy" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	@staticmethod
	def _find_local_config(start: Path) -> Path | None:
		for directory in (start, *start.parents):
			candidate = directory / CONFIG_FILE_NAME
			if candidate.exists():
				return candidate
			if (directory / ".git").exists():
				break
		return None

	@staticmethod
	def _parse_yaml_file(file_path: Path) -> dict[str, Any]:
		with file_path.open(encoding="utf-8") as f:
			content = yaml.safe_load(f)
		if content is None:  # Empty file
			return {}
		if not isinstance(content, dict):
			msg = f"File {file_path} does not contain a valid YAML dictionary"
			raise yaml.YAMLError(msg)
		return content

	def _load_config(self) -> AppConfigSchema:
		file_config_dict: dict[str, Any] = {}
		if self._resolved_config_file:
			try:
				file_config_dict = self._parse_yaml_file(self._resolved_config_file)
				logger.debug("Loaded configuration from %s", self._resolved_config_file)
			except yaml.YAMLError as e:
				msg = f"Configuration file {self._resolved_config_file} does not contain a valid YAML dictionary."
				logger.exception(msg)
				raise ConfigParsingError(msg) from e
			except OSError as e:
				msg = f"Error accessing configuration file {self._resolved_config_file}: {e}"
				logger.exception(msg)
				raise ConfigParsingError(msg) from e
		else:
			logger.debug("No configuration file found. Using default configuration.")

		try:
			return AppConfigSchema(**file_config_dict)
		except ValidationError as e:
			msg = f"Error parsing configuration into schema: {e}"
			logger.exception(msg)
			raise ConfigParsingError(msg) from e

	@property
	def config_file(self) -> Path | None:
		"""The configuration file in use, if any."""
		return self._resolved_config_file

	@property
	def get(self) -> AppConfigSchema:
		"""
		Get the current application configuration.

		Returns:
			AppConfigSchema: The current configuration

		"""
		return self._app_config
