"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitlazy.config import (
	AppConfigSchema,
	ConfigFileNotFoundError,
	ConfigLoader,
	ConfigParsingError,
)


@pytest.fixture
def xdg_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
	"""Point the XDG config home at a temporary directory."""
	xdg = tmp_path / "xdg"
	monkeypatch.setattr("gitlazy.config.config_loader.xdg_config_home", str(xdg))
	return xdg


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
	"""A directory that looks like a repository root."""
	repo = tmp_path / "repo"
	(repo / ".git").mkdir(parents=True)
	return repo


@pytest.mark.unit
@pytest.mark.config
class TestConfigLoader:
	"""Test cases for ConfigLoader."""

	def test_defaults_without_file(self, repo_dir: Path, xdg_home: Path) -> None:
		"""Without any file the schema defaults apply."""
		loader = ConfigLoader(search_from=repo_dir)

		assert loader.config_file is None
		assert loader.get == AppConfigSchema()
		assert loader.get.git.executable == "git"
		assert loader.get.commit.add_all is False
		assert loader.get.commit.bypass_hooks is None
		assert loader.get.commit.interactive is False

	def test_local_file(self, repo_dir: Path, xdg_home: Path) -> None:
		"""A .gitlazy.yml in the repository root is loaded."""
		(repo_dir / ".gitlazy.yml").write_text("commit:\n  add_all: true\n", encoding="utf-8")

		loader = ConfigLoader(search_from=repo_dir)

		assert loader.config_file == repo_dir / ".gitlazy.yml"
		assert loader.get.commit.add_all is True
		assert loader.get.commit.interactive is False

	def test_found_from_subdirectory(self, repo_dir: Path, xdg_home: Path) -> None:
		"""The search walks up from nested directories to the repository root."""
		(repo_dir / ".gitlazy.yml").write_text("commit:\n  interactive: true\n", encoding="utf-8")
		nested = repo_dir / "src" / "pkg"
		nested.mkdir(parents=True)

		assert ConfigLoader(search_from=nested).get.commit.interactive is True

	def test_search_stops_at_repository_root(self, tmp_path: Path, repo_dir: Path, xdg_home: Path) -> None:
		"""Files above the repository root are not picked up."""
		(tmp_path / ".gitlazy.yml").write_text("commit:\n  add_all: true\n", encoding="utf-8")

		assert ConfigLoader(search_from=repo_dir).config_file is None

	def test_xdg_file(self, repo_dir: Path, xdg_home: Path) -> None:
		"""The user-level file is used when the repository has none."""
		(xdg_home / "gitlazy").mkdir(parents=True)
		(xdg_home / "gitlazy" / "config.yml").write_text("git:\n  executable: git2\n", encoding="utf-8")

		assert ConfigLoader(search_from=repo_dir).get.git.executable == "git2"

	def test_local_wins_over_xdg(self, repo_dir: Path, xdg_home: Path) -> None:
		"""The repository file takes precedence over the user file."""
		(xdg_home / "gitlazy").mkdir(parents=True)
		(xdg_home / "gitlazy" / "config.yml").write_text("git:\n  executable: from-xdg\n", encoding="utf-8")
		(repo_dir / ".gitlazy.yml").write_text("git:\n  executable: from-repo\n", encoding="utf-8")

		assert ConfigLoader(search_from=repo_dir).get.git.executable == "from-repo"

	def test_explicit_file(self, tmp_path: Path, repo_dir: Path, xdg_home: Path) -> None:
		"""An explicit path overrides the search."""
		custom = tmp_path / "custom.yml"
		custom.write_text("commit:\n  bypass_hooks: false\n", encoding="utf-8")

		assert ConfigLoader(config_file=custom, search_from=repo_dir).get.commit.bypass_hooks is False

	def test_explicit_file_missing(self, tmp_path: Path, xdg_home: Path) -> None:
		"""A missing explicit path is an error."""
		with pytest.raises(ConfigFileNotFoundError):
			ConfigLoader(config_file=tmp_path / "missing.yml")

	def test_empty_file(self, repo_dir: Path, xdg_home: Path) -> None:
		"""An empty file means defaults."""
		(repo_dir / ".gitlazy.yml").write_text("", encoding="utf-8")

		assert ConfigLoader(search_from=repo_dir).get == AppConfigSchema()

	@pytest.mark.parametrize(
		"content",
		[
			"- just\n- a list\n",
			"commit: [unclosed\n",
			"commit:\n  add_all: maybe\n",
			"unknown_section:\n  key: 1\n",
			"git:\n  executable: ''\n",
		],
	)
	def test_invalid_files(self, repo_dir: Path, xdg_home: Path, content: str) -> None:
		"""Bad YAML and schema violations raise ConfigParsingError."""
		(repo_dir / ".gitlazy.yml").write_text(content, encoding="utf-8")

		with pytest.raises(ConfigParsingError):
			ConfigLoader(search_from=repo_dir)
