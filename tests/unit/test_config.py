"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from monoreleaser.config.loader import (
    apply_env_overrides,
    extract_config,
    find_config_file,
    load_config,
    load_toml,
)
from monoreleaser.config.models import GitHubConfig, MonoreleaserConfig
from monoreleaser.exceptions import ConfigNotFoundError, ConfigValidationError


@pytest.fixture
def project_with_config(tmp_path: Path) -> Path:
    (tmp_path / ".monoreleaser.toml").write_text(
        """\
owner = "kharf"
name = "myrepo"
provider = "github"

[github]
api_url = "https://github.mycompany.com/api/v3"
"""
    )
    return tmp_path


class TestMonoreleaserConfig:
    """Tests for MonoreleaserConfig model."""

    def test_default_config(self):
        """Default configuration has sensible values."""
        config = MonoreleaserConfig()

        assert config.owner is None
        assert config.name is None
        assert config.provider == "github"

    def test_nested_defaults(self):
        config = MonoreleaserConfig()

        assert config.github.token is None
        assert config.github.api_url == "https://api.github.com"
        assert config.github.uploads_url == "https://uploads.github.com"
        assert config.github.timeout == 10.0

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError):
            MonoreleaserConfig(provider="gitlab")

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError):
            MonoreleaserConfig.model_validate({"ownr": "typo"})


class TestGitHubConfig:
    """Tests for GitHubConfig model."""

    def test_github_enterprise_url(self):
        config = GitHubConfig(api_url="https://github.mycompany.com/api/v3")

        assert config.api_url == "https://github.mycompany.com/api/v3"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            GitHubConfig(timeout=0)


class TestLoadToml:
    """Tests for load_toml()."""

    def test_load_valid_toml(self, project_with_config: Path):
        data = load_toml(project_with_config / ".monoreleaser.toml")

        assert data["owner"] == "kharf"

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_raises(self, tmp_path: Path):
        path = tmp_path / ".monoreleaser.toml"
        path.write_text("owner = ")

        with pytest.raises(ConfigValidationError):
            load_toml(path)


class TestFindConfigFile:
    """Tests for find_config_file()."""

    def test_find_in_current_dir(self, project_with_config: Path):
        found = find_config_file(project_with_config)

        assert found.name == ".monoreleaser.toml"

    def test_find_in_parent_dir(self, project_with_config: Path):
        """Modules of a monorepo find the repository configuration."""
        subdir = project_with_config / "services" / "api"
        subdir.mkdir(parents=True)

        found = find_config_file(subdir)

        assert found == (project_with_config / ".monoreleaser.toml").resolve()

    def test_pyproject_with_tool_section(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[tool.monoreleaser]\nowner = "kharf"\n')

        assert find_config_file(tmp_path).name == "pyproject.toml"

    def test_pyproject_without_tool_section_skipped(self, tmp_path: Path):
        (tmp_path / ".monoreleaser.toml").write_text('owner = "root"\n')
        nested = tmp_path / "pkg"
        nested.mkdir()
        (nested / "pyproject.toml").write_text('[project]\nname = "pkg"\n')

        assert find_config_file(nested).name == ".monoreleaser.toml"


    def test_broken_parent_pyproject_skipped(self, tmp_path: Path):
        """An unrelated pyproject.toml that does not parse is not a config candidate."""
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")
        project = tmp_path / "project"
        project.mkdir()

        with pytest.raises(ConfigNotFoundError):
            find_config_file(project)

    def test_search_continues_past_broken_pyproject(self, tmp_path: Path):
        (tmp_path / ".monoreleaser.toml").write_text('owner = "kharf"\n')
        module = tmp_path / "module"
        module.mkdir()
        (module / "pyproject.toml").write_text("[project\nname = ")

        assert find_config_file(module) == (tmp_path / ".monoreleaser.toml").resolve()


class TestExtractConfig:
    """Tests for extract_config()."""

    def test_extract_from_pyproject(self):
        data = {"tool": {"monoreleaser": {"owner": "kharf"}}, "project": {"name": "x"}}

        assert extract_config(Path("pyproject.toml"), data) == {"owner": "kharf"}

    def test_extract_from_config_file(self):
        assert extract_config(Path(".monoreleaser.toml"), {"owner": "kharf"}) == {"owner": "kharf"}


class TestApplyEnvOverrides:
    """Tests for apply_env_overrides()."""

    def test_token_from_env(self):
        data = apply_env_overrides({"github": {"api_url": "x"}}, {"MR_GITHUB_TOKEN": "secret"})

        assert data == {"github": {"api_url": "x", "token": "secret"}}

    def test_no_env(self):
        assert apply_env_overrides({"owner": "kharf"}, {}) == {"owner": "kharf"}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_with_config(self, project_with_config: Path):
        config = load_config(project_with_config, environ={})

        assert config.owner == "kharf"
        assert config.name == "myrepo"
        assert config.github.api_url == "https://github.mycompany.com/api/v3"
        assert config.github.token is None

    def test_env_token(self, project_with_config: Path):
        config = load_config(project_with_config, environ={"MR_GITHUB_TOKEN": "secret"})

        assert config.github.token == "secret"

    def test_defaults_without_file(self, tmp_path: Path):
        config = load_config(tmp_path, environ={})

        assert config == MonoreleaserConfig()

    def test_broken_parent_pyproject_uses_defaults(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")
        project = tmp_path / "project"
        project.mkdir()

        assert load_config(project, environ={}) == MonoreleaserConfig()

    def test_broken_config_file_raises(self, tmp_path: Path):
        (tmp_path / ".monoreleaser.toml").write_text("owner = ")

        with pytest.raises(ConfigValidationError):
            load_config(tmp_path, environ={})

    def test_invalid_config_raises(self, tmp_path: Path):
        (tmp_path / ".monoreleaser.toml").write_text('provider = "bitbucket"\n')

        with pytest.raises(ConfigValidationError):
            load_config(tmp_path, environ={})
