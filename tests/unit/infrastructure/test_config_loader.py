"""Tests for infrastructure/config_loader.py."""

from pathlib import Path

import pytest

from cleanarch.domain.exceptions.config import ConfigError
from cleanarch.domain.model.configuration import ValidatorConfig, default_aliases
from cleanarch.domain.model.layer import Layer
from cleanarch.infrastructure.config_loader import find_config, load_config, parse_config
from tests.factories import write_tree


class TestFindConfig:
    """Tests for find_config."""

    def test_finds_in_start_directory(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pyproject.toml": ""})

        assert find_config(tmp_path) == (tmp_path / "pyproject.toml").resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pyproject.toml": "", "src/pkg/mod.py": ""})

        assert find_config(tmp_path / "src" / "pkg") == (tmp_path / "pyproject.toml").resolve()

    def test_start_may_be_file(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pyproject.toml": "", "src/mod.py": ""})

        assert find_config(tmp_path / "src" / "mod.py") == (tmp_path / "pyproject.toml").resolve()


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_table_gives_defaults(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pyproject.toml": '[project]\nname = "x"\n'})

        config = load_config(tmp_path / "pyproject.toml")

        assert config == ValidatorConfig()

    def test_full_table(self, tmp_path: Path) -> None:
        write_tree(
            tmp_path,
            {
                "pyproject.toml": (
                    "[tool.cleanarch]\n"
                    "ignore_tests = true\n"
                    'ignored_imports = ["generated", "legacy.db"]\n'
                    "\n"
                    "[tool.cleanarch.aliases]\n"
                    'domain = ["core"]\n'
                    'infrastructure = ["platform"]\n'
                ),
            },
        )

        config = load_config(tmp_path / "pyproject.toml")

        assert config.ignore_tests is True
        assert config.ignored_imports == ("generated", "legacy.db")
        assert config.aliases["core"] is Layer.DOMAIN
        assert config.aliases["platform"] is Layer.INFRASTRUCTURE
        assert config.aliases["domain"] is Layer.DOMAIN

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="cannot read"):
            load_config(tmp_path / "pyproject.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pyproject.toml": "[tool.cleanarch\n"})

        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config(tmp_path / "pyproject.toml")

    def test_table_must_be_table(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pyproject.toml": 'tool = { cleanarch = "yes" }\n'})

        with pytest.raises(ConfigError, match="must be a table"):
            load_config(tmp_path / "pyproject.toml")

    def test_error_names_source(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pyproject.toml": "[tool.cleanarch]\nignore_tests = 1\n"})

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "pyproject.toml")

        assert exc_info.value.source == (tmp_path / "pyproject.toml").as_posix()


class TestParseConfig:
    """Tests for parse_config value validation."""

    def test_empty_table(self) -> None:
        config = parse_config({}, "test")

        assert dict(config.aliases) == dict(default_aliases())
        assert config.ignore_tests is False

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="unknown keys"):
            parse_config({"ignore_test": True}, "test")

    @pytest.mark.parametrize("key", ["ignore_tests", "replace_default_aliases"])
    def test_flags_must_be_bool(self, key: str) -> None:
        with pytest.raises(ConfigError, match=f"{key} must be a boolean"):
            parse_config({key: "yes"}, "test")

    @pytest.mark.parametrize("value", ["generated", ["ok", ""], [1]])
    def test_ignored_imports_must_be_string_list(self, value: object) -> None:
        with pytest.raises(ConfigError, match="ignored_imports must be a list"):
            parse_config({"ignored_imports": value}, "test")

    def test_unknown_layer(self) -> None:
        with pytest.raises(ConfigError, match="unknown layer 'presentation'"):
            parse_config({"aliases": {"presentation": ["ui"]}}, "test")

    def test_aliases_must_be_table(self) -> None:
        with pytest.raises(ConfigError, match="aliases must be a table"):
            parse_config({"aliases": ["domain"]}, "test")

    def test_replace_default_aliases(self) -> None:
        config = parse_config(
            {"replace_default_aliases": True, "aliases": {"domain": ["core"]}},
            "test",
        )

        assert dict(config.aliases) == {"core": Layer.DOMAIN}

    def test_conflicting_alias(self) -> None:
        """Re-using a default alias for another layer is rejected."""
        with pytest.raises(ConfigError, match="maps to both"):
            parse_config({"aliases": {"domain": ["infra"]}}, "test")
