"""Tests for Config."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from avrocache.config import Config
from avrocache.errors import ConfigError, ConfigNotFoundError


class TestConfigGet:
    def test_dot_path_lookup(self):
        config = Config({"registry": {"url": "http://registry:8081"}})
        assert config.get("registry.url") == "http://registry:8081"

    def test_builtin_defaults(self):
        config = Config()
        assert config.get("registry.url") is None
        assert config.get("registry.timeout") == 30
        assert config.get("schemas.root") == "./priv/schemas"
        assert config.get("cache.ttl") is None

    def test_explicit_default_wins_over_builtin(self):
        assert Config().get("registry.timeout", 5) == 5

    def test_explicit_none_default_wins_over_builtin(self):
        assert Config().get("registry.timeout", None) is None
        assert Config().get("schemas.root", default=None) is None

    def test_unknown_key(self):
        assert Config().get("nope.nothing") is None
        assert Config().get("nope.nothing", "fallback") == "fallback"

    def test_value_overrides_defaults(self):
        assert Config({"registry": {"timeout": 2}}).get("registry.timeout", 9) == 2


class TestConfigFromYaml:
    def test_loads_mapping(self, tmp_path: Path):
        path = tmp_path / "avrocache.yaml"
        path.write_text(yaml.dump({"registry": {"url": "http://r:8081"}, "cache": {"ttl": 120}}))

        config = Config.from_yaml(path)

        assert config.get("registry.url") == "http://r:8081"
        assert config.get("cache.ttl") == 120

    def test_empty_file_is_empty_config(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.from_yaml(path).get("registry.timeout") == 30

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError) as exc_info:
            Config.from_yaml(tmp_path / "missing.yaml")
        assert exc_info.value.code == "CONFIG_NOT_FOUND"

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("{{invalid: yaml: ---")
        with pytest.raises(ConfigError):
            Config.from_yaml(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            Config.from_yaml(path)

    @pytest.mark.parametrize(
        "content",
        ['cache:\n  ttl: "60"\n', "registry:\n  timeout: fast\n", "cache:\n  ttl: true\n"],
    )
    def test_non_numeric_durations_rejected(self, tmp_path: Path, content: str):
        path = tmp_path / "typed.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError, match="must be a number"):
            Config.from_yaml(path)

    def test_float_ttl_accepted(self, tmp_path: Path):
        path = tmp_path / "float.yaml"
        path.write_text("cache:\n  ttl: 0.5\n")
        assert Config.from_yaml(path).get("cache.ttl") == 0.5
