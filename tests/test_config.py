"""Tests for settings file discovery and loading."""

import os

import pytest
import yaml

from kconf.core.errors import ConfigError, LibraryIOError
from kconf.utils.config import (
    create_default_config,
    default_settings,
    find_config_file,
    load_config,
)


class TestFindConfigFile:
    """Tests for the settings file search order."""

    def test_nothing_found(self, home):
        assert find_config_file() is None

    def test_explicit_path(self, tmp_path, home):
        path = tmp_path / "explicit.yaml"
        path.write_text("{}")
        assert find_config_file(str(path)) == str(path)

    def test_explicit_path_missing(self, tmp_path, home):
        with pytest.raises(ConfigError, match="not found"):
            find_config_file(str(tmp_path / "missing.yaml"))

    def test_env_var(self, tmp_path, home, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("{}")
        monkeypatch.setenv("KCONF_CONFIG", str(path))
        assert find_config_file() == str(path)

    def test_current_directory_is_not_searched(self, home):
        """A kconf.yaml in the working directory is never picked up."""
        (home.parent / "work" / "kconf.yaml").write_text("kubeconfig_var: X\n")
        assert find_config_file() is None

    def test_unknown_home_skips_user_config(self, home, monkeypatch):
        """Without a home directory the search simply finds nothing."""

        def no_home():
            raise LibraryIOError("could not determine the user's home directory")

        monkeypatch.setattr("kconf.utils.config.get_real_home", no_home)
        assert find_config_file() is None

    def test_user_config_dir(self, home):
        config_dir = home / ".config" / "kconf"
        config_dir.mkdir(parents=True)
        (config_dir / "kconf.yaml").write_text("{}")
        assert find_config_file() == str(config_dir / "kconf.yaml")


class TestLoadConfig:
    """Tests for reading settings."""

    def test_no_file_returns_defaults(self):
        assert load_config(None) == default_settings()

    def test_defaults(self):
        settings = default_settings()
        assert settings["library_path"] is None
        assert settings["kubeconfig_var"] == "KUBECONFIG"

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / "kconf.yaml"
        path.write_text("")
        assert load_config(str(path)) == default_settings()

    def test_values_are_read(self, tmp_path):
        path = tmp_path / "kconf.yaml"
        path.write_text(yaml.dump({"library_path": "/data/kube", "kubeconfig_var": "KCFG"}))
        settings = load_config(str(path))
        assert settings["library_path"] == "/data/kube"
        assert settings["kubeconfig_var"] == "KCFG"

    def test_variable_name_is_trimmed(self, tmp_path):
        path = tmp_path / "kconf.yaml"
        path.write_text(yaml.dump({"kubeconfig_var": " _KCFG_2 "}))
        assert load_config(str(path))["kubeconfig_var"] == "_KCFG_2"

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "kconf.yaml"
        path.write_text(yaml.dump({"library_path": "/data/kube"}))
        assert load_config(str(path))["kubeconfig_var"] == "KUBECONFIG"

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "kconf.yaml"
        path.write_text(yaml.dump({"colour": "blue"}))
        assert load_config(str(path)) == default_settings()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "kconf.yaml"
        path.write_text("{ invalid yaml: [")
        with pytest.raises(ConfigError, match="Error parsing YAML"):
            load_config(str(path))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "kconf.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(path))

    @pytest.mark.parametrize(
        "data",
        [
            {"library_path": 3},
            {"kubeconfig_var": ""},
            {"kubeconfig_var": ["x"]},
            {"kubeconfig_var": "X=1; touch injected; Y"},
            {"kubeconfig_var": "1KUBECONFIG"},
            {"kubeconfig_var": "KUBE CONFIG"},
            {"kubeconfig_var": "$(id)"},
        ],
    )
    def test_invalid_values(self, tmp_path, data):
        path = tmp_path / "kconf.yaml"
        path.write_text(yaml.dump(data))
        with pytest.raises(ConfigError):
            load_config(str(path))


class TestCreateDefaultConfig:
    def test_written_file_loads_back(self, tmp_path, home):
        path = tmp_path / "nested" / "kconf.yaml"
        created = create_default_config(str(path))

        assert created["library_path"] == os.path.join(str(home), ".kconf")
        assert load_config(str(path)) == created
