"""Tests for loading the LintKit configuration file."""

import json

import pytest

from src.config import settings as settings_module
from src.config.settings import Config
from src.linter_setup.exceptions import ConfigurationError


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_yields_defaults(tmp_path):
    config = Config.load(str(tmp_path / "absent.json"))

    assert config.config_file is None
    assert config.registry.client == "npm"
    assert config.registry.tag == "latest"
    assert config.install.package_manager == "npm"
    assert config.install.merge_policy == "first"
    assert config.eslint.config_filename == ".eslintrc.json"
    assert config.eslint.base_ruleset is None
    assert config.logging.level == "WARNING"


def test_file_values_override_defaults(tmp_path):
    path = write_config(
        tmp_path / "system.json",
        {
            "registry": {"client": "http", "timeout": 5},
            "install": {"package_manager": "pnpm", "merge_policy": "last"},
            "eslint": {"config_filename": ".eslintrc"},
        },
    )

    config = Config.load(str(path))

    assert config.config_file == str(path)
    assert config.registry.client == "http"
    assert config.registry.timeout == 5
    assert config.registry.url == "https://registry.npmjs.org"
    assert config.install.package_manager == "pnpm"
    assert config.install.merge_policy == "last"
    assert config.eslint.config_filename == ".eslintrc"


def test_env_var_points_at_config(tmp_path, monkeypatch):
    path = write_config(tmp_path / "env.json", {"install": {"pin_versions": False}})
    monkeypatch.setenv("LINTKIT_CONFIG", str(path))

    assert Config.load().install.pin_versions is False


def test_logs_dir_tilde_is_expanded(tmp_path):
    path = write_config(tmp_path / "c.json", {"logging": {"logs_dir": "~/lint-logs"}})

    assert not Config.load(str(path)).logging.logs_dir.startswith("~")


@pytest.mark.parametrize(
    "data",
    [
        {"install": {"package_manager": "bower"}},
        {"install": {"merge_policy": "random"}},
        {"registry": {"client": "ftp"}},
        {"eslint": {"config_filename": "eslint.config.js"}},
        {"registry": {"mirror": "https://example.com"}},
        {"logging": {"logs_dir": None}},
        {"logging": {"level": "verbose"}},
        {"logging": {"level": 10}},
        {"registry": {"timeout": "30"}},
        {"registry": {"timeout": True}},
        {"install": {"pin_versions": "yes"}},
        {"eslint": {"base_ruleset": ["eslint:recommended"]}},
        {"install": None},
    ],
)
def test_invalid_values_are_rejected(tmp_path, data):
    path = write_config(tmp_path / "bad.json", data)

    with pytest.raises(ConfigurationError):
        Config.load(str(path))


def test_malformed_json_is_rejected(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Config.load(str(path))


def test_get_config_caches_until_reload(tmp_path, monkeypatch):
    monkeypatch.setenv("LINTKIT_CONFIG", str(tmp_path / "absent.json"))
    monkeypatch.setattr(settings_module, "_config_instance", None)

    first = settings_module.get_config()
    assert settings_module.get_config() is first
    assert settings_module.config.registry is first.registry

    settings_module.reload_config()
    assert settings_module.get_config() is not first
