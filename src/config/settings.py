"""
Configuration management for LintKit.
Centralizes registry, installer, ESLint output and logging settings.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from src.linter_setup.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "~/.lintkit/config/system.json"
CONFIG_ENV_VAR = "LINTKIT_CONFIG"

SUPPORTED_PACKAGE_MANAGERS = ["npm", "yarn", "pnpm", "auto"]
SUPPORTED_REGISTRY_CLIENTS = ["npm", "http"]
SUPPORTED_MERGE_POLICIES = ["first", "last"]
SUPPORTED_CONFIG_FILENAMES = [".eslintrc.json", ".eslintrc"]
SUPPORTED_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class RegistryConfig:
    """Package registry settings."""

    # "npm" shells out to `npm info`, "http" talks to the registry directly
    client: str = "npm"
    url: str = "https://registry.npmjs.org"
    timeout: int = 30
    tag: str = "latest"


@dataclass
class InstallConfig:
    """Installer settings."""

    package_manager: str = "npm"
    pin_versions: bool = True
    merge_policy: str = "first"


@dataclass
class EslintConfig:
    """Generated ESLint configuration settings."""

    config_filename: str = ".eslintrc.json"
    base_ruleset: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    logs_dir: str = "~/.lintkit/logs"


@dataclass
class Config:
    """Main configuration class."""

    registry: RegistryConfig = field(default_factory=RegistryConfig)
    install: InstallConfig = field(default_factory=InstallConfig)
    eslint: EslintConfig = field(default_factory=EslintConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_file: Optional[str] = None

    def __post_init__(self):
        self.validate()
        self.logging.logs_dir = _expand_path(self.logging.logs_dir)

    @classmethod
    def from_dict(cls, data: dict, config_file: Optional[str] = None) -> "Config":
        """Build a configuration from a parsed JSON document."""
        try:
            return cls(
                registry=RegistryConfig(**data.get("registry", {})),
                install=InstallConfig(**data.get("install", {})),
                eslint=EslintConfig(**data.get("eslint", {})),
                logging=LoggingConfig(**data.get("logging", {})),
                config_file=config_file,
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration {config_file or ''}: {e}")

    @classmethod
    def load(cls, config_file: Optional[str] = None) -> "Config":
        """Load configuration from JSON file, falling back to defaults.

        The file is looked up from the argument, then the ``LINTKIT_CONFIG``
        environment variable, then ``~/.lintkit/config/system.json``.
        """
        config_file = config_file or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        config_file = _expand_path(config_file)

        if not os.path.exists(config_file):
            return cls(config_file=None)

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load config file {config_file}: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a JSON object"
            )

        return cls.from_dict(config_data, config_file=config_file)

    def validate(self) -> None:
        """Reject values the setup workflow does not understand."""
        self._check_types()

        checks = [
            ("registry.client", self.registry.client, SUPPORTED_REGISTRY_CLIENTS),
            (
                "install.package_manager",
                self.install.package_manager,
                SUPPORTED_PACKAGE_MANAGERS,
            ),
            ("install.merge_policy", self.install.merge_policy, SUPPORTED_MERGE_POLICIES),
            (
                "eslint.config_filename",
                self.eslint.config_filename,
                SUPPORTED_CONFIG_FILENAMES,
            ),
            ("logging.level", self.logging.level, SUPPORTED_LOG_LEVELS),
        ]
        for key, value, allowed in checks:
            if value not in allowed:
                raise ConfigurationError(
                    f"Unsupported {key} '{value}' (expected one of: {', '.join(allowed)})"
                )

    def _check_types(self) -> None:
        expected = [
            ("registry.client", self.registry.client, str),
            ("registry.url", self.registry.url, str),
            ("registry.timeout", self.registry.timeout, int),
            ("registry.tag", self.registry.tag, str),
            ("install.package_manager", self.install.package_manager, str),
            ("install.pin_versions", self.install.pin_versions, bool),
            ("install.merge_policy", self.install.merge_policy, str),
            ("eslint.config_filename", self.eslint.config_filename, str),
            ("logging.level", self.logging.level, str),
            ("logging.logs_dir", self.logging.logs_dir, str),
        ]
        for key, value, kind in expected:
            # bool is an int subclass
            if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
                raise ConfigurationError(
                    f"Invalid {key} {value!r} (expected {kind.__name__})"
                )

        base_ruleset = self.eslint.base_ruleset
        if base_ruleset is not None and not isinstance(base_ruleset, str):
            raise ConfigurationError(
                f"Invalid eslint.base_ruleset {base_ruleset!r} (expected str or null)"
            )

    def to_dict(self) -> dict:
        data = asdict(self)
        data.pop("config_file")
        return data


def _expand_path(value: str) -> str:
    if value.startswith("~/"):
        return str(Path.home() / value[2:])
    return value


# Global configuration instance (lazy initialization)
_config_instance = None


def get_config(force_reload: bool = False) -> Config:
    """Get the global configuration instance."""
    global _config_instance
    if _config_instance is None or force_reload:
        _config_instance = Config.load()
    return _config_instance


def reload_config() -> None:
    """Reload the configuration by resetting the global instance."""
    global _config_instance
    _config_instance = None
    get_config(force_reload=True)


class _ConfigProxy:
    def __getattr__(self, name):
        return getattr(get_config(), name)


config = _ConfigProxy()
