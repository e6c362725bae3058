"""Write the generated ESLint configuration file."""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

from loguru import logger

from .exceptions import ConfigurationError, FileWriteError
from .styles import CONFIG_PREFIX

DEFAULT_CONFIG_FILENAME = ".eslintrc.json"


def style_identifier(package_name: str) -> str:
    """Strip the ``eslint-config-`` prefix: ``eslint-config-xo`` -> ``xo``."""
    if not package_name.startswith(CONFIG_PREFIX) or package_name == CONFIG_PREFIX:
        raise ConfigurationError(f"Not an ESLint config package: {package_name}")
    return package_name[len(CONFIG_PREFIX):]


def build_extends(
    configs: List[str], base_ruleset: Optional[str] = None
) -> Union[str, List[str]]:
    """Build the ``extends`` value: a string for one entry, a list otherwise."""
    identifiers = [style_identifier(config_name) for config_name in configs]
    if base_ruleset:
        identifiers.insert(0, base_ruleset)
    if len(identifiers) == 1:
        return identifiers[0]
    return identifiers


class FileWriter:
    """Writes pretty-printed JSON, replacing any existing file."""

    def write_json(self, path: Path, payload: Any) -> Path:
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
                f.write("\n")
        except OSError as e:
            raise FileWriteError(f"Failed to write {path}: {e}")
        return path


def write_eslint_config(
    configs: List[str],
    directory: Path,
    filename: str = DEFAULT_CONFIG_FILENAME,
    base_ruleset: Optional[str] = None,
    writer: Optional[FileWriter] = None,
) -> Path:
    """Write ``{"extends": ...}`` to ``directory/filename`` and return the path."""
    payload = {"extends": build_extends(configs, base_ruleset)}
    path = Path(directory) / filename
    logger.debug(f"Writing {payload} to {path}")
    return (writer or FileWriter()).write_json(path, payload)
