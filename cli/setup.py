#!/usr/bin/env python3
"""
Setup script for LintKit.
Creates ~/.lintkit with a default configuration file and a logs directory.
"""

import json
import sys
from pathlib import Path

from rich.prompt import Confirm

from src.config.settings import Config
from src.utils.console import console, rich_console

INSTALL_DIR = Path.home() / ".lintkit"


def setup_directories(install_dir: Path = INSTALL_DIR):
    """Create the necessary directories in ~/.lintkit"""
    for directory in (install_dir / "config", install_dir / "logs"):
        directory.mkdir(parents=True, exist_ok=True)
        console.info(f"Created directory: {directory}")


def setup_configuration(install_dir: Path = INSTALL_DIR) -> Path:
    """Write the default system configuration."""
    system_config = Config().to_dict()
    system_config["logging"]["logs_dir"] = str(install_dir / "logs")

    system_config_path = install_dir / "config" / "system.json"
    with open(system_config_path, "w", encoding="utf-8") as f:
        json.dump(system_config, f, indent=2)
    console.success(f"System configuration created at {system_config_path}")
    return system_config_path


def main(install_dir: Path = INSTALL_DIR) -> int:
    """Main setup function"""
    console.print("🔧 LintKit - Setup")
    console.print("=" * 30)

    try:
        config_path = install_dir / "config" / "system.json"
        if config_path.exists():
            console.warning(f"Configuration already exists at {config_path}")
            if not Confirm.ask(
                "Do you want to overwrite it?", default=False, console=rich_console
            ):
                console.info("Setup cancelled")
                return 0

        setup_directories(install_dir)
        setup_configuration(install_dir)

        console.print(f"\n📁 Configuration: {config_path}")
        console.dim("Set LINTKIT_CONFIG to use a configuration file elsewhere.")

    except KeyboardInterrupt:
        console.info("Setup cancelled by user")
        return 1
    except OSError as e:
        console.error(f"Setup failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
