"""
End-to-end linter setup: resolve, fetch peers, install, write config.

Each stage consumes the previous stage's output. Any LintSetupError raised
by a stage propagates to the caller; nothing already installed or written
is rolled back.
"""

from pathlib import Path
from typing import List, Optional

from loguru import logger
from rich.table import Table

from src.utils.console import LintConsole, console as default_console, packages

from .aggregator import aggregate_peer_dependencies, build_install_set
from .installer import MANIFEST_FILENAME, PackageInstaller
from .models import MergePolicy, PackageSpec, UserSelection
from .registry import PackageRegistryClient
from .resolver import resolve_configs
from .writer import FileWriter, build_extends, write_eslint_config


class LinterSetup:
    """Runs the setup stages for one user selection."""

    def __init__(
        self,
        settings,
        registry: PackageRegistryClient,
        installer: PackageInstaller,
        writer: Optional[FileWriter] = None,
        console: Optional[LintConsole] = None,
    ):
        self.settings = settings
        self.registry = registry
        self.installer = installer
        self.writer = writer or FileWriter()
        self.console = console or default_console

    @property
    def directory(self) -> Path:
        return self.installer.cwd

    def plan(self, configs: List[str]) -> List[PackageSpec]:
        """Collect the install set for the resolved configs."""
        self.console.step("Fetching infos for", packages(configs), "...")
        peers = aggregate_peer_dependencies(
            configs,
            self.registry,
            policy=MergePolicy(self.settings.install.merge_policy),
            tag=self.settings.registry.tag,
        )
        return build_install_set(
            peers, configs, pin_versions=self.settings.install.pin_versions
        )

    def run(self, selection: UserSelection, dry_run: bool = False) -> Optional[Path]:
        """
        Execute the setup for ``selection``.

        Returns:
            Path of the written ESLint config, or None for a dry run
        """
        logger.info(f"Setting up ESLint in {self.directory} for {selection}")
        configs = resolve_configs(selection)

        if dry_run:
            install_set = self.plan(configs)
            self.show_plan(configs, install_set)
            return None

        # npm refuses to install without a manifest
        if not self.installer.has_manifest():
            self.console.step(
                "Creating a", f"[package]{MANIFEST_FILENAME}[/package]", "file ..."
            )
            self.installer.ensure_manifest()

        install_set = self.plan(configs)

        self.console.step(
            "Installing", packages(pkg.name for pkg in install_set), "..."
        )
        self.installer.install(install_set)

        self.console.step("Creating configuration ...")
        config_path = write_eslint_config(
            configs,
            self.directory,
            filename=self.settings.eslint.config_filename,
            base_ruleset=self.settings.eslint.base_ruleset,
            writer=self.writer,
        )
        self.console.success(f"ESLint configuration written to {config_path}")
        return config_path

    def show_plan(self, configs: List[str], install_set: List[PackageSpec]):
        table = Table(title="Packages to install", header_style="bold cyan")
        table.add_column("Package", style="package")
        table.add_column("Version")
        for pkg in install_set:
            table.add_row(pkg.name, pkg.version or "-")
        self.console.print(table)

        extends = build_extends(configs, self.settings.eslint.base_ruleset)
        self.console.info(
            f"Would write {self.settings.eslint.config_filename} extending {extends}"
        )
        self.console.dim(
            f"Package manager: {self.installer.manager} (dry run, nothing changed)"
        )
