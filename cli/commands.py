"""Command handlers for the CLI application."""

from pathlib import Path

from loguru import logger
from rich.table import Table

from src.config.settings import Config
from src.linter_setup import (
    STYLE_GUIDES,
    ConfigurationError,
    LinterSetup,
    PackageInstaller,
    create_registry_client,
)
from src.linter_setup.prompts import collect_selection
from src.utils.console import console


def apply_overrides(settings: Config, args) -> Config:
    """Apply command line overrides on top of the loaded configuration."""
    if args.package_manager:
        settings.install.package_manager = args.package_manager
    if args.registry:
        settings.registry.client = args.registry
    if args.config_file:
        settings.eslint.config_filename = args.config_file
    if args.base_ruleset:
        settings.eslint.base_ruleset = args.base_ruleset
    settings.validate()
    return settings


def handle_list_styles_command(args) -> None:
    """Show the available style guides and their React variants."""
    table = Table(title="Style guides", header_style="bold cyan")
    table.add_column("Style", style="package")
    table.add_column("Description")
    table.add_column("React config")

    for style in STYLE_GUIDES:
        mode = "replaces base" if style.react.replace else "added to base"
        table.add_row(
            style.value, style.name, f"eslint-config-{style.react.name} ({mode})"
        )

    console.print(table)


def handle_setup_command(args, settings: Config) -> Path:
    """Ask the questions, then run the setup in the target directory."""
    directory = Path(args.directory).resolve()
    if not directory.is_dir():
        raise ConfigurationError(f"Directory does not exist: {directory}")

    settings = apply_overrides(settings, args)
    logger.debug(f"Using settings: {settings.to_dict()}")

    selection = collect_selection(STYLE_GUIDES, style=args.style, react=args.react)

    setup = LinterSetup(
        settings,
        registry=create_registry_client(settings.registry),
        installer=PackageInstaller(settings.install.package_manager, cwd=directory),
    )
    return setup.run(selection, dry_run=args.dry_run)
