"""Argument parser setup for the CLI application."""

import argparse

from src import __version__
from src.config.settings import (
    SUPPORTED_CONFIG_FILENAMES,
    SUPPORTED_LOG_LEVELS,
    SUPPORTED_PACKAGE_MANAGERS,
    SUPPORTED_REGISTRY_CLIENTS,
)
from src.linter_setup.styles import style_values


def _add_selection_arguments(parser) -> None:
    """Answers that skip the interactive questions."""
    parser.add_argument(
        "--style",
        choices=style_values(),
        help="Style guide to follow (asked interactively if omitted)",
    )
    react_group = parser.add_mutually_exclusive_group()
    react_group.add_argument(
        "--react",
        dest="react",
        action="store_true",
        default=None,
        help="The project uses React",
    )
    react_group.add_argument(
        "--no-react",
        dest="react",
        action="store_false",
        help="The project does not use React",
    )


def _add_override_arguments(parser) -> None:
    """Per-run overrides of values from the config file."""
    parser.add_argument(
        "--directory",
        default=".",
        help="Project directory to set up (default: current directory)",
    )
    parser.add_argument(
        "--package-manager",
        choices=SUPPORTED_PACKAGE_MANAGERS,
        help="Package manager used to install (default from config: npm)",
    )
    parser.add_argument(
        "--registry",
        choices=SUPPORTED_REGISTRY_CLIENTS,
        help="How package metadata is fetched: npm CLI or registry HTTP API",
    )
    parser.add_argument(
        "--config-file",
        choices=SUPPORTED_CONFIG_FILENAMES,
        help="Name of the ESLint configuration file to write",
    )
    parser.add_argument(
        "--base-ruleset",
        help="Ruleset always extended first, e.g. eslint:recommended",
    )


def setup_argument_parser():
    """Setup and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lintkit",
        description="Set up ESLint with a shareable style guide config and its peer dependencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lintkit                                  # Ask which style guide to use
  lintkit --style airbnb --react           # Non-interactive setup
  lintkit --style xo --no-react --dry-run  # Show what would be installed
  lintkit --list-styles                    # Show available style guides
        """,
    )

    _add_selection_arguments(parser)
    _add_override_arguments(parser)

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve packages and peer dependencies without installing or writing",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List the available style guides and exit",
    )
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Set the logging level (default from config: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser
