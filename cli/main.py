#!/usr/bin/env python3
"""Main entry point for the LintKit application."""


import sys
from pathlib import Path

from loguru import logger

root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

from src.utils.console import console  # noqa: E402


def main(argv=None) -> int:
    """Main entry point for the CLI application."""

    from cli.arg_parser import setup_argument_parser
    from cli.commands import handle_list_styles_command, handle_setup_command
    from src.config.settings import get_config
    from src.linter_setup.exceptions import LintSetupError
    from src.utils.logging import setup_logging

    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_config()
        log_level = args.log_level or settings.logging.level
        setup_logging(log_level, settings.logging.logs_dir)

        if args.list_styles:
            handle_list_styles_command(args)
            return 0

        handle_setup_command(args, settings)

    except KeyboardInterrupt:
        console.error("Operation interrupted by user")
        return 1
    except LintSetupError as e:
        logger.opt(exception=e).debug(f"{e.error_type.value} failure")
        console.error(str(e))
        return 1
    except Exception as e:
        logger.opt(exception=e).debug("Unexpected failure")
        console.error(f"Unexpected error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
