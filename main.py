#!/usr/bin/env python3
"""Main entry point for the LintKit application."""

import sys

from cli.main import main

if __name__ == "__main__":
    sys.exit(main())
