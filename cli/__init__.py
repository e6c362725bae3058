"""
CLI module for LintKit - interactive ESLint setup.

This module provides command-line interface functionality for the LintKit package.
"""

from .main import main
from .setup import main as setup_main

__all__ = ["setup_main", "main"]
