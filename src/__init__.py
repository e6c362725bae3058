"""
Main package initialization.
"""

__version__ = "0.1.0"

# Note: Imports removed to avoid circular dependencies
# Import modules directly when needed:
# from src.linter_setup import LinterSetup, resolve_configs
