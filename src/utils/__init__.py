from .console import console, packages
from .logging import setup_logging

__all__ = ["console", "packages", "setup_logging"]
