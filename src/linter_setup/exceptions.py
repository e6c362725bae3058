"""
Error types for the linter setup workflow.

Every failure aborts the run. The CLI entry point is the only place these
are caught; the ``error_type`` attribute tells it which stage failed.
"""

from enum import Enum


class SetupErrorType(Enum):
    """Types of setup errors for categorization."""

    CONFIGURATION = "configuration"
    PROMPT = "prompt"
    REGISTRY_QUERY = "registry_query"
    INSTALL = "install"
    FILE_WRITE = "file_write"


class LintSetupError(Exception):
    """Base class for all setup failures."""

    error_type = SetupErrorType.CONFIGURATION
    label = "Setup"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.label} Error: {self.message}"


class ConfigurationError(LintSetupError):
    """Unknown style guide, malformed package name or invalid settings."""

    error_type = SetupErrorType.CONFIGURATION
    label = "Configuration"


class PromptError(LintSetupError):
    """The user cancelled a prompt or the terminal could not be read."""

    error_type = SetupErrorType.PROMPT
    label = "Prompt"


class RegistryQueryError(LintSetupError):
    """Fetching package metadata from the registry failed."""

    error_type = SetupErrorType.REGISTRY_QUERY
    label = "Registry"

    def __init__(self, message: str, package: str = None):
        super().__init__(message)
        self.package = package


class InstallError(LintSetupError):
    """The package manager exited with a non-zero status."""

    error_type = SetupErrorType.INSTALL
    label = "Install"

    def __init__(self, message: str, returncode: int = None):
        super().__init__(message)
        self.returncode = returncode


class FileWriteError(LintSetupError):
    error_type = SetupErrorType.FILE_WRITE
    label = "File Write"
