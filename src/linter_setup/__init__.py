"""
ESLint setup workflow: pick a style guide, install it with its peer
dependencies and write the ESLint configuration file.
"""

from .aggregator import aggregate_peer_dependencies, build_install_set, resolve_version
from .exceptions import (
    ConfigurationError,
    FileWriteError,
    InstallError,
    LintSetupError,
    PromptError,
    RegistryQueryError,
    SetupErrorType,
)
from .installer import PackageInstaller, detect_package_manager
from .models import MergePolicy, PackageSpec, StyleGuideDescriptor, UserSelection
from .pipeline import LinterSetup
from .registry import (
    HttpRegistryClient,
    NpmRegistryClient,
    PackageRegistryClient,
    create_registry_client,
)
from .resolver import find_style, resolve_configs
from .styles import STYLE_GUIDES
from .writer import FileWriter, build_extends, style_identifier, write_eslint_config

__all__ = [
    "LinterSetup",
    "STYLE_GUIDES",
    "StyleGuideDescriptor",
    "UserSelection",
    "PackageSpec",
    "MergePolicy",
    "find_style",
    "resolve_configs",
    "resolve_version",
    "aggregate_peer_dependencies",
    "build_install_set",
    "PackageRegistryClient",
    "NpmRegistryClient",
    "HttpRegistryClient",
    "create_registry_client",
    "PackageInstaller",
    "detect_package_manager",
    "FileWriter",
    "build_extends",
    "style_identifier",
    "write_eslint_config",
    "LintSetupError",
    "SetupErrorType",
    "ConfigurationError",
    "PromptError",
    "RegistryQueryError",
    "InstallError",
    "FileWriteError",
]
