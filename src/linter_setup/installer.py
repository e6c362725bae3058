"""Install packages as development dependencies through the package manager."""

import subprocess
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

from .exceptions import ConfigurationError, InstallError
from .models import PackageSpec

MANIFEST_FILENAME = "package.json"

# Command prefixes per package manager
INIT_COMMANDS = {
    "npm": ["npm", "init", "-y"],
    "yarn": ["yarn", "init", "-y"],
    "pnpm": ["pnpm", "init"],
}
INSTALL_COMMANDS = {
    "npm": ["npm", "install", "-D"],
    "yarn": ["yarn", "add", "-D"],
    "pnpm": ["pnpm", "add", "-D"],
}
LOCKFILES = [
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
]


def detect_package_manager(cwd: Path) -> str:
    """Pick the package manager from the lockfile present in ``cwd``."""
    for lockfile, manager in LOCKFILES:
        if (Path(cwd) / lockfile).exists():
            return manager
    return "npm"


class PackageInstaller:
    """Runs a package manager in a project directory.

    ``runner`` defaults to ``subprocess.run``; output is never captured so
    the package manager writes straight to the user's terminal.
    """

    def __init__(
        self,
        manager: str = "npm",
        cwd: Optional[Path] = None,
        runner: Callable = subprocess.run,
    ):
        self.cwd = Path(cwd) if cwd else Path.cwd()
        if manager == "auto":
            manager = detect_package_manager(self.cwd)
        if manager not in INSTALL_COMMANDS:
            raise ConfigurationError(f"Unsupported package manager: {manager}")
        self.manager = manager
        self.runner = runner

    @property
    def manifest_path(self) -> Path:
        return self.cwd / MANIFEST_FILENAME

    def has_manifest(self) -> bool:
        return self.manifest_path.exists()

    def ensure_manifest(self) -> bool:
        """Create a default package.json when the project has none.

        Returns:
            True if a manifest was created, False if one already existed
        """
        if self.has_manifest():
            return False
        self._run(INIT_COMMANDS[self.manager], capture=True)
        return True

    def install(self, packages: List[PackageSpec]) -> None:
        """Install all packages at once as development dependencies."""
        if not packages:
            raise InstallError("Nothing to install")
        command = INSTALL_COMMANDS[self.manager] + [pkg.specifier for pkg in packages]
        self._run(command)

    def _run(self, command: List[str], capture: bool = False) -> None:
        logger.debug(f"Running in {self.cwd}: {' '.join(command)}")
        try:
            result = self.runner(command, cwd=str(self.cwd), capture_output=capture)
        except FileNotFoundError:
            raise InstallError(f"'{command[0]}' executable not found")

        if result.returncode != 0:
            raise InstallError(
                f"'{' '.join(command[:3])}' exited with code {result.returncode}",
                returncode=result.returncode,
            )
