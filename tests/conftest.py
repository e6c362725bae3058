"""Shared pytest fixtures for the linter setup test suite."""

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.config.settings import Config  # noqa: E402
from src.linter_setup.exceptions import RegistryQueryError  # noqa: E402
from src.linter_setup.registry import PackageRegistryClient  # noqa: E402


class FakeRegistry(PackageRegistryClient):
    """In-memory registry keyed by package name."""

    def __init__(self, packages: Dict[str, Dict[str, Any]] = None):
        self.packages = packages or {}
        self.queries: List[tuple] = []

    def package_info(self, name: str, tag: str = "latest") -> Dict[str, Any]:
        self.queries.append((name, tag))
        if name not in self.packages:
            raise RegistryQueryError(f"404 Not Found - {name}", package=name)
        return self.packages[name]


class RecordingRunner:
    """Stands in for subprocess.run and remembers every command."""

    def __init__(self, returncodes: Dict[str, int] = None, create_manifest: bool = True):
        self.calls: List[Dict[str, Any]] = []
        self.returncodes = returncodes or {}
        self.create_manifest = create_manifest

    def __call__(self, command, cwd=None, capture_output=False, **kwargs):
        self.calls.append({"command": list(command), "cwd": cwd})
        returncode = self.returncodes.get(command[1], 0)
        if returncode == 0 and command[1] == "init" and self.create_manifest:
            (Path(cwd) / "package.json").write_text("{}", encoding="utf-8")
        return SimpleNamespace(returncode=returncode, stdout="", stderr="")

    @property
    def commands(self) -> List[List[str]]:
        return [call["command"] for call in self.calls]


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry(
        {
            "eslint-config-airbnb": {
                "name": "eslint-config-airbnb",
                "peerDependencies": {
                    "eslint": "^7.32.0 || ^8.2.0",
                    "eslint-plugin-import": "^2.25.3",
                },
            },
            "eslint-config-airbnb-react": {
                "name": "eslint-config-airbnb-react",
                "peerDependencies": {
                    "eslint": "^8.0.0",
                    "eslint-plugin-react": "^7.28.0",
                },
            },
            "eslint-config-standard": {
                "name": "eslint-config-standard",
                "peerDependencies": {
                    "eslint": "^8.0.1",
                    "eslint-plugin-import": "^2.25.2",
                    "eslint-plugin-n": "^15.0.0 || ^16.0.0 ",
                    "eslint-plugin-promise": "^6.0.0",
                },
            },
            "eslint-config-standard-react": {
                "name": "eslint-config-standard-react",
                "peerDependencies": {
                    "eslint": "^7.12.1",
                    "eslint-plugin-react": "^7.21.5",
                },
            },
            "eslint-config-xo": {"name": "eslint-config-xo"},
        }
    )


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def settings() -> Config:
    return Config()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "project"
    directory.mkdir()
    return directory
