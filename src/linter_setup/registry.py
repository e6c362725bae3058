"""
Package registry clients.

Both clients return the metadata document of a single published version;
only its ``peerDependencies`` mapping is used by the setup workflow.
"""

import json
import subprocess
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict
from urllib.parse import quote

import requests
from loguru import logger

from .exceptions import ConfigurationError, RegistryQueryError


class PackageRegistryClient(ABC):
    """Fetches package metadata from a registry."""

    @abstractmethod
    def package_info(self, name: str, tag: str = "latest") -> Dict[str, Any]:
        """Return the metadata of ``name`` at ``tag``."""

    def peer_dependencies(self, name: str, tag: str = "latest") -> Dict[str, str]:
        """Return the declared peer dependencies, empty when none are declared."""
        info = self.package_info(name, tag)
        peers = info.get("peerDependencies") or {}
        if not isinstance(peers, dict):
            raise RegistryQueryError(
                f"Unexpected peerDependencies for {name}@{tag}: {peers!r}", package=name
            )
        return peers


class NpmRegistryClient(PackageRegistryClient):
    """Queries the registry through ``npm info <name>@<tag> --json``."""

    def __init__(self, executable: str = "npm", runner: Callable = subprocess.run):
        self.executable = executable
        self.runner = runner

    def package_info(self, name: str, tag: str = "latest") -> Dict[str, Any]:
        command = [self.executable, "info", f"{name}@{tag}", "--json"]
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = self.runner(command, capture_output=True, text=True)
        except FileNotFoundError:
            raise RegistryQueryError(
                f"'{self.executable}' executable not found; is Node.js installed?",
                package=name,
            )

        if result.returncode != 0:
            details = (result.stderr or result.stdout or "").strip()
            raise RegistryQueryError(
                f"npm info failed for {name}@{tag} (exit {result.returncode}): {details}",
                package=name,
            )

        try:
            info = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise RegistryQueryError(
                f"npm info returned invalid JSON for {name}@{tag}: {e}", package=name
            )

        # A range matching several versions yields a list, newest last
        if isinstance(info, list):
            if not info:
                raise RegistryQueryError(
                    f"No published version matches {name}@{tag}", package=name
                )
            info = info[-1]

        if not isinstance(info, dict):
            raise RegistryQueryError(
                f"Unexpected npm info output for {name}@{tag}", package=name
            )
        return info


class HttpRegistryClient(PackageRegistryClient):
    """Queries the registry's HTTP API directly (``GET /<name>/<tag>``)."""

    def __init__(
        self,
        registry_url: str = "https://registry.npmjs.org",
        timeout: int = 30,
        session: requests.Session = None,
    ):
        self.registry_url = registry_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def package_url(self, name: str, tag: str) -> str:
        # Scoped packages keep their "@" but the slash must be escaped
        return f"{self.registry_url}/{quote(name, safe='@')}/{quote(tag, safe='')}"

    def package_info(self, name: str, tag: str = "latest") -> Dict[str, Any]:
        url = self.package_url(name, tag)
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise RegistryQueryError(
                f"Registry returned {e.response.status_code} for {name}@{tag}",
                package=name,
            )
        except requests.RequestException as e:
            raise RegistryQueryError(
                f"Failed to reach registry for {name}@{tag}: {e}", package=name
            )

        try:
            info = response.json()
        except ValueError as e:
            raise RegistryQueryError(
                f"Registry returned invalid JSON for {name}@{tag}: {e}", package=name
            )

        if not isinstance(info, dict):
            raise RegistryQueryError(
                f"Unexpected registry response for {name}@{tag}", package=name
            )
        return info


def create_registry_client(registry_config) -> PackageRegistryClient:
    """Build the client selected by the ``registry`` config section."""
    if registry_config.client == "npm":
        return NpmRegistryClient()
    if registry_config.client == "http":
        return HttpRegistryClient(registry_config.url, timeout=registry_config.timeout)
    raise ConfigurationError(f"Unsupported registry client: {registry_config.client}")
