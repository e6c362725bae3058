"""Merge the peer dependencies declared by the configuration packages."""

from typing import Dict, List

from loguru import logger

from .models import MergePolicy, PackageSpec
from .registry import PackageRegistryClient

VERSION_SEPARATOR = "||"


def resolve_version(specifier: str) -> str:
    """Pick the version to install from a peer dependency specifier.

    ``"^14.0.0 || ^15.0.0"`` resolves to ``"^15.0.0"``: the last listed range
    is assumed to be the most recent one.
    """
    if not specifier or not specifier.strip():
        return "latest"
    if VERSION_SEPARATOR in specifier:
        specifier = specifier.split(VERSION_SEPARATOR)[-1]
    return specifier.strip()


def aggregate_peer_dependencies(
    configs: List[str],
    registry: PackageRegistryClient,
    policy: MergePolicy = MergePolicy.FIRST_WINS,
    tag: str = "latest",
) -> Dict[str, str]:
    """
    Query each configuration package and merge its peer dependencies.

    Args:
        configs: Configuration package names, in resolution order
        registry: Client used to fetch package metadata
        policy: FIRST_WINS keeps the version from the earliest config that
            declares a dependency; LAST_WINS lets later configs overwrite it
        tag: Dist-tag to query

    Returns:
        Mapping of dependency name to version, in first-seen order

    Raises:
        RegistryQueryError: If any metadata query fails
    """
    peers: Dict[str, str] = {}

    for config_name in configs:
        declared = registry.peer_dependencies(config_name, tag)
        logger.debug(f"{config_name}@{tag} declares peers: {declared}")

        for dependency, specifier in declared.items():
            if not dependency:
                continue
            version = resolve_version(specifier)
            if dependency in peers:
                if policy is MergePolicy.LAST_WINS:
                    peers[dependency] = version
                else:
                    logger.debug(
                        f"Keeping {dependency}@{peers[dependency]}, "
                        f"ignoring {version} from {config_name}"
                    )
                continue
            peers[dependency] = version

    return peers


def build_install_set(
    peers: Dict[str, str], configs: List[str], pin_versions: bool = True
) -> List[PackageSpec]:
    """Peer dependencies first, then the configuration packages themselves."""
    packages = [
        PackageSpec(dependency, version if pin_versions else None)
        for dependency, version in peers.items()
    ]
    packages.extend(
        PackageSpec(config_name, "latest" if pin_versions else None)
        for config_name in configs
        if config_name not in peers
    )
    return packages
