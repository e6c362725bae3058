"""Tests for peer dependency aggregation and the install set."""

import pytest

from src.linter_setup.aggregator import (
    aggregate_peer_dependencies,
    build_install_set,
    resolve_version,
)
from src.linter_setup.exceptions import RegistryQueryError
from src.linter_setup.models import MergePolicy, PackageSpec

from conftest import FakeRegistry


class TestResolveVersion:
    def test_plain_specifier_is_kept(self):
        assert resolve_version("^2.25.3") == "^2.25.3"

    def test_alternation_resolves_to_last_range(self):
        assert resolve_version("^7.32.0 || ^8.2.0") == "^8.2.0"
        assert resolve_version("^5 || ^6 || ^7") == "^7"

    def test_alternation_without_spaces(self):
        assert resolve_version("^1.0.0||^2.0.0") == "^2.0.0"

    def test_empty_specifier_resolves_to_latest(self):
        assert resolve_version("") == "latest"
        assert resolve_version("   ") == "latest"


class TestAggregatePeerDependencies:
    def test_single_config(self, registry):
        peers = aggregate_peer_dependencies(["eslint-config-airbnb"], registry)

        assert peers == {"eslint": "^8.2.0", "eslint-plugin-import": "^2.25.3"}
        assert registry.queries == [("eslint-config-airbnb", "latest")]

    def test_first_config_wins_on_conflict(self, registry):
        peers = aggregate_peer_dependencies(
            ["eslint-config-standard", "eslint-config-standard-react"], registry
        )

        assert peers["eslint"] == "^8.0.1"
        assert peers["eslint-plugin-react"] == "^7.21.5"
        assert list(peers) == [
            "eslint",
            "eslint-plugin-import",
            "eslint-plugin-n",
            "eslint-plugin-promise",
            "eslint-plugin-react",
        ]

    def test_last_wins_policy_overwrites_version_but_keeps_order(self, registry):
        peers = aggregate_peer_dependencies(
            ["eslint-config-standard", "eslint-config-standard-react"],
            registry,
            policy=MergePolicy.LAST_WINS,
        )

        assert peers["eslint"] == "^7.12.1"
        assert list(peers)[0] == "eslint"

    def test_trailing_whitespace_in_ranges_is_stripped(self, registry):
        peers = aggregate_peer_dependencies(["eslint-config-standard"], registry)

        assert peers["eslint-plugin-n"] == "^16.0.0"

    def test_config_without_peers(self, registry):
        assert aggregate_peer_dependencies(["eslint-config-xo"], registry) == {}

    def test_empty_dependency_names_are_skipped(self):
        registry = FakeRegistry(
            {"eslint-config-odd": {"peerDependencies": {"": "^1.0.0", "eslint": "^8"}}}
        )

        assert aggregate_peer_dependencies(["eslint-config-odd"], registry) == {
            "eslint": "^8"
        }

    def test_registry_failure_aborts(self, registry):
        with pytest.raises(RegistryQueryError):
            aggregate_peer_dependencies(
                ["eslint-config-airbnb", "eslint-config-missing"], registry
            )

    def test_each_call_builds_a_fresh_map(self, registry):
        first = aggregate_peer_dependencies(["eslint-config-airbnb"], registry)
        second = aggregate_peer_dependencies(["eslint-config-xo"], registry)

        assert first != second
        assert second == {}


class TestBuildInstallSet:
    def test_peers_first_then_configs_at_latest(self):
        packages = build_install_set(
            {"eslint": "^8.2.0"}, ["eslint-config-airbnb"]
        )

        assert packages == [
            PackageSpec("eslint", "^8.2.0"),
            PackageSpec("eslint-config-airbnb", "latest"),
        ]
        assert [pkg.specifier for pkg in packages] == [
            "eslint@^8.2.0",
            "eslint-config-airbnb@latest",
        ]

    def test_unpinned_install_uses_bare_names(self):
        packages = build_install_set(
            {"eslint": "^8.2.0"}, ["eslint-config-xo"], pin_versions=False
        )

        assert [pkg.specifier for pkg in packages] == ["eslint", "eslint-config-xo"]

    def test_config_already_listed_as_peer_is_not_repeated(self):
        packages = build_install_set(
            {"eslint-config-standard": "^17.0.0"},
            ["eslint-config-standard", "eslint-config-standard-react"],
        )

        assert [pkg.name for pkg in packages] == [
            "eslint-config-standard",
            "eslint-config-standard-react",
        ]
