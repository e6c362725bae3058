"""Tests for mapping selections to configuration packages."""

import pytest

from src.linter_setup.exceptions import ConfigurationError
from src.linter_setup.models import ReactVariant, StyleGuideDescriptor, UserSelection
from src.linter_setup.resolver import find_style, resolve_configs
from src.linter_setup.styles import STYLE_GUIDES


@pytest.mark.parametrize("style", [s.value for s in STYLE_GUIDES])
@pytest.mark.parametrize("uses_react", [True, False])
def test_resolved_list_has_one_or_two_entries(style, uses_react):
    configs = resolve_configs(UserSelection(style, uses_react))

    if uses_react:
        assert 1 <= len(configs) <= 2
    else:
        assert configs == [f"eslint-config-{style}"]
    assert all(name.startswith("eslint-config-") for name in configs)


def test_airbnb_without_react():
    assert resolve_configs(UserSelection("airbnb", False)) == ["eslint-config-airbnb"]


def test_airbnb_react_variant_replaces_base():
    configs = resolve_configs(UserSelection("airbnb", True))

    assert configs == ["eslint-config-airbnb-react"]
    assert "eslint-config-airbnb" not in configs


def test_react_variant_is_appended_after_base():
    configs = resolve_configs(UserSelection("standard", True))

    assert configs == ["eslint-config-standard", "eslint-config-standard-react"]


def test_custom_catalog():
    catalog = [
        StyleGuideDescriptor("house", "House rules", ReactVariant("house-react", True))
    ]

    assert resolve_configs(UserSelection("house", True), catalog) == [
        "eslint-config-house-react"
    ]


def test_unknown_style_raises_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        find_style("google")
    assert "google" in str(exc.value)
    assert str(exc.value).startswith("Configuration Error:")
