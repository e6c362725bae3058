"""Built-in style guide catalog."""

from typing import List

from .models import ReactVariant, StyleGuideDescriptor

CONFIG_PREFIX = "eslint-config-"

STYLE_GUIDES: List[StyleGuideDescriptor] = [
    StyleGuideDescriptor(
        value="airbnb",
        name="Airbnb (https://github.com/airbnb/javascript)",
        react=ReactVariant(name="airbnb-react", replace=True),
    ),
    StyleGuideDescriptor(
        value="standard",
        name="Standard (https://github.com/standard/standard)",
        react=ReactVariant(name="standard-react", replace=False),
    ),
    StyleGuideDescriptor(
        value="semistandard",
        name="Semistandard (https://github.com/standard/semistandard)",
        react=ReactVariant(name="standard-react", replace=False),
    ),
    StyleGuideDescriptor(
        value="xo",
        name="XO (https://github.com/xojs/eslint-config-xo)",
        react=ReactVariant(name="xo-react", replace=False),
    ),
]


def style_values(catalog: List[StyleGuideDescriptor] = None) -> List[str]:
    """Get the identifiers offered by the style prompt."""
    return [style.value for style in (catalog or STYLE_GUIDES)]


def config_package(suffix: str) -> str:
    return f"{CONFIG_PREFIX}{suffix}"
