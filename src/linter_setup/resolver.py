"""Map the user's selection to the ESLint configuration packages to install."""

from typing import List

from loguru import logger

from .exceptions import ConfigurationError
from .models import StyleGuideDescriptor, UserSelection
from .styles import STYLE_GUIDES, config_package


def find_style(
    style: str, catalog: List[StyleGuideDescriptor] = None
) -> StyleGuideDescriptor:
    """Look up a style guide by identifier."""
    for descriptor in catalog or STYLE_GUIDES:
        if descriptor.value == style:
            return descriptor
    raise ConfigurationError(f"Unknown style guide: {style}")


def resolve_configs(
    selection: UserSelection, catalog: List[StyleGuideDescriptor] = None
) -> List[str]:
    """
    Resolve the ordered configuration package list for a selection.

    Without React the base style is used alone. With React the style's
    React variant is either appended after the base style or, when the
    variant is flagged ``replace``, used instead of it.

    Returns:
        One or two package names, e.g. ``["eslint-config-standard",
        "eslint-config-standard-react"]``.
    """
    descriptor = find_style(selection.style, catalog)

    styles = [descriptor.value]
    if selection.uses_react:
        if descriptor.react.replace:
            styles = [descriptor.react.name]
        else:
            styles.append(descriptor.react.name)

    configs = [config_package(style) for style in styles]
    logger.debug(f"Resolved {selection} to {configs}")
    return configs
