"""Data models shared by the linter setup stages."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ReactVariant:
    """How a style guide changes when the project uses React."""

    # Package suffix, installed as eslint-config-<name>
    name: str
    # True: the React variant replaces the base style instead of extending it
    replace: bool = False


@dataclass(frozen=True)
class StyleGuideDescriptor:
    """Built-in catalog entry for a style guide."""

    value: str
    name: str
    react: ReactVariant


@dataclass(frozen=True)
class UserSelection:
    style: str
    uses_react: bool


@dataclass(frozen=True)
class PackageSpec:
    """A single entry handed to the package manager."""

    name: str
    version: Optional[str] = "latest"

    @property
    def specifier(self) -> str:
        if not self.version:
            return self.name
        return f"{self.name}@{self.version}"


class MergePolicy(Enum):
    """Which config wins when two declare the same peer dependency."""

    FIRST_WINS = "first"
    LAST_WINS = "last"
