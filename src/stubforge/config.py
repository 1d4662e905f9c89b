"""Configuration helpers shared by the project generator and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import (
    DEFAULT_NAMESPACE,
    split_project_name,
    to_camel,
    to_lower,
    to_studly,
)

__all__ = [
    "CommandSettings",
    "FRAMEWORKS",
    "FrameworkProfile",
    "NameVariants",
    "SUPPORTED_LICENSES",
    "TestingFramework",
]


LOGGER = logging.getLogger(__name__)

SUPPORTED_LICENSES = ("mit", "apache-2.0", "gpl-2.0", "gpl-3.0")


class TestingFramework(str, Enum):
    """Testing frameworks a generated package can be set up for."""

    PHPUNIT = "phpunit"
    BEHAT = "behat"
    PHPSPEC = "phpspec"
    CODECEPTION = "codeception"


@dataclass(frozen=True, slots=True)
class FrameworkProfile:
    """What choosing a testing framework adds to a generated package.

    Attributes
    ----------
    kind:
        The framework this record describes.
    version:
        Composer version constraint written into ``composer.json``.
    writes_config_file:
        Whether a framework configuration file is generated. Only PHPUnit
        ships one at the moment; the other frameworks still need theirs.
    """

    kind: TestingFramework
    version: str
    writes_config_file: bool = False


FRAMEWORKS: Mapping[TestingFramework, FrameworkProfile] = {
    TestingFramework.PHPUNIT: FrameworkProfile(TestingFramework.PHPUNIT, "4.6.*", True),
    TestingFramework.BEHAT: FrameworkProfile(TestingFramework.BEHAT, "~3.0"),
    TestingFramework.PHPSPEC: FrameworkProfile(TestingFramework.PHPSPEC, "~2.0"),
    TestingFramework.CODECEPTION: FrameworkProfile(TestingFramework.CODECEPTION, "2.0.*"),
}


@dataclass(frozen=True, slots=True)
class NameVariants:
    """Derived spellings of a ``vendor/project`` name.

    Attributes
    ----------
    raw:
        The name exactly as provided by the user.
    vendor_lower, project_lower:
        Lower-case forms without separators, used for directories and
        Composer package names.
    vendor_studly, project_studly:
        Capitalised forms used for class names and namespaces.
    project_camel:
        Camel case form of the project, used for the generated test method.
    """

    raw: str
    vendor_lower: str
    vendor_studly: str
    project_lower: str
    project_studly: str
    project_camel: str

    @classmethod
    def from_project_name(cls, name: str) -> "NameVariants":
        """Split ``name`` and derive every case variant from the two segments."""

        vendor, project = split_project_name(name)
        return cls(
            raw=name,
            vendor_lower=to_lower(vendor),
            vendor_studly=to_studly(vendor),
            project_lower=to_lower(project),
            project_studly=to_studly(project),
            project_camel=to_camel(project),
        )

    def context(self) -> dict[str, str]:
        """Return the name tokens shared by most stubs."""

        return {
            "vendor_lower": self.vendor_lower,
            "vendor_upper": self.vendor_studly,
            "project_lower": self.project_lower,
            "project_upper": self.project_studly,
        }


class CommandSettings(BaseModel):
    """Choices made by the user for a single generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Package name in VENDOR/PROJECT form.")
    namespace: str = Field(DEFAULT_NAMESPACE, description="Namespace override for generated classes.")
    license: str = Field("mit", description="License key selecting the license stub.")
    testing_framework: str = Field(TestingFramework.PHPUNIT.value, description="Testing framework identifier.")
    with_git_init: bool = Field(False, description="Run 'git init' in the new project.")
    with_lint_config: bool = Field(False, description="Generate a PHP CS Fixer configuration file.")

    @field_validator("testing_framework", mode="before")
    @classmethod
    def fallback_to_phpunit(cls, value: Any) -> str:
        candidate = str(value or "").strip().lower()
        known = {framework.value for framework in TestingFramework}
        if candidate not in known:
            LOGGER.warning("unknown testing framework %r, using phpunit", value)
            return TestingFramework.PHPUNIT.value
        return candidate

    @property
    def framework(self) -> FrameworkProfile:
        """Return the :class:`FrameworkProfile` for the selected framework."""

        return FRAMEWORKS[TestingFramework(self.testing_framework)]
