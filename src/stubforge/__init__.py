"""Scaffolding for new PHP packages.

The package turns a ``vendor/project`` name into the spellings needed across
a package skeleton, fills a fixed set of stub files by literal token
substitution, and writes them out in order before optionally running
``composer install`` and ``git init``. It can be used programmatically through
:class:`ProjectGenerator` or via the command line interface.
"""

from __future__ import annotations

from .commands import CommandRunner, SubprocessCommandRunner
from .config import FRAMEWORKS, CommandSettings, FrameworkProfile, NameVariants, TestingFramework
from .errors import DirectoryCreateError, InvalidNameFormat, StubforgeError, UnknownLicense
from .exports import ExportIgnoreList
from .identity import GitIdentityProvider, Identity, IdentityProvider, StaticIdentityProvider
from .naming import build_namespace, split_project_name, to_camel, to_lower, to_studly
from .scaffold import GenerationRun, ProjectGenerator
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CommandRunner",
    "CommandSettings",
    "DirectoryCreateError",
    "ExportIgnoreList",
    "FRAMEWORKS",
    "FrameworkProfile",
    "GenerationRun",
    "GitIdentityProvider",
    "Identity",
    "IdentityProvider",
    "InvalidNameFormat",
    "NameVariants",
    "ProjectGenerator",
    "StaticIdentityProvider",
    "StubforgeError",
    "SubprocessCommandRunner",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TestingFramework",
    "UnknownLicense",
    "build_namespace",
    "split_project_name",
    "to_camel",
    "to_lower",
    "to_studly",
]

__version__ = "0.1.0"
