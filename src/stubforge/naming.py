"""String normalisation utilities used throughout the project."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .errors import InvalidNameFormat

if TYPE_CHECKING:
    from .config import CommandSettings, NameVariants

__all__ = [
    "DEFAULT_NAMESPACE",
    "NAME_SEPARATOR",
    "build_namespace",
    "split_project_name",
    "to_camel",
    "to_lower",
    "to_studly",
]


NAME_SEPARATOR = "/"
DEFAULT_NAMESPACE = "Vendor/Project"

_WORD_SEPARATORS = re.compile(r"[\s\-_]+")
_NAMESPACE_SEPARATORS = re.compile(r"[\\/]+")


def _words(value: str) -> list[str]:
    return [word for word in _WORD_SEPARATORS.split(value) if word]


def split_project_name(value: str) -> tuple[str, str]:
    """Split ``value`` into its vendor and project segments.

    Exactly one ``/`` must be present and each side must contain at least one
    word, not just whitespace or word separators. :class:`InvalidNameFormat`
    is raised otherwise.
    """

    if value.count(NAME_SEPARATOR) != 1:
        raise InvalidNameFormat(value)

    vendor, project = (part.strip() for part in value.split(NAME_SEPARATOR))
    if not _words(vendor) or not _words(project):
        raise InvalidNameFormat(value)

    return vendor, project


def to_lower(value: str) -> str:
    """Return ``value`` lower-cased with its word separators removed."""

    return "".join(_words(value)).lower()


def to_studly(value: str) -> str:
    """Return ``value`` with every word capitalised and joined together.

    Only the first character of each word is touched, so ``"acmeCorp"``
    becomes ``"AcmeCorp"`` rather than ``"Acmecorp"``.
    """

    return "".join(word[0].upper() + word[1:] for word in _words(value))


def to_camel(value: str) -> str:
    """Return the studly form of ``value`` with a lower-case first character."""

    studly = to_studly(value)
    return studly[:1].lower() + studly[1:]


def _is_placeholder(namespace: str, project_name: str) -> bool:
    if not namespace.strip():
        return True
    segments = [part for part in _NAMESPACE_SEPARATORS.split(namespace) if part]
    if segments == DEFAULT_NAMESPACE.split(NAME_SEPARATOR):
        return True
    return namespace == project_name


def build_namespace(
    variants: NameVariants,
    settings: CommandSettings,
    double_separator: bool = False,
) -> str:
    """Return the PHP namespace for the generated package.

    When the namespace from ``settings`` is still the ``Vendor/Project``
    placeholder, or simply repeats the project name, the namespace is derived
    from the studly vendor and project names. Any other value is kept as typed
    and only its separators are rewritten. ``double_separator`` selects the
    escaped ``\\\\`` form needed inside JSON string literals.
    """

    separator = "\\\\" if double_separator else "\\"
    namespace = settings.namespace

    if _is_placeholder(namespace, settings.project_name):
        return separator.join([variants.vendor_studly, variants.project_studly])

    segments = [part for part in _NAMESPACE_SEPARATORS.split(namespace.strip()) if part]
    return separator.join(segments)
