"""Lookup of the author identity written into licenses and manifests."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

__all__ = [
    "DEFAULT_IDENTITY",
    "GitIdentityProvider",
    "Identity",
    "IdentityProvider",
    "StaticIdentityProvider",
    "parse_git_user",
]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Identity:
    """Name and email of the package author."""

    name: str
    email: str


DEFAULT_IDENTITY = Identity(name="Some name", email="some@email.com")


class IdentityProvider(ABC):
    """Source of the :class:`Identity` used for generated files."""

    @abstractmethod
    def current_user(self) -> Identity:
        """Return the identity of the current user."""


class StaticIdentityProvider(IdentityProvider):
    """Always return the same identity."""

    def __init__(self, identity: Identity = DEFAULT_IDENTITY) -> None:
        self._identity = identity

    def current_user(self) -> Identity:
        return self._identity


class GitIdentityProvider(IdentityProvider):
    """Read ``user.name`` and ``user.email`` from the git configuration.

    Any failure (git missing, no configured user, non-zero exit) falls back to
    :data:`DEFAULT_IDENTITY` for the values that could not be read.
    """

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    def current_user(self) -> Identity:
        try:
            result = subprocess.run(
                [self._executable, "config", "--get-regexp", r"^user\."],
                capture_output=True,
                check=True,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            LOGGER.warning("could not read git user, using defaults: %s", exc)
            return DEFAULT_IDENTITY
        return parse_git_user(result.stdout)


def parse_git_user(output: str) -> Identity:
    """Build an :class:`Identity` from ``git config --get-regexp`` output."""

    values: dict[str, str] = {}
    for line in output.splitlines():
        key, _, value = line.strip().partition(" ")
        if not key.startswith("user.") or not value:
            continue
        values[key[len("user."):]] = value.strip()

    return replace(
        DEFAULT_IDENTITY,
        **{field: values[field] for field in ("name", "email") if field in values},
    )
