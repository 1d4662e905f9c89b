"""Exception types raised while generating a project."""

from __future__ import annotations

from pathlib import Path


class StubforgeError(RuntimeError):
    """Base class for every error the generator raises on purpose."""


class InvalidNameFormat(StubforgeError):
    """Raised when a project name is not of the ``vendor/project`` form."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"invalid project name '{value}'. Expected VENDOR/PROJECT syntax."
        )
        self.value = value


class DirectoryCreateError(StubforgeError):
    """Raised when a project directory already exists or cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not create directory {path}: {reason}")
        self.path = path


class UnknownLicense(StubforgeError):
    """Raised when no license stub matches the requested license."""

    def __init__(self, license: str) -> None:
        super().__init__(f"unknown license '{license}'")
        self.license = license


__all__ = [
    "DirectoryCreateError",
    "InvalidNameFormat",
    "StubforgeError",
    "UnknownLicense",
]
