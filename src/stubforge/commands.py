"""Execution of external tools inside a generated project."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

__all__ = ["COMMAND_NOT_FOUND", "CommandRunner", "SubprocessCommandRunner"]


LOGGER = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


class CommandRunner(ABC):
    """Run a command and report its exit status."""

    @abstractmethod
    def run(self, cwd: Path, argv: Sequence[str]) -> int:
        """Execute ``argv`` with ``cwd`` as working directory."""


class SubprocessCommandRunner(CommandRunner):
    """Run commands with :func:`subprocess.run`, blocking until they exit."""

    def run(self, cwd: Path, argv: Sequence[str]) -> int:
        LOGGER.info("running %s in %s", " ".join(argv), cwd)
        try:
            result = subprocess.run(list(argv), cwd=cwd, check=False)
        except FileNotFoundError:
            LOGGER.warning("%s is not installed, skipping", argv[0])
            return COMMAND_NOT_FOUND
        if result.returncode != 0:
            LOGGER.warning("%s exited with status %s", " ".join(argv), result.returncode)
        return result.returncode
