"""Bookkeeping for paths excluded from distribution archives."""

from __future__ import annotations

import logging
from typing import Iterator

__all__ = ["ExportIgnoreList"]


LOGGER = logging.getLogger(__name__)


class ExportIgnoreList:
    """Ordered set of project-relative paths marked ``export-ignore``."""

    def __init__(self) -> None:
        self._entries: dict[str, None] = {}

    def register(self, path: str) -> None:
        """Record ``path``; registering the same path twice has no effect."""

        if path in self._entries:
            LOGGER.debug("export-ignore entry %s already registered", path)
            return
        LOGGER.debug("export-ignore %s", path)
        self._entries[path] = None

    @property
    def entries(self) -> tuple[str, ...]:
        """Return the registered paths in registration order."""

        return tuple(self._entries)

    def sorted(self) -> list[str]:
        """Return the registered paths sorted lexically."""

        return sorted(self._entries)

    def render(self, body: str) -> str:
        """Append one ``/<path> export-ignore`` line per entry to ``body``."""

        lines = [f"/{path} export-ignore" for path in self.sorted()]
        return body.rstrip("\n") + "".join(f"\n{line}" for line in lines) + "\n"

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
