"""Literal token substitution for stub files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "find_tokens",
]


_TOKEN_PATTERN = re.compile(r"{(?P<token>[a-z][a-z0-9_]*)}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer is asked to fail on an unresolved token."""


@dataclass(slots=True)
class TemplateRenderer:
    """Replace ``{token}`` placeholders with plain string values.

    Substitution happens in a single pass: inserted values are never scanned
    again, so a value that itself looks like a token is written verbatim.
    """

    encoding: str = "utf-8"

    def render_string(
        self,
        template: str,
        tokens: Mapping[str, object],
        *,
        missing: str = "keep",
    ) -> str:
        """Render ``template`` using ``tokens``.

        Parameters
        ----------
        template:
            The stub text to evaluate.
        tokens:
            Mapping of token names (without braces) to replacement values.
            Entries with no matching token are ignored.
        missing:
            Controls what happens to a token absent from ``tokens``. The
            supported policies are ``"keep"`` (leave the token in place),
            ``"empty"`` (remove it) and ``"error"`` (raise
            :class:`TemplateRenderingError`).
        """

        if missing not in {"keep", "empty", "error"}:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            key = match.group("token")
            if key in tokens:
                return str(tokens[key])
            if missing == "keep":
                return match.group(0)
            if missing == "empty":
                return ""
            raise TemplateRenderingError(f"missing value for '{key}'")

        return _TOKEN_PATTERN.sub(substitute, template)

    def render_file(
        self,
        template_path: str | Path,
        tokens: Mapping[str, object] | None = None,
        *,
        target: str | Path | None = None,
        missing: str = "keep",
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_text(encoding=self.encoding)
        rendered = self.render_string(text, tokens or {}, missing=missing)

        if target is not None:
            Path(target).write_text(rendered, encoding=self.encoding)

        return rendered


def find_tokens(text: str) -> list[str]:
    """Return the names of every ``{token}`` left in ``text``, in order."""

    return [match.group("token") for match in _TOKEN_PATTERN.finditer(text)]
