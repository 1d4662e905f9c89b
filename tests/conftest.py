from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from stubforge.commands import CommandRunner  # noqa: E402
from stubforge.identity import Identity, StaticIdentityProvider  # noqa: E402
from stubforge.scaffold import ProjectGenerator  # noqa: E402

TODAY = date(2024, 3, 9)
AUTHOR = Identity(name="Jane Doe", email="jane@example.com")


class RecordingRunner(CommandRunner):
    """Command runner that records calls instead of executing them."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[tuple[Path, list[str]]] = []

    def run(self, cwd: Path, argv: Sequence[str]) -> int:
        self.calls.append((cwd, list(argv)))
        return self.exit_code


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def generator(runner: RecordingRunner) -> ProjectGenerator:
    """Generator with a fixed author, a fixed date and no external commands."""

    return ProjectGenerator(
        identity=StaticIdentityProvider(AUTHOR),
        runner=runner,
        clock=lambda: TODAY,
    )
