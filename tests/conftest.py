from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gotemplate.errors import CommitError  # noqa: E402
from gotemplate.vcs import VersionControl  # noqa: E402


class RecordingVCS(VersionControl):
    """In-memory version control that records calls and can fail on demand."""

    def __init__(self, fail_on: tuple[str, str] | None = None) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.fail_on = fail_on

    def add(self, files: Sequence[str]) -> None:
        self.calls.append(("add", *files))
        if self.fail_on == ("add", files[0]):
            raise CommitError("add failed", command=("git", "add", *files), returncode=128)

    def commit(self, message: str) -> None:
        self.calls.append(("commit", message))
        if self.fail_on == ("commit", message):
            raise CommitError("commit failed", command=("git", "commit", "-m", message), returncode=1)


@pytest.fixture()
def recording_vcs() -> RecordingVCS:
    return RecordingVCS()
