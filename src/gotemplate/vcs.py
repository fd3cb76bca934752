"""Commit grouped template files into version control."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from .errors import CommitError, ErrorKind
from .schema import CommitGroup

__all__ = [
    "DEFAULT_COMMIT_GROUPS",
    "GitClient",
    "TemplateCommitter",
    "VersionControl",
]

LOGGER = logging.getLogger(__name__)


DEFAULT_COMMIT_GROUPS: tuple[CommitGroup, ...] = (
    CommitGroup(files=("Makefile",), message="Makefile"),
    CommitGroup(files=("README.md",), message="Project README"),
    CommitGroup(files=("go.mod", "go.sum"), message="Go modules"),
    CommitGroup(files=(".gitignore",), message="Git ignore paths"),
    CommitGroup(files=(".goreleaser.yaml",), message="Goreleaser configuration"),
)


class VersionControl(ABC):
    """Minimal version-control operations needed to commit template files."""

    @abstractmethod
    def add(self, files: Sequence[str]) -> None:
        """Stage ``files``; raise :class:`CommitError` on failure."""

    @abstractmethod
    def commit(self, message: str) -> None:
        """Commit the staged changes; raise :class:`CommitError` on failure."""


class GitClient(VersionControl):
    """Run ``git`` as a subprocess sharing this process's standard streams."""

    def __init__(self, directory: Path | str | None = None, *, executable: str = "git") -> None:
        self._directory = Path(directory) if directory is not None else None
        self._executable = executable

    @property
    def directory(self) -> Path | None:
        return self._directory

    def add(self, files: Sequence[str]) -> None:
        self._run("add", *files)

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def _run(self, *args: str) -> None:
        command = [self._executable, *args]
        LOGGER.debug("running %s", " ".join(command))
        try:
            subprocess.run(command, cwd=self._directory, check=True)
        except subprocess.CalledProcessError as exc:
            raise CommitError(
                f"{' '.join(command)} exited with status {exc.returncode}",
                command=command,
                returncode=exc.returncode,
            ) from exc
        except OSError as exc:
            raise CommitError(
                f"could not run {self._executable}: {exc}",
                command=command,
                kind=ErrorKind.IO_FAILURE,
            ) from exc


class TemplateCommitter:
    """Stage and commit each :class:`CommitGroup` in order, one commit per group.

    The first failing command stops the run. Commits already made are kept.
    """

    def __init__(
        self,
        vcs: VersionControl,
        groups: Sequence[CommitGroup] = DEFAULT_COMMIT_GROUPS,
    ) -> None:
        self.vcs = vcs
        self.groups = tuple(groups)

    def commit_all(self) -> tuple[CommitGroup, ...]:
        committed: list[CommitGroup] = []
        for group in self.groups:
            LOGGER.info("committing %s: %s", ", ".join(group.files), group.message)
            self.vcs.add(group.files)
            self.vcs.commit(group.message)
            committed.append(group)
        return tuple(committed)
