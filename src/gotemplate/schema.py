"""Value objects exchanged between the scaffolder, the committer and the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommitGroup(BaseModel):
    """Files staged together and committed with a single message."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    files: Tuple[str, ...] = Field(..., min_length=1, description="Paths passed to the add command.")
    message: str = Field(..., min_length=1, description="Commit message for the group.")

    @field_validator("files")
    @classmethod
    def _reject_blank_paths(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not path.strip() for path in value):
            raise ValueError("commit group paths must not be blank")
        return value


class GeneratedProject(BaseModel):
    """Outcome of a successful materialization."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Project name used for substitution.")
    root: Path = Field(..., description="Directory the project was created in.")
    files: Tuple[Path, ...] = Field(default=(), description="Written files, relative to root, in write order.")


__all__ = ["CommitGroup", "GeneratedProject"]
