"""Configuration helpers shared by the project scaffolder and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PLACEHOLDER_TOKEN = "gotemplate"

RELEASE_CONFIG_NAME = "goreleaser.yaml"
HIDDEN_RELEASE_CONFIG_NAME = ".goreleaser.yaml"
MAKEFILE_NAME = "Makefile"

SELF_ENTRY_POINT = "./gotemplate.go"
GENERATED_ENTRY_POINT = "./cmd/main.go"
RELEASE_CONFIG_FLAG = " --config goreleaser.yaml"

CMD_DIR_NAME = "cmd"
ENTRY_POINT_NAME = "main.go"
IGNORE_FILE_NAME = ".gitignore"

ENTRY_POINT_CONTENT = "package main\n\nfunc main() {\n}\n"
IGNORE_FILE_CONTENT = ".DS_Store\ndist\n"

DIR_MODE = 0o755
FILE_MODE = 0o644


def package_declaration(name: str) -> str:
    """Return the Go package clause used for the generated stub file."""

    return f"package {name}\n"


@dataclass(slots=True)
class ProjectConfig:
    """Where and under which name a project is generated.

    Attributes
    ----------
    name:
        The project name exactly as supplied by the caller. It becomes the
        root directory name, the replacement for :data:`PLACEHOLDER_TOKEN` and
        the Go package identifier of the stub file.
    directory:
        The directory the project root is created in.
    """

    name: str
    directory: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_name(cls, name: str, *, directory: str | Path | None = None) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` for ``name``.

        The name is not normalised; only an empty string is rejected; anything
        else is left for the filesystem to accept or refuse.
        """

        if not name:
            raise ValueError("project name must not be empty")

        base = Path(directory) if directory is not None else Path.cwd()
        return cls(name=name, directory=base)

    @property
    def root(self) -> Path:
        return self.directory / self.name

    @property
    def package_file(self) -> Path:
        """Stub file holding the package clause, ``<name>/<name>.go``."""

        return self.root / f"{self.name}.go"

    @property
    def cmd_dir(self) -> Path:
        return self.root / CMD_DIR_NAME

    @property
    def entry_point(self) -> Path:
        return self.cmd_dir / ENTRY_POINT_NAME

    @property
    def ignore_file(self) -> Path:
        return self.root / IGNORE_FILE_NAME
