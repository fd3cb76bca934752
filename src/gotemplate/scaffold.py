"""Project scaffolding from the packaged template bundle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .bundle import TemplateBundle, load_bundle
from .config import (
    DIR_MODE,
    ENTRY_POINT_CONTENT,
    FILE_MODE,
    IGNORE_FILE_CONTENT,
    ProjectConfig,
    package_declaration,
)
from .errors import BundleError, MaterializeError
from .schema import GeneratedProject
from .template import TemplateRenderer

__all__ = ["ProjectScaffolder"]

LOGGER = logging.getLogger(__name__)


def _ensure_directory(path: Path) -> None:
    path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)


def _write_file(path: Path, data: bytes) -> None:
    path.write_bytes(data)
    path.chmod(FILE_MODE)


@dataclass(slots=True)
class ProjectScaffolder:
    """Materialize a Go project from a :class:`TemplateBundle`.

    Generation is best effort: when a step fails the files written so far are
    left on disk and the error is raised as :class:`MaterializeError`.
    """

    bundle: TemplateBundle = field(default_factory=load_bundle)

    def create(self, config: ProjectConfig) -> GeneratedProject:
        """Create the project described by ``config``.

        The root directory must not exist yet; a second run for the same
        name fails instead of merging into the existing tree.
        """

        root = config.root
        written: list[Path] = []

        try:
            root.mkdir(mode=DIR_MODE)
        except (OSError, ValueError) as exc:
            raise MaterializeError("creating project directory", exc) from exc
        LOGGER.info("created project directory %s", root)

        try:
            written.extend(self._copy_bundle(config))
        except (OSError, ValueError, BundleError) as exc:
            raise MaterializeError("copying template files", exc) from exc

        package_file = config.package_file
        try:
            _write_file(package_file, package_declaration(config.name).encode("utf-8", "surrogateescape"))
        except (OSError, ValueError) as exc:
            raise MaterializeError(f"writing {package_file.name}", exc) from exc
        written.append(package_file)

        try:
            _ensure_directory(config.cmd_dir)
        except (OSError, ValueError) as exc:
            raise MaterializeError("creating cmd directory", exc) from exc

        try:
            _write_file(config.entry_point, ENTRY_POINT_CONTENT.encode("utf-8"))
        except (OSError, ValueError) as exc:
            raise MaterializeError("writing cmd/main.go", exc) from exc
        written.append(config.entry_point)

        try:
            _write_file(config.ignore_file, IGNORE_FILE_CONTENT.encode("utf-8"))
        except (OSError, ValueError) as exc:
            raise MaterializeError(f"writing {config.ignore_file.name}", exc) from exc
        written.append(config.ignore_file)

        LOGGER.info("wrote %d files for project %s", len(written), config.name)
        return GeneratedProject(
            name=config.name,
            root=root,
            files=tuple(path.relative_to(root) for path in written),
        )

    def _copy_bundle(self, config: ProjectConfig) -> list[Path]:
        renderer = TemplateRenderer(config.name)
        written: list[Path] = []

        for entry in self.bundle.walk():
            relative = renderer.destination_path(entry.path)
            destination = config.root.joinpath(*PurePosixPath(relative).parts)

            if entry.is_dir:
                _ensure_directory(destination)
                continue

            content = renderer.render_content(relative, self.bundle.read(entry.path))
            _write_file(destination, content)
            LOGGER.debug("rendered %s -> %s", entry.path, destination)
            written.append(destination)

        return written
