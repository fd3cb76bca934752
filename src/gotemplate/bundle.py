"""Read-only bundle of template files shipped with the package."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from types import MappingProxyType

from .errors import BundleError

__all__ = ["BundleEntry", "TemplateBundle", "load_bundle"]

ROOT = "."
TEMPLATE_RESOURCE_DIR = "templates"


@dataclass(frozen=True, slots=True)
class BundleEntry:
    path: str
    is_dir: bool


def _validate_path(path: str) -> str:
    if not path or path.startswith("/"):
        raise BundleError(f"bundle path must be relative: {path!r}")
    segments = path.split("/")
    if any(segment in ("", ".", "..") for segment in segments):
        raise BundleError(f"bundle path escapes or is not normalised: {path!r}")
    return path


class TemplateBundle(Mapping[str, bytes]):
    """Immutable mapping of relative POSIX paths to file contents.

    Directories are implied by the file paths. The bundle root is the
    implicit directory ``"."``.
    """

    def __init__(self, files: Mapping[str, bytes]) -> None:
        validated = {_validate_path(path): bytes(data) for path, data in files.items()}
        directories: set[str] = set()
        for path in validated:
            segments = path.split("/")
            for depth in range(1, len(segments)):
                directories.add("/".join(segments[:depth]))
        clashes = directories.intersection(validated)
        if clashes:
            raise BundleError(f"bundle paths used as both file and directory: {sorted(clashes)}")

        self._files = MappingProxyType(validated)
        self._directories = frozenset(directories)

    def __getitem__(self, path: str) -> bytes:
        return self._files[path]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._files))

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"TemplateBundle({sorted(self._files)!r})"

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError as exc:
            raise BundleError(f"no such template file: {path}") from exc

    def directories(self) -> frozenset[str]:
        """Return every directory implied by the bundle's file paths."""

        return self._directories

    def walk(self) -> Iterator[BundleEntry]:
        """Yield the root and every entry depth-first in lexical path order."""

        children: dict[str, list[str]] = {ROOT: []}
        for path in sorted(self._directories | set(self._files)):
            parent, _, _ = path.rpartition("/")
            children.setdefault(parent or ROOT, []).append(path)

        def visit(path: str) -> Iterator[BundleEntry]:
            is_dir = path == ROOT or path in self._directories
            yield BundleEntry(path=path, is_dir=is_dir)
            if is_dir:
                for child in children.get(path, []):
                    yield from visit(child)

        yield from visit(ROOT)


def _collect(node: Traversable, prefix: str, files: dict[str, bytes]) -> None:
    for entry in node.iterdir():
        relative = f"{prefix}{entry.name}"
        if entry.is_dir():
            _collect(entry, f"{relative}/", files)
        else:
            files[relative] = entry.read_bytes()


@lru_cache(maxsize=1)
def load_bundle() -> TemplateBundle:
    """Return the template bundle packaged under ``gotemplate/templates``."""

    files: dict[str, bytes] = {}
    _collect(resources.files(__package__).joinpath(TEMPLATE_RESOURCE_DIR), "", files)
    if not files:
        raise BundleError("packaged template bundle is empty")
    return TemplateBundle(files)
