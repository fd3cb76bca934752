"""Literal placeholder substitution for template paths and contents."""

from __future__ import annotations

from dataclasses import dataclass
from posixpath import basename

from .config import (
    GENERATED_ENTRY_POINT,
    HIDDEN_RELEASE_CONFIG_NAME,
    MAKEFILE_NAME,
    PLACEHOLDER_TOKEN,
    RELEASE_CONFIG_FLAG,
    RELEASE_CONFIG_NAME,
    SELF_ENTRY_POINT,
)

__all__ = ["TemplateRenderer"]


@dataclass(frozen=True, slots=True)
class TemplateRenderer:
    """Replace the placeholder token with a project name.

    This is plain substring replacement, not a template language: every
    occurrence of ``token`` is replaced and there is no escaping.
    """

    project_name: str
    token: str = PLACEHOLDER_TOKEN

    def substitute(self, text: str) -> str:
        return text.replace(self.token, self.project_name)

    def destination_path(self, bundle_path: str) -> str:
        """Map a bundle path onto its path relative to the project root.

        Each segment is substituted and a release config stored without its
        leading dot is renamed to the hidden name.
        """

        if bundle_path == ".":
            return bundle_path

        segments = [self.substitute(segment) for segment in bundle_path.split("/")]
        if segments[-1] == RELEASE_CONFIG_NAME:
            segments[-1] = HIDDEN_RELEASE_CONFIG_NAME
        return "/".join(segments)

    def render_content(self, destination_path: str, data: bytes) -> bytes:
        """Return the output bytes for a file written to ``destination_path``.

        Replacement works on the raw bytes, so assets need not be valid text.
        """

        token = self.token.encode("utf-8")
        replacement = self.project_name.encode("utf-8", "surrogateescape")
        name = basename(destination_path)

        if name == HIDDEN_RELEASE_CONFIG_NAME:
            # The self reference contains the token, so it must be swapped first.
            data = data.replace(SELF_ENTRY_POINT.encode("utf-8"), GENERATED_ENTRY_POINT.encode("utf-8"))
            return data.replace(token, replacement)

        data = data.replace(token, replacement)
        if name == MAKEFILE_NAME:
            data = data.replace(RELEASE_CONFIG_FLAG.encode("utf-8"), b"")
        return data
