"""Generate Go project skeletons from a bundled template.

The package ships a small set of template files in which the placeholder
``gotemplate`` stands for the project name. :class:`ProjectScaffolder`
copies them into a new directory with the name substituted, and
:class:`TemplateCommitter` commits the template's own files in groups.
"""

from __future__ import annotations

from .bundle import BundleEntry, TemplateBundle, load_bundle
from .config import PLACEHOLDER_TOKEN, ProjectConfig
from .errors import BundleError, CommitError, ErrorKind, GotemplateError, MaterializeError
from .scaffold import ProjectScaffolder
from .schema import CommitGroup, GeneratedProject
from .template import TemplateRenderer
from .vcs import DEFAULT_COMMIT_GROUPS, GitClient, TemplateCommitter, VersionControl

__all__ = [
    "BundleEntry",
    "BundleError",
    "CommitError",
    "CommitGroup",
    "DEFAULT_COMMIT_GROUPS",
    "ErrorKind",
    "GeneratedProject",
    "GitClient",
    "GotemplateError",
    "MaterializeError",
    "PLACEHOLDER_TOKEN",
    "ProjectConfig",
    "ProjectScaffolder",
    "TemplateBundle",
    "TemplateCommitter",
    "TemplateRenderer",
    "VersionControl",
    "load_bundle",
]

__version__ = "0.1.0"
