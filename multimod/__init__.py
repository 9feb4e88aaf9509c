"""
multimod - Version metadata for repositories with many Go modules.

multimod ties together a versioning file (named module sets, each with a
version, plus excluded modules), the go.mod files found in the repository,
and the Git tag names derived from their locations.

Quick Start:
    import multimod

    repo_root = multimod.find_repo_root()
    versioning = multimod.ModuleVersioning.from_file(
        repo_root / "versions.yaml", repo_root
    )

    # Which tags does a release of a module set need?
    versioning.module_set_tags("stable-v1")
    # ['v1.2.0', 'trace/v1.2.0', 'sdk/metric/v1.2.0']

    # Lower level conversions
    tag_names = versioning.module_paths_to_tag_names(["go.opentelemetry.io/otel/trace"])
    multimod.combine_tags_with_version(tag_names, "v1.3.0")

    multimod.is_stable("v0.20.0")   # False

Domain Objects:
    ModuleSet - Modules released together under one version
    ModuleInfo - The set and version of a single module
    ModuleTagName - Repo root or a directory scoping a Git tag
    VersioningConfig - The parsed versioning file
"""

__version__ = "0.3.0"

from .domain import (
    ModuleSet,
    ModuleInfo,
    ModuleTagName,
    VersioningConfig,
    REPO_ROOT_TAG,
)
from .errors import (
    VersioningError,
    VersioningFileError,
    DuplicateModuleError,
    ExcludedModuleConflictError,
    DuplicateModulePathError,
    UnknownModuleError,
    UnknownSetError,
    PathOutsideRepoError,
    InvalidManifestPathError,
    TreeWalkError,
    RepoRootNotFoundError,
    ManifestReadWarning,
)
from .index import (
    excluded_modules,
    build_module_set_index,
    build_module_info_index,
    build_module_path_index,
    ModulePathScan,
)
from .tags import (
    paths_for,
    tag_name_for,
    tag_names_for,
    module_paths_to_tag_names,
    combine_tags_with_version,
)
from .semver import is_stable, SEMVER_REGEX
from .repo import find_repo_root, change_to_repo_root
from .versions_file import read_versioning_file
from .versioning import ModuleVersioning

__all__ = [
    "__version__",
    # Facade
    "ModuleVersioning",
    # Domain objects
    "ModuleSet",
    "ModuleInfo",
    "ModuleTagName",
    "VersioningConfig",
    "REPO_ROOT_TAG",
    # Errors
    "VersioningError",
    "VersioningFileError",
    "DuplicateModuleError",
    "ExcludedModuleConflictError",
    "DuplicateModulePathError",
    "UnknownModuleError",
    "UnknownSetError",
    "PathOutsideRepoError",
    "InvalidManifestPathError",
    "TreeWalkError",
    "RepoRootNotFoundError",
    "ManifestReadWarning",
    # Indices
    "excluded_modules",
    "build_module_set_index",
    "build_module_info_index",
    "build_module_path_index",
    "ModulePathScan",
    # Tag conversion
    "paths_for",
    "tag_name_for",
    "tag_names_for",
    "module_paths_to_tag_names",
    "combine_tags_with_version",
    # Versions
    "is_stable",
    "SEMVER_REGEX",
    # Repository
    "find_repo_root",
    "change_to_repo_root",
    "read_versioning_file",
]
