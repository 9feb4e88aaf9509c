"""
Error kinds raised while building or querying versioning metadata.

Every fatal error is a CommandError so the CLI can map it to an exit code,
and keeps the offending module, set names or path as attributes.
"""

from dataclasses import dataclass

from .exit_codes import CommandError, CONFIG_ERROR, DATA_ERROR, NOT_FOUND


class VersioningError(CommandError):
    """Base class for all versioning metadata errors."""


class VersioningFileError(VersioningError):
    """The versioning file could not be read or has an invalid structure."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"invalid versioning file {path}: {reason}", CONFIG_ERROR)
        self.path = path
        self.reason = reason


class DuplicateModuleError(VersioningError):
    """A module is listed in more than one module set."""
    def __init__(self, module: str, first_set: str, second_set: str):
        super().__init__(
            f"module {module} exists more than once: "
            f"in sets {first_set} and {second_set}",
            DATA_ERROR,
        )
        self.module = module
        self.first_set = first_set
        self.second_set = second_set


class ExcludedModuleConflictError(VersioningError):
    """A module is both listed in a module set and excluded."""
    def __init__(self, module: str, set_name: str):
        super().__init__(
            f"module {module} in set {set_name} is an excluded module "
            f"and should not be versioned",
            DATA_ERROR,
        )
        self.module = module
        self.set_name = set_name


class DuplicateModulePathError(VersioningError):
    """Two manifests in the repository declare the same module."""
    def __init__(self, module: str, first_path: str, second_path: str):
        super().__init__(
            f"module {module} is declared by both {first_path} and {second_path}",
            DATA_ERROR,
        )
        self.module = module
        self.first_path = first_path
        self.second_path = second_path


class UnknownModuleError(VersioningError):
    """A module has no manifest in the module path index."""
    def __init__(self, module: str):
        super().__init__(f"could not find module {module} in path map", NOT_FOUND)
        self.module = module


class UnknownSetError(VersioningError):
    """A module set name is not declared in the versioning file."""
    def __init__(self, set_name: str):
        super().__init__(
            f"could not find module set {set_name} in versioning file", NOT_FOUND
        )
        self.set_name = set_name


class PathOutsideRepoError(VersioningError):
    """A manifest path does not lie under the repository root."""
    def __init__(self, path: str, repo_root: str):
        super().__init__(
            f"manifest path {path} not contained in repo with root {repo_root}",
            DATA_ERROR,
        )
        self.path = path
        self.repo_root = repo_root


class InvalidManifestPathError(VersioningError):
    """A path does not end with the canonical manifest file name."""
    def __init__(self, path: str, manifest_filename: str):
        super().__init__(
            f"manifest path {path} does not end with '{manifest_filename}'",
            DATA_ERROR,
        )
        self.path = path
        self.manifest_filename = manifest_filename


class TreeWalkError(VersioningError):
    """The repository tree could not be enumerated at all."""
    def __init__(self, repo_root: str, reason: str):
        super().__init__(f"unable to walk repository at {repo_root}: {reason}", NOT_FOUND)
        self.repo_root = repo_root
        self.reason = reason


class RepoRootNotFoundError(VersioningError):
    """No enclosing git repository was found."""
    def __init__(self, start: str):
        super().__init__(
            f"unable to find git repository enclosing working dir {start}", NOT_FOUND
        )
        self.start = start


class ManifestFormatError(ValueError):
    """A manifest has no module directive."""


@dataclass(frozen=True)
class ManifestReadWarning:
    """A manifest or directory skipped during the repository walk."""
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"
