"""
Module domain objects for multimod.

A repository holds many Go modules. Modules are grouped into named module
sets that share one release version:

    module-sets:
      stable-v1:
        version: v1.2.0
        modules:
          - go.opentelemetry.io/otel
          - go.opentelemetry.io/otel/trace
    excluded-modules:
      - go.opentelemetry.io/otel/internal/tools

These objects are immutable value objects with no I/O.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Import path of a module, e.g. "go.opentelemetry.io/otel/sdk/metric"
ModulePath = str

# Path to a module's go.mod file, including the "go.mod" base name
ModuleFilePath = str


@dataclass(frozen=True)
class ModuleSet:
    """Version shared by every module of a set."""

    version: str
    modules: Tuple[ModulePath, ...] = ()

    def to_dict(self) -> dict:
        return {'version': self.version, 'modules': list(self.modules)}


@dataclass(frozen=True)
class ModuleInfo:
    """Reverse view of set membership: which set a module is in, at what version."""

    set_name: str
    version: str

    def to_dict(self) -> dict:
        return {'module_set': self.set_name, 'version': self.version}


@dataclass(frozen=True)
class ModuleTagName:
    """
    Directory of a go.mod file relative to the repository root, used for Git tagging.

    The manifest at the repository root has no directory and is tagged with
    the bare version; every other module is tagged "<path>/<version>".

    Examples:
        ModuleTagName("sdk/metric").full_tag("v1.2.3")  -> "sdk/metric/v1.2.3"
        ModuleTagName.root().full_tag("v1.2.3")         -> "v1.2.3"

    Attributes:
        path: Relative directory with "/" separators, or None for the repo root
    """

    path: Optional[str] = None

    @classmethod
    def root(cls) -> 'ModuleTagName':
        return cls(path=None)

    @property
    def is_root(self) -> bool:
        return self.path is None

    def full_tag(self, version: str) -> str:
        """Combine this tag name with a version into a full Git tag."""
        if self.is_root:
            return version
        return f"{self.path}/{version}"

    def __str__(self) -> str:
        return '<repo root>' if self.is_root else self.path


REPO_ROOT_TAG = ModuleTagName.root()


@dataclass(frozen=True)
class VersioningConfig:
    """
    Parsed versioning file.

    Attributes:
        module_sets: Module set name -> ModuleSet, in declaration order
        excluded_modules: Modules that are never versioned or tagged
    """

    module_sets: Mapping[str, ModuleSet] = field(default_factory=dict)
    excluded_modules: Tuple[ModulePath, ...] = ()

    def __post_init__(self):
        # Freeze the caller's dict so the config is never mutated after parsing
        object.__setattr__(self, 'module_sets', MappingProxyType(dict(self.module_sets)))
        object.__setattr__(self, 'excluded_modules', tuple(self.excluded_modules))

    def __eq__(self, other):
        if not isinstance(other, VersioningConfig):
            return NotImplemented
        return (dict(self.module_sets) == dict(other.module_sets)
                and self.excluded_modules == other.excluded_modules)

    def __hash__(self):
        return hash((tuple(self.module_sets.items()), self.excluded_modules))
