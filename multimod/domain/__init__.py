"""
Domain layer for multimod.

Contains pure domain objects with no I/O or side effects:
- ModuleSet: Modules released together under one version
- ModuleInfo: The set and version a single module belongs to
- ModuleTagName: Root or named directory used to scope a Git tag
- VersioningConfig: The parsed versioning file
"""

from .module import (
    ModulePath,
    ModuleFilePath,
    ModuleSet,
    ModuleInfo,
    ModuleTagName,
    VersioningConfig,
    REPO_ROOT_TAG,
)

__all__ = [
    'ModulePath',
    'ModuleFilePath',
    'ModuleSet',
    'ModuleInfo',
    'ModuleTagName',
    'VersioningConfig',
    'REPO_ROOT_TAG',
]
