"""
Index builders for module versioning.

Three indices are derived once per invocation:

- module set index:  set name    -> ModuleSet   (as declared)
- module info index: module path -> ModuleInfo  (reverse of the set index)
- module path index: module path -> go.mod path (found by walking the repo)

Excluded modules never appear in any index.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from .domain import ModuleFilePath, ModuleInfo, ModulePath, ModuleSet, VersioningConfig
from .errors import (
    DuplicateModuleError,
    DuplicateModulePathError,
    ExcludedModuleConflictError,
    ManifestFormatError,
    ManifestReadWarning,
    TreeWalkError,
)
from .manifest import MANIFEST_FILENAME, module_path

logger = logging.getLogger(__name__)

DEFAULT_SKIP_DIRS = ('.git',)


def excluded_modules(config: VersioningConfig) -> FrozenSet[ModulePath]:
    """Return the excluded modules of a config as a set."""
    return frozenset(config.excluded_modules)


def build_module_set_index(config: VersioningConfig) -> Mapping[str, ModuleSet]:
    """Return the module sets keyed by name, read-only."""
    return MappingProxyType(dict(config.module_sets))


def build_module_info_index(config: VersioningConfig) -> Mapping[ModulePath, ModuleInfo]:
    """
    Reverse the module sets into a module path -> ModuleInfo map.

    Sets and their modules are visited in declaration order, so the first
    conflicting entry is the one reported.

    Raises:
        DuplicateModuleError: If a module is listed in two sets
        ExcludedModuleConflictError: If a listed module is also excluded
    """
    excluded = excluded_modules(config)
    mod_map: Dict[ModulePath, ModuleInfo] = {}

    for set_name, module_set in config.module_sets.items():
        for mod_path in module_set.modules:
            if mod_path in mod_map:
                raise DuplicateModuleError(mod_path, mod_map[mod_path].set_name, set_name)
            if mod_path in excluded:
                raise ExcludedModuleConflictError(mod_path, set_name)
            mod_map[mod_path] = ModuleInfo(set_name=set_name, version=module_set.version)

    logger.debug(f"Built module info index with {len(mod_map)} modules")
    return MappingProxyType(mod_map)


@dataclass(frozen=True)
class ModulePathScan:
    """
    Result of walking a repository for go.mod files.

    Attributes:
        paths: Module path -> go.mod file path
        warnings: Files and directories skipped during the walk
    """

    paths: Mapping[ModulePath, ModuleFilePath] = field(default_factory=dict)
    warnings: Tuple[ManifestReadWarning, ...] = ()


def read_manifest(file_path: str) -> bytes:
    with open(file_path, 'rb') as f:
        return f.read()


def iter_manifest_files(
    root: str,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> Tuple[List[str], List[ManifestReadWarning]]:
    """
    List every go.mod file under root, depth first in sorted name order.

    Returns:
        Tuple of (manifest file paths, warnings for unreadable subdirectories)

    Raises:
        TreeWalkError: If root itself cannot be enumerated
    """
    skip = set(skip_dirs)
    manifests: List[str] = []
    warnings: List[ManifestReadWarning] = []

    try:
        with os.scandir(root) as it:
            root_entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise TreeWalkError(root, str(e)) from e

    stack: List[List[os.DirEntry]] = [root_entries]
    while stack:
        entries = stack.pop()
        subdirs = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    if entry.name not in skip:
                        subdirs.append(entry)
                elif entry.name == MANIFEST_FILENAME and entry.is_file():
                    manifests.append(entry.path)
            except OSError as e:
                logger.warning(f"File could not be read during walk: {entry.path}: {e}")
                warnings.append(ManifestReadWarning(entry.path, str(e)))

        children = []
        for subdir in subdirs:
            try:
                with os.scandir(subdir.path) as it:
                    children.append(sorted(it, key=lambda e: e.name))
            except OSError as e:
                logger.warning(f"Directory could not be read during walk: {subdir.path}: {e}")
                warnings.append(ManifestReadWarning(subdir.path, str(e)))
        # Reversed so the first subdirectory is walked next
        stack.extend(reversed(children))

    return manifests, warnings


def build_module_path_index(
    config: VersioningConfig,
    repo_root: Union[str, Path],
    allow_duplicates: bool = False,
    skip_dirs: Optional[Iterable[str]] = None,
) -> ModulePathScan:
    """
    Map every non-excluded module in the repository to its go.mod file.

    Unreadable or malformed manifests are skipped with a warning; the walk
    continues.

    Args:
        config: Versioning config (for exclusions)
        repo_root: Root directory of the repository
        allow_duplicates: Let a later go.mod override an earlier one declaring
            the same module instead of failing
        skip_dirs: Directory names not descended into (default: .git)

    Raises:
        TreeWalkError: If the repository root cannot be enumerated
        DuplicateModulePathError: If two manifests declare the same module
            and duplicates are not allowed
    """
    root = os.fspath(repo_root)
    excluded = excluded_modules(config)
    manifests, warnings = iter_manifest_files(
        root, DEFAULT_SKIP_DIRS if skip_dirs is None else skip_dirs
    )

    mod_path_map: Dict[ModulePath, ModuleFilePath] = {}
    for file_path in manifests:
        try:
            mod_path = module_path(read_manifest(file_path))
        except (OSError, ManifestFormatError) as e:
            logger.warning(f"Skipping manifest {file_path}: {e}")
            warnings.append(ManifestReadWarning(file_path, str(e)))
            continue

        if mod_path in excluded:
            logger.debug(f"Skipping excluded module {mod_path} at {file_path}")
            continue

        if mod_path in mod_path_map:
            if not allow_duplicates:
                raise DuplicateModulePathError(mod_path, mod_path_map[mod_path], file_path)
            logger.warning(
                f"Module {mod_path} declared by both {mod_path_map[mod_path]} "
                f"and {file_path}; using {file_path}"
            )
        mod_path_map[mod_path] = file_path

    logger.debug(f"Found {len(mod_path_map)} modules under {root}")
    return ModulePathScan(paths=MappingProxyType(mod_path_map), warnings=tuple(warnings))
