"""
Conversion between module paths, go.mod file paths and Git tag names.

    go.opentelemetry.io/otel/sdk/metric       module path
        -> /repo/sdk/metric/go.mod            go.mod file path (path index)
        -> sdk/metric                         tag name (relative to /repo)
        -> sdk/metric/v0.20.0                 full tag (with version)

The go.mod at the repository root maps to the root tag name, whose full
tag is the bare version.
"""

import os
from pathlib import Path
from typing import Iterable, List, Mapping, Union

from .domain import ModuleFilePath, ModulePath, ModuleTagName, REPO_ROOT_TAG
from .errors import InvalidManifestPathError, PathOutsideRepoError, UnknownModuleError
from .manifest import MANIFEST_FILENAME


def paths_for(
    mod_paths: Iterable[ModulePath],
    mod_path_map: Mapping[ModulePath, ModuleFilePath],
) -> List[ModuleFilePath]:
    """
    Look up the go.mod file path of each module.

    Raises:
        UnknownModuleError: For the first module missing from the map
    """
    file_paths = []
    for mod_path in mod_paths:
        if mod_path not in mod_path_map:
            raise UnknownModuleError(mod_path)
        file_paths.append(mod_path_map[mod_path])
    return file_paths


def _root_prefix(repo_root: Union[str, Path]) -> str:
    root = os.fspath(repo_root)
    if root != os.sep:
        root = root.rstrip(os.sep)
    return root if root.endswith(os.sep) else root + os.sep


def tag_name_for(mod_file_path: ModuleFilePath, repo_root: Union[str, Path]) -> ModuleTagName:
    """
    Return the tag name of a go.mod file by removing the repo root prefix.

    Args:
        mod_file_path: Path of a go.mod file under repo_root
        repo_root: Repository root directory

    Returns:
        REPO_ROOT_TAG for the go.mod directly at the root, otherwise the
        directory relative to the root (e.g. "sdk/metric")

    Raises:
        PathOutsideRepoError: If the path is not under repo_root
        InvalidManifestPathError: If the path does not end with go.mod
    """
    file_path = os.fspath(mod_file_path)
    prefix = _root_prefix(repo_root)

    if not file_path.startswith(prefix):
        raise PathOutsideRepoError(file_path, os.fspath(repo_root))
    relative = file_path[len(prefix):]

    if relative == MANIFEST_FILENAME:
        return REPO_ROOT_TAG

    suffix = os.sep + MANIFEST_FILENAME
    if not relative.endswith(suffix) or len(relative) == len(suffix):
        raise InvalidManifestPathError(file_path, MANIFEST_FILENAME)

    tag_dir = relative[:-len(suffix)].strip(os.sep)
    if not tag_dir:
        raise InvalidManifestPathError(file_path, MANIFEST_FILENAME)
    return ModuleTagName(tag_dir.replace(os.sep, '/'))


def tag_names_for(
    mod_file_paths: Iterable[ModuleFilePath],
    repo_root: Union[str, Path],
) -> List[ModuleTagName]:
    """Convert go.mod file paths to tag names, failing on the first bad path."""
    return [tag_name_for(file_path, repo_root) for file_path in mod_file_paths]


def module_paths_to_tag_names(
    mod_paths: Iterable[ModulePath],
    mod_path_map: Mapping[ModulePath, ModuleFilePath],
    repo_root: Union[str, Path],
) -> List[ModuleTagName]:
    return tag_names_for(paths_for(mod_paths, mod_path_map), repo_root)


def combine_tags_with_version(tag_names: Iterable[ModuleTagName], version: str) -> List[str]:
    """
    Combine tag names with a version into full Git tags, keeping input order.

    Example:
        combine_tags_with_version([REPO_ROOT_TAG, ModuleTagName("sdk/metric")], "v1.2.3")
        -> ["v1.2.3", "sdk/metric/v1.2.3"]
    """
    return [tag_name.full_tag(version) for tag_name in tag_names]
