"""
Module versioning facade.

Combines the versioning file with the go.mod files found in a repository
so release tooling can ask which tags a module set needs.

Example:
    from multimod import ModuleVersioning, find_repo_root

    repo_root = find_repo_root()
    versioning = ModuleVersioning.from_file(repo_root / "versions.yaml", repo_root)

    module_set = versioning.get_module_set("stable-v1")
    for tag in versioning.module_set_tags("stable-v1"):
        print(tag)   # v1.2.0, trace/v1.2.0, ...
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .domain import ModuleFilePath, ModuleInfo, ModulePath, ModuleSet, ModuleTagName, VersioningConfig
from .errors import ManifestReadWarning, UnknownSetError
from .index import (
    DEFAULT_SKIP_DIRS,
    build_module_info_index,
    build_module_path_index,
    build_module_set_index,
)
from .tags import combine_tags_with_version, module_paths_to_tag_names
from .versions_file import read_versioning_file

logger = logging.getLogger(__name__)


class ModuleVersioning:
    """
    Versioning metadata for one repository, built once and read-only afterwards.

    Construction either builds all three indices or raises; there is no
    partially initialized instance.

    Attributes:
        repo_root: Absolute repository root the go.mod paths are under
        warnings: Manifests and directories skipped while walking the repo
    """

    def __init__(
        self,
        config: VersioningConfig,
        repo_root: Union[str, Path],
        allow_duplicate_paths: bool = False,
        skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
    ):
        """
        Build the module set, module info and module path indices.

        Args:
            config: Parsed versioning file
            repo_root: Root directory of the repository
            allow_duplicate_paths: Let a later go.mod win when two declare the same module
            skip_dirs: Directory names not descended into while walking

        Raises:
            VersioningError: If any index cannot be built
        """
        self._config = config
        self._repo_root = os.path.abspath(os.fspath(repo_root))

        module_set_index = build_module_set_index(config)
        module_info_index = build_module_info_index(config)
        scan = build_module_path_index(
            config,
            self._repo_root,
            allow_duplicates=allow_duplicate_paths,
            skip_dirs=skip_dirs,
        )

        self._module_set_index = module_set_index
        self._module_info_index = module_info_index
        self._module_path_index = scan.paths
        self._warnings = scan.warnings

        logger.debug(
            f"Loaded {len(module_set_index)} module sets, "
            f"{len(module_info_index)} versioned modules, "
            f"{len(scan.paths)} modules on disk"
        )

    @classmethod
    def from_file(
        cls,
        versioning_filename: Union[str, Path],
        repo_root: Union[str, Path],
        **kwargs,
    ) -> 'ModuleVersioning':
        """Read a versioning file and build the indices for repo_root."""
        return cls(read_versioning_file(versioning_filename), repo_root, **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings: Dict[str, Any],
        repo_root: Union[str, Path],
        versioning_filename: Optional[Union[str, Path]] = None,
    ) -> 'ModuleVersioning':
        """
        Build from the tool configuration's 'versioning' section.

        A relative versions_file is resolved against repo_root.
        """
        section = settings.get('versioning', {})
        filename = Path(versioning_filename or section.get('versions_file', 'versions.yaml'))
        if not filename.is_absolute():
            filename = Path(repo_root) / filename
        return cls.from_file(
            filename,
            repo_root,
            allow_duplicate_paths=bool(section.get('allow_duplicate_paths', False)),
            skip_dirs=tuple(section.get('skip_directories', DEFAULT_SKIP_DIRS)),
        )

    @property
    def config(self) -> VersioningConfig:
        return self._config

    @property
    def repo_root(self) -> str:
        return self._repo_root

    @property
    def module_set_index(self) -> Mapping[str, ModuleSet]:
        return self._module_set_index

    @property
    def module_info_index(self) -> Mapping[ModulePath, ModuleInfo]:
        return self._module_info_index

    @property
    def module_path_index(self) -> Mapping[ModulePath, ModuleFilePath]:
        return self._module_path_index

    @property
    def warnings(self) -> Tuple[ManifestReadWarning, ...]:
        return self._warnings

    def get_module_set(self, set_name: str) -> ModuleSet:
        """
        Fetch a module set by name.

        Raises:
            UnknownSetError: If the set is not in the versioning file
        """
        if set_name not in self._module_set_index:
            raise UnknownSetError(set_name)
        return self._module_set_index[set_name]

    def module_paths_to_tag_names(self, mod_paths: Iterable[ModulePath]) -> List[ModuleTagName]:
        """
        Convert module paths to tag names via their go.mod locations.

        Raises:
            UnknownModuleError: If a module has no go.mod in the repository
            PathOutsideRepoError, InvalidManifestPathError: On a bad go.mod path
        """
        return module_paths_to_tag_names(mod_paths, self._module_path_index, self._repo_root)

    def module_set_tags(self, set_name: str) -> List[str]:
        """Full Git tags needed to release every module of a set at its version."""
        module_set = self.get_module_set(set_name)
        tag_names = self.module_paths_to_tag_names(module_set.modules)
        return combine_tags_with_version(tag_names, module_set.version)
