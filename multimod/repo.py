"""
Repository root discovery.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .errors import RepoRootNotFoundError

logger = logging.getLogger(__name__)

GIT_MARKER = '.git'


def find_repo_root(start: Optional[Union[str, Path]] = None) -> Path:
    """
    Find the root of the git repository containing start.

    Beginning at start (default: the current working directory), checks for
    a .git entry, which may be a directory or, for worktrees and submodules,
    a file. Otherwise moves to the parent directory until the filesystem root.

    Raises:
        RepoRootNotFoundError: If no enclosing repository exists
    """
    start_dir = Path(start if start is not None else os.getcwd()).resolve()

    for directory in (start_dir, *start_dir.parents):
        if (directory / GIT_MARKER).exists():
            return directory

    raise RepoRootNotFoundError(str(start_dir))


def change_to_repo_root(start: Optional[Union[str, Path]] = None) -> Path:
    """Find the repository root and make it the working directory."""
    repo_root = find_repo_root(start)
    logger.info(f"Changing to root directory {repo_root}...")
    os.chdir(repo_root)
    return repo_root
