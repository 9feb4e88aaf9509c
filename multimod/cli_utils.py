"""
Common CLI utilities shared by multimod commands.
"""

import sys
from functools import wraps
from pathlib import Path

import click
from rich.console import Console

from .exit_codes import CommandError, INTERRUPTED
from .repo import find_repo_root
from .versioning import ModuleVersioning

err_console = Console(stderr=True)


def handle_errors(func):
    """
    Decorator that turns CommandErrors into a red message and exit code.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CommandError as e:
            err_console.print(f"[red]Error:[/red] {e}", highlight=False)
            sys.exit(e.exit_code)
        except KeyboardInterrupt:
            err_console.print("[yellow]Interrupted[/yellow]")
            sys.exit(INTERRUPTED)
    return wrapper


def load_versioning(ctx: click.Context) -> ModuleVersioning:
    """
    Build the ModuleVersioning for the current invocation.

    Uses --repo-root if given, otherwise the repository enclosing the
    working directory; the versioning file comes from --versioning-file
    or the tool configuration.
    """
    obj = ctx.ensure_object(dict)
    if 'versioning' not in obj:
        repo_root = obj.get('repo_root')
        repo_root = Path(repo_root) if repo_root else find_repo_root()
        # A file named on the command line is relative to the working directory
        versioning_file = obj.get('versioning_file')
        if versioning_file:
            versioning_file = Path(versioning_file).resolve()
        obj['versioning'] = ModuleVersioning.from_settings(
            obj.get('config', {}),
            repo_root,
            versioning_filename=versioning_file,
        )
    return obj['versioning']
