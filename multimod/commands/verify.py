"""
Versioning file consistency check.
"""

import click
from rich.console import Console

from ..cli_utils import handle_errors, load_versioning
from ..exit_codes import DATA_ERROR

console = Console()


@click.command("verify")
@click.option("--strict", is_flag=True,
              help="Fail if a versioned module has no go.mod or the walk skipped files")
@click.pass_context
@handle_errors
def verify_cmd(ctx, strict):
    """Check the versioning file against the repository.

    Fails if a module is in two sets, is both versioned and excluded, or
    if two go.mod files declare the same module.
    """
    versioning = load_versioning(ctx)

    for warning in versioning.warnings:
        console.print(f"[yellow]Skipped[/yellow] {warning}", highlight=False)

    missing = [
        mod_path for mod_path in versioning.module_info_index
        if mod_path not in versioning.module_path_index
    ]
    for mod_path in missing:
        console.print(f"[yellow]No go.mod found for[/yellow] {mod_path}", highlight=False)

    if strict and (missing or versioning.warnings):
        console.print("[red]✗[/red] Versioning check failed")
        ctx.exit(DATA_ERROR)

    console.print(
        f"[green]✓[/green] {len(versioning.module_set_index)} module sets, "
        f"{len(versioning.module_info_index)} versioned modules, "
        f"{len(versioning.module_path_index)} modules found in {versioning.repo_root}",
        highlight=False,
    )
