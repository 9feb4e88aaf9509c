"""
Module set and module listing commands.
"""

import json

import click
from rich.console import Console
from rich.table import Table

from ..cli_utils import handle_errors, load_versioning
from ..errors import UnknownModuleError
from ..semver import is_stable

console = Console()


@click.command("sets")
@click.option("--json", "json_output", is_flag=True, help="Output as JSONL")
@click.pass_context
@handle_errors
def sets_cmd(ctx, json_output):
    """List module sets with their versions.

    Examples:

    \b
        multimod sets
        multimod sets --json
    """
    versioning = load_versioning(ctx)

    if json_output:
        for name, module_set in versioning.module_set_index.items():
            print(json.dumps({
                "name": name,
                "stable": is_stable(module_set.version),
                **module_set.to_dict(),
            }))
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Module set", style="green")
    table.add_column("Version")
    table.add_column("Stable")
    table.add_column("Modules", justify="right")

    for name, module_set in versioning.module_set_index.items():
        stable = "[green]yes[/green]" if is_stable(module_set.version) else "[yellow]no[/yellow]"
        table.add_row(name, module_set.version, stable, str(len(module_set.modules)))

    console.print(table)


@click.command("modules")
@click.option("--json", "json_output", is_flag=True, help="Output as JSONL")
@click.pass_context
@handle_errors
def modules_cmd(ctx, json_output):
    """List versioned modules with their set, version and tag name.

    Modules listed in the versioning file but without a go.mod in the
    repository are shown with a missing tag name.
    """
    versioning = load_versioning(ctx)

    rows = []
    for mod_path, info in versioning.module_info_index.items():
        try:
            tag_name = str(versioning.module_paths_to_tag_names([mod_path])[0])
        except UnknownModuleError:
            tag_name = None
        rows.append({"module": mod_path, "tag_name": tag_name, **info.to_dict()})

    if json_output:
        for row in rows:
            print(json.dumps(row))
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Module", style="green")
    table.add_column("Module set")
    table.add_column("Version")
    table.add_column("Tag name")

    for row in rows:
        table.add_row(
            row["module"],
            row["module_set"],
            row["version"],
            row["tag_name"] if row["tag_name"] is not None else "[red]missing[/red]",
        )

    console.print(table)
