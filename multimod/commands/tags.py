"""
Tag listing commands for a module set release.

Only computes tag names; creating and pushing tags is left to git.
"""

import json

import click

from ..cli_utils import handle_errors, load_versioning


@click.command("tags")
@click.argument("set_name")
@click.option("--json", "json_output", is_flag=True, help="Output as a JSON list")
@click.pass_context
@handle_errors
def tags_cmd(ctx, set_name, json_output):
    """Print the Git tags needed to release a module set.

    SET_NAME: Name of a module set in the versioning file

    Examples:

    \b
        multimod tags stable-v1
        multimod tags experimental-metrics --json
        multimod tags stable-v1 | xargs -n1 git tag
    """
    versioning = load_versioning(ctx)
    tags = versioning.module_set_tags(set_name)

    if json_output:
        print(json.dumps({
            "module_set": set_name,
            "version": versioning.get_module_set(set_name).version,
            "tags": tags,
        }))
        return

    for tag in tags:
        click.echo(tag)
