#!/usr/bin/env python3

import click

from multimod.config import load_config, configure_logging
from multimod.commands.sets import sets_cmd, modules_cmd
from multimod.commands.tags import tags_cmd
from multimod.commands.verify import verify_cmd


@click.group()
@click.version_option(package_name="multimod")
@click.option("--versioning-file", "-f", type=click.Path(dir_okay=False),
              help="Versioning file (default: versions.yaml at the repo root)")
@click.option("--repo-root", type=click.Path(exists=True, file_okay=False),
              help="Repository root (default: enclosing git repository)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, versioning_file, repo_root, verbose):
    """multimod - Version metadata for repositories with many Go modules.

    Reads the module sets of a versioning file, finds every go.mod in the
    repository and computes the Git tags a module set release needs.
    """
    config = load_config()
    configure_logging(config, verbose)
    ctx.ensure_object(dict).update({
        'config': config,
        'versioning_file': versioning_file,
        'repo_root': repo_root,
    })


cli.add_command(sets_cmd)
cli.add_command(modules_cmd)
cli.add_command(tags_cmd)
cli.add_command(verify_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
