from __future__ import annotations

import os

import click

from mdshell import __version__
from mdshell.commands.ls import cat_cmd, ls_cmd, tree_cmd
from mdshell.config import SNAPSHOT_ENV


def _set_snapshot_env(ctx: click.Context, param: click.Parameter, value: str | None) -> None:
    """Export --snapshot PATH to the MDSHELL_SNAPSHOT environment variable."""
    if value is None:
        return
    os.environ[SNAPSHOT_ENV] = value


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="mdshell")
@click.option(
    "--snapshot",
    default=None,
    metavar="PATH",
    expose_value=False,
    is_eager=True,
    callback=_set_snapshot_env,
    help="Snapshot file to browse (default: $MDSHELL_SNAPSHOT or ~/.mdshell/snapshot.json).",
)
def main() -> None:
    """mdshell: browse a metadata tree snapshot like a filesystem."""


main.add_command(ls_cmd, name="ls")
main.add_command(cat_cmd, name="cat")
main.add_command(tree_cmd, name="tree")


if __name__ == "__main__":
    main()
