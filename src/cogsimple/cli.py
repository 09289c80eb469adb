from __future__ import annotations

import logging

import click

from cogsimple import __version__
from cogsimple.commands.session import eval_cmd, ping_cmd
from cogsimple.commands.uri import parse_uri_cmd, stats_cmd


def _set_verbose(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Route cogsimple log records to stderr when --verbose is given."""
    if not value:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="cogsimple")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_set_verbose,
    help="Log connection activity to stderr.",
)
def main() -> None:
    """cogsimple: line-oriented client for the CogServer."""


main.add_command(eval_cmd, name="eval")
main.add_command(ping_cmd, name="ping")
main.add_command(stats_cmd, name="stats")
main.add_command(parse_uri_cmd, name="parse-uri")


if __name__ == "__main__":
    main()
