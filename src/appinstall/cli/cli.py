import logging
import os

import click

from appinstall.cli.commands.config import config_group
from appinstall.cli.commands.install import install_cmd
from appinstall.cli.commands.status import status_cmd
from appinstall.cli.output import user_output
from appinstall.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "APPINSTALL_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="appinstall")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Install versioned apps into a monitoring agent's app directory."""
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None


cli.add_command(config_group)
cli.add_command(install_cmd)
cli.add_command(status_cmd)


def main() -> None:
    """CLI entry point used by the `appinstall` console script."""
    cli()
