"""Config commands: write and show the installer configuration."""

import click

from appinstall.cli.ensure import Ensure
from appinstall.cli.output import machine_output, user_output
from appinstall.core.config_store import InstallerConfig, render_config
from appinstall.core.context import InstallerContext


@click.group("config")
def config_group() -> None:
    """Manage appinstall configuration."""


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_obj
def config_init(ctx: InstallerContext, force: bool) -> None:
    """Write a config file populated with the built-in defaults."""
    store = ctx.config_store
    Ensure.invariant(
        force or not store.exists(),
        f"Config already exists at {store.path()}. Use --force to overwrite.",
    )
    store.save(InstallerConfig.defaults())
    user_output(click.style("✓ ", fg="green") + f"Wrote {store.path()}")


@config_group.command("show")
@click.pass_obj
def config_show(ctx: InstallerContext) -> None:
    """Print the effective configuration as TOML."""
    store = ctx.config_store
    if store.exists():
        user_output(click.style(f"# from {store.path()}", dim=True))
    else:
        user_output(click.style("# built-in defaults (no config file)", dim=True))
    machine_output(render_config(ctx.config), nl=False)
