"""CLI commands for schema setup and demo data."""

from __future__ import annotations

import click

from ecoshop.infrastructure.bootstrap import init_database
from ecoshop.infrastructure.cli.context import CliContext, pass_cli_context
from ecoshop.infrastructure.seed import seed_catalog


@click.command("init")
@pass_cli_context
def db_init(ctx: CliContext) -> None:
    """Create the database tables."""
    init_database(ctx.settings)
    click.echo("Database initialised.")


@click.command("seed")
@pass_cli_context
def db_seed(ctx: CliContext) -> None:
    """Create the tables and load the demo catalog."""
    init_database(ctx.settings)
    added = seed_catalog(ctx.uow_factory())
    click.echo(f"Seeded {added} product(s).")
