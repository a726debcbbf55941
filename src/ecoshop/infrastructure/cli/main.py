import click

from ecoshop.infrastructure.bootstrap import configure_logging
from ecoshop.infrastructure.cli.context import CliContext
from ecoshop.infrastructure.cli.db_commands import db_init, db_seed
from ecoshop.infrastructure.cli.order_commands import (
    order_delete,
    order_list,
    order_place,
    order_set_status,
    order_show,
)
from ecoshop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from ecoshop.infrastructure.config import Settings, normalize_database_url


@click.group()
@click.option("--database-url", envvar="ECOSHOP_DATABASE_URL", default="",
              help="SQLAlchemy database URL (defaults to a local SQLite file).")
@click.option("--user-id", envvar="ECOSHOP_USER_ID", type=int, default=None,
              help="ID of the authenticated user.")
@click.option("--admin", "is_admin", envvar="ECOSHOP_ADMIN", is_flag=True, default=False,
              help="Act with the admin role.")
@click.option("--log-level", envvar="ECOSHOP_LOG_LEVEL", default="WARNING",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.pass_context
def cli(
    ctx: click.Context,
    database_url: str,
    user_id: int | None,
    is_admin: bool,
    log_level: str,
) -> None:
    """EcoShop: products and stock-aware orders"""
    configure_logging(log_level)
    defaults = Settings.from_env()
    settings = Settings(
        database_url=normalize_database_url(database_url),
        log_level=log_level.upper(),
        sqlite_timeout=defaults.sqlite_timeout,
    )
    ctx.obj = CliContext(settings=settings, user_id=user_id, is_admin=is_admin)


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def db() -> None:
    """Database maintenance."""


# Register subcommands
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_set_status)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
db.add_command(db_init)
db.add_command(db_seed)
