"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from ecoshop.application import responses
from ecoshop.application.add_product import AddProductHandler
from ecoshop.application.delete_product import DeleteProductHandler
from ecoshop.application.list_products import ListProductsHandler
from ecoshop.application.show_product import ShowProductHandler
from ecoshop.application.update_product import UpdateProductHandler
from ecoshop.domain.exceptions import DomainException
from ecoshop.infrastructure.cli.context import (
    CliContext,
    echo_json,
    fail,
    json_option,
    pass_cli_context,
)


@click.command("list")
@json_option
@pass_cli_context
def product_list(ctx: CliContext, as_json: bool) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(ctx.uow_factory())

    try:
        products = handler.handle()
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.product_list(products))
        return
    if not products:
        click.echo("No products in catalog.")
        return

    click.echo(f"  {'ID':<5} {'Name':<26} {'Price':>10} {'Stock':>7}")
    click.echo(f"  {'-'*51}")
    for p in products:
        click.echo(f"  {p.id:<5} {p.name:<26} {p.price:>10} {p.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
@json_option
@pass_cli_context
def product_show(ctx: CliContext, product_id: int, as_json: bool) -> None:
    """Show one product."""
    handler = ShowProductHandler(ctx.uow_factory())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.product_detail(dto))
        return
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Price:   {dto.price}")
    click.echo(f"Stock:   {dto.stock}")
    if dto.description:
        click.echo(f"\n{dto.description}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price, e.g. 24.99.")
@click.option("--stock", required=True, type=click.IntRange(min=0), help="Units in stock.")
@click.option("--description", default="", help="Product description.")
@pass_cli_context
def product_add(ctx: CliContext, name: str, price: str, stock: int, description: str) -> None:
    """Add a product to the catalog (admin only)."""
    handler = AddProductHandler(ctx.uow_factory())

    try:
        dto = handler.handle(ctx.principal, name, price, stock, description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price} ({dto.stock} in stock).")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to update.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--description", default=None, help="New description.")
@pass_cli_context
def product_update(
    ctx: CliContext,
    product_id: int,
    name: str | None,
    price: str | None,
    description: str | None,
) -> None:
    """Update a product's details (admin only).

    Existing orders keep the price they were placed at.
    """
    handler = UpdateProductHandler(ctx.uow_factory())

    try:
        dto = handler.handle(
            ctx.principal, product_id, name=name, price=price, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' updated (price {dto.price}).")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to delete.")
@json_option
@pass_cli_context
def product_delete(ctx: CliContext, product_id: int, as_json: bool) -> None:
    """Delete a product that no order refers to (admin only)."""
    handler = DeleteProductHandler(ctx.uow_factory())

    try:
        handler.handle(ctx.principal, product_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.product_deleted())
        return
    click.echo(f"Product #{product_id} deleted.")
