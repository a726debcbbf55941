"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ecoshop.application import responses
from ecoshop.application.delete_order import DeleteOrderHandler
from ecoshop.application.dto import OrderDTO, OrderItemSpec
from ecoshop.application.list_orders import ListOrdersHandler
from ecoshop.application.place_order import PlaceOrderHandler
from ecoshop.application.show_order import ShowOrderHandler
from ecoshop.application.update_order_status import UpdateOrderStatusHandler
from ecoshop.domain.exceptions import DomainException
from ecoshop.infrastructure.cli.context import (
    CliContext,
    echo_json,
    fail,
    json_option,
    pass_cli_context,
)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product ID : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        pid_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(pid_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Created: {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.order_items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.price:>10} {item.total_price:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {dto.total_amount:>20}")


@click.command("place")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@json_option
@pass_cli_context
def order_place(ctx: CliContext, items: str, as_json: bool) -> None:
    """Place a new order (checks and decrements stock)."""
    specs = _parse_items(items)
    handler = PlaceOrderHandler(ctx.uow_factory())

    try:
        dto = handler.handle(ctx.principal, specs)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.order_created(dto))
        return
    click.echo("Order created successfully")
    _display_order(dto)


@click.command("list")
@json_option
@pass_cli_context
def order_list(ctx: CliContext, as_json: bool) -> None:
    """List orders (admins see all orders, users see their own)."""
    handler = ListOrdersHandler(ctx.uow_factory())

    try:
        dtos = handler.handle(ctx.principal)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.order_list(dtos))
        return
    if not dtos:
        click.echo("No orders.")
        return
    click.echo(f"  {'ID':>5} {'User':>6} {'Status':<12} {'Items':>5} {'Total':>12}")
    click.echo(f"  {'-'*44}")
    for dto in dtos:
        click.echo(
            f"  {dto.id:>5} {dto.user_id:>6} {dto.status:<12} "
            f"{len(dto.order_items):>5} {dto.total_amount:>12}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@json_option
@pass_cli_context
def order_show(ctx: CliContext, order_id: int, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(ctx.uow_factory())

    try:
        dto = handler.handle(ctx.principal, order_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.order_detail(dto))
        return
    _display_order(dto)


@click.command("set-status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", required=True, help="pending, processing, completed or cancelled.")
@json_option
@pass_cli_context
def order_set_status(ctx: CliContext, order_id: int, status: str, as_json: bool) -> None:
    """Change an order's status (admin only)."""
    handler = UpdateOrderStatusHandler(ctx.uow_factory())

    try:
        dto = handler.handle(ctx.principal, order_id, status)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.order_updated(dto))
        return
    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@json_option
@pass_cli_context
def order_delete(ctx: CliContext, order_id: int, as_json: bool) -> None:
    """Delete an order (admin only).  Stock is not restored."""
    handler = DeleteOrderHandler(ctx.uow_factory())

    try:
        handler.handle(ctx.principal, order_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(responses.order_deleted())
        return
    click.echo(f"Order #{order_id} deleted.")
