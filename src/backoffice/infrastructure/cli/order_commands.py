"""CLI commands for orders."""

from __future__ import annotations

from datetime import datetime

import click

from backoffice.application.dto import OrderDTO
from backoffice.application.list_orders import ListOrdersHandler
from backoffice.application.show_order import ShowOrderHandler
from backoffice.application.update_order_status import UpdateOrderStatusHandler
from backoffice.domain.exceptions import DomainException
from backoffice.domain.model.order import OrderStatus
from backoffice.infrastructure.bootstrap import order_item_repository, order_repository

STATUS_CHOICES = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


@click.command("list")
@click.option("--from", "start", type=click.DateTime(["%Y-%m-%d"]), default=None,
              help="First day to include (YYYY-MM-DD).")
@click.option("--to", "end", type=click.DateTime(["%Y-%m-%d"]), default=None,
              help="Last day to include (YYYY-MM-DD).")
@click.option("--status", type=STATUS_CHOICES, default=None, help="Only this status.")
def order_list(start: datetime | None, end: datetime | None, status: str | None) -> None:
    """List orders with the total of the listed amounts."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        result = handler.handle(
            start=start.date() if start else None,
            end=end.date() if end else None,
            status=OrderStatus.parse(status) if status else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Date':<18} {'Status':<9} {'Total':>12}")
    click.echo("-" * 69)
    for o in result.orders:
        click.echo(
            f"{o.id:<6} {o.customer_name:<20} {o.created_at[:16]:<18} {o.status:<9} {o.total:>12}"
        )
    click.echo("-" * 69)
    click.echo(f"{'Total Sales':<55} {result.total_sales:>13}")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<27} {dto.total:>24}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show an order and its items."""
    handler = ShowOrderHandler(
        order_repo=order_repository(),
        order_item_repo=order_item_repository(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.argument("status", type=STATUS_CHOICES)
def order_status(order_id: int, status: str) -> None:
    """Set an order's status (pending, paid, not paid)."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status updated to {status.lower()}")
