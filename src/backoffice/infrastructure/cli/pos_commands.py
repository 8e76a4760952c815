"""CLI commands for the point of sale."""

from __future__ import annotations

import click

from backoffice.application.dto import CheckoutReceipt
from backoffice.infrastructure.bootstrap import point_of_sale
from backoffice.infrastructure.cli.outcomes import echo_outcome


def _parse_items(raw: str) -> list[tuple[int, int]]:
    """Parse '1:2,4:1' into [(product_id, quantity), ...]."""
    pairs: list[tuple[int, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id, qty = int(id_str), int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
        if qty <= 0:
            raise click.BadParameter(f"Quantity for product {product_id} must be positive.")
        pairs.append((product_id, qty))
    return pairs


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def pos_checkout(customer: str, items: str) -> None:
    """Ring up a sale and complete the transaction."""
    wanted = _parse_items(items)

    session = point_of_sale()
    loaded = session.load_catalog()
    if not loaded.ok:
        raise click.ClickException(loaded.message)

    session.set_customer(customer)
    for product_id, qty in wanted:
        echo_outcome(session.add_item(product_id))
        if qty > 1:
            echo_outcome(session.adjust_quantity(product_id, qty - 1))

    click.echo(f"Cart total: {session.total()}")
    outcome = session.checkout()
    echo_outcome(outcome)

    receipt: CheckoutReceipt = outcome.payload
    click.echo(f"Order #{receipt.order_id} for {receipt.customer_name}: {receipt.total}")
