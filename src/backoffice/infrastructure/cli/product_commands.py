"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from backoffice.application.add_product import AddProductHandler
from backoffice.application.delete_product import DeleteProductHandler
from backoffice.application.update_product import UpdateProductHandler
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import (
    catalog_cache,
    category_repository,
    product_repository,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units on hand.")
@click.option("--price", required=True, help="Selling price (e.g. 799.00).")
@click.option("--srp", "srp_price", required=True, help="Suggested retail price.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--image", default=None, help="Image URL or path.")
@click.option("--category", "category_id", type=int, default=None, help="Category ID.")
def product_add(
    name: str,
    quantity: int,
    price: str,
    srp_price: str,
    description: str,
    image: str | None,
    category_id: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        product = handler.handle(
            name=name,
            quantity=quantity,
            price=price,
            srp_price=srp_price,
            description=description,
            image=image,
            category_id=category_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--search", default="", help="Filter by name (case-insensitive).")
@click.option("--page", "page_number", type=int, default=1, help="Page number.")
def product_list(search: str, page_number: int) -> None:
    """List products in the catalog."""
    catalog = catalog_cache()
    outcome = catalog.refresh()
    if not outcome.ok:
        raise click.ClickException(outcome.message)

    if search:
        products = catalog.search(search)
        footer = f"{len(products)} match(es) for '{search}'"
    else:
        page = catalog.page(page_number)
        products = page.items
        footer = f"Page {page.number} of {page.total_pages} ({page.total_items} products)"

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Stock':>6} {'Price':>12} {'SRP':>12}")
    click.echo("-" * 64)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.quantity:>6} {str(p.price):>12} {str(p.srp_price):>12}"
        )
    click.echo(footer)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--quantity", type=int, default=None, help="New on-hand quantity.")
@click.option("--price", default=None, help="New selling price.")
@click.option("--srp", "srp_price", default=None, help="New suggested retail price.")
@click.option("--description", default=None, help="New description.")
def product_update(
    product_id: int,
    name: str | None,
    quantity: int | None,
    price: str | None,
    srp_price: str | None,
    description: str | None,
) -> None:
    """Update a product's details."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            quantity=quantity,
            price=price,
            srp_price=srp_price,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.confirmation_option(prompt="This permanently deletes the product. Continue?")
def product_delete(product_id: int) -> None:
    """Delete a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
