"""CLI commands for categories."""

from __future__ import annotations

import click

from backoffice.application.manage_categories import (
    AddCategoryHandler,
    DeleteCategoryHandler,
    UpdateCategoryHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import category_repository, product_repository


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default="", help="Description.")
def category_add(name: str, description: str) -> None:
    """Add a category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("list")
@click.option("--search", default="", help="Filter by name (case-insensitive).")
def category_list(search: str) -> None:
    """List categories."""
    try:
        categories = category_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    needle = search.strip().lower()
    if needle:
        categories = [c for c in categories if needle in c.name.lower()]

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} Description")
    click.echo("-" * 50)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<20} {c.description}")


@click.command("update")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", default="", help="New description.")
def category_update(category_id: int, name: str, description: str) -> None:
    """Rename a category."""
    handler = UpdateCategoryHandler(category_repo=category_repository())

    try:
        handler.handle(category_id=category_id, name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} updated")


@click.command("delete")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.confirmation_option(prompt="This permanently deletes the category. Continue?")
def category_delete(category_id: int) -> None:
    """Delete a category (its products are kept, uncategorized)."""
    handler = DeleteCategoryHandler(
        category_repo=category_repository(),
        product_repo=product_repository(),
    )

    try:
        detached = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} deleted ({detached} product(s) uncategorized)")
