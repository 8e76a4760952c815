"""CLI commands for the sales dashboard."""

from __future__ import annotations

import click

from backoffice.infrastructure.bootstrap import sales_report
from backoffice.infrastructure.cli.outcomes import echo_outcome


@click.command("top-products")
@click.option("--limit", type=int, default=None, help="How many products to show.")
def report_top_products(limit: int | None) -> None:
    """Best-selling products by revenue from paid orders."""
    outcome = sales_report().top_products(limit)
    echo_outcome(outcome)

    for rank, row in enumerate(outcome.payload, start=1):
        click.echo(f"{rank:>2}. {row.name:<24} {row.revenue:>14}")


@click.command("monthly")
@click.option("--year", type=int, default=None, help="Restrict to one calendar year.")
def report_monthly(year: int | None) -> None:
    """Revenue from paid orders per month."""
    outcome = sales_report().monthly_revenue(year)
    echo_outcome(outcome)

    for row in outcome.payload:
        click.echo(f"{row.month:<4} {row.revenue:>14}")


@click.command("summary")
def report_summary() -> None:
    """Dashboard totals: sales, products and orders."""
    outcome = sales_report().dashboard_summary()
    echo_outcome(outcome)

    summary = outcome.payload
    click.echo(f"Total Sales:    {summary.total_sales}")
    click.echo(f"Total Products: {summary.total_products}")
    click.echo(f"Total Orders:   {summary.total_orders}")
