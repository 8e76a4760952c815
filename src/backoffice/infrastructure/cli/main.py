import click

from backoffice.infrastructure.bootstrap import configure_logging
from backoffice.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_update,
)
from backoffice.infrastructure.cli.order_commands import (
    order_list,
    order_show,
    order_status,
)
from backoffice.infrastructure.cli.pos_commands import pos_checkout
from backoffice.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from backoffice.infrastructure.cli.report_commands import (
    report_monthly,
    report_summary,
    report_top_products,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Retail back-office: catalog, point of sale and sales reports."""
    configure_logging(verbose)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def order() -> None:
    """Track orders."""


@cli.group()
def pos() -> None:
    """Point of sale."""


@cli.group()
def report() -> None:
    """Sales reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
category.add_command(category_add)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_update)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
pos.add_command(pos_checkout)
report.add_command(report_monthly)
report.add_command(report_summary)
report.add_command(report_top_products)
