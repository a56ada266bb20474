import click

from checkout.infrastructure.cli.order_commands import order_place, order_show
from checkout.infrastructure.config import get_settings
from checkout.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Checkout — cart to order processing"""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


@cli.group()
def order() -> None:
    """Place and inspect orders."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_show)
