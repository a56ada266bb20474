"""CLI commands for placing and inspecting orders."""

from __future__ import annotations

import asyncio

import click

from checkout.application.dto import OrderDTO
from checkout.application.show_order import ShowOrderHandler, to_dto
from checkout.domain.exceptions import DomainException
from checkout.domain.model.cart import Cart, Item
from checkout.domain.model.customer import CustomerTier, User
from checkout.domain.model.value_objects import Money
from checkout.infrastructure.bootstrap import order_repository, process_order_handler


def _parse_items(raw: str) -> list[Item]:
    """Parse 'Widget:15.00,Gadget:25' into Item list.  Empty string -> []."""
    items: list[Item] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemName:Price'."
            )
        name, price_str = pair.rsplit(":", 1)
        try:
            price = Money.of(price_str.strip())
        except DomainException:
            raise click.BadParameter(
                f"Invalid price '{price_str}' for item '{name}'."
            )
        items.append(Item(name=name.strip(), price=price))
    return items


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>  [{dto.tier}]")
    click.echo()
    click.echo(f"  {'Item':<20} {'Price':>10}")
    click.echo(f"  {'-'*31}")
    for item in dto.items:
        click.echo(f"  {item.name:<20} {item.price:>10}")
    click.echo(f"  {'-'*31}")
    click.echo(f"  {'Subtotal':<20} {dto.subtotal:>10}")
    click.echo(f"  {'Total charged':<20} {dto.total:>10}")


@click.command("place")
@click.option("--customer-id", required=True, type=int, help="Customer ID.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email for the approval notice.")
@click.option(
    "--tier",
    type=click.Choice([t.value for t in CustomerTier], case_sensitive=False),
    default=CustomerTier.STANDARD.value,
    show_default=True,
    help="Customer tier.",
)
@click.option("--items", default="", help="Items as 'Name:Price,Name:Price'.")
@click.option("--token", required=True, help="Payment token.")
def order_place(
    customer_id: int, name: str, email: str, tier: str, items: str, token: str
) -> None:
    """Check out a cart and place an order."""
    owner = User(id=customer_id, name=name, email=email, tier=CustomerTier(tier.upper()))
    cart = Cart(owner=owner, items=_parse_items(items))

    handler = process_order_handler()

    try:
        order = asyncio.run(handler.handle(cart, token))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if order is None:
        raise click.ClickException("Payment declined — no order placed.")

    _display_order(to_dto(order))


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = asyncio.run(handler.handle(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
