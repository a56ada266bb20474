"""Order approval email text, per locale.

Pure data plus formatting.  The order ID always precedes the total.
"""

from __future__ import annotations

from enum import Enum

from checkout.domain.model.order import Order


class Locale(str, Enum):
    EN = "en"
    PT_BR = "pt_BR"


_APPROVAL_SUBJECT: dict[Locale, str] = {
    Locale.EN: "Your Order has been Approved!",
    Locale.PT_BR: "Seu Pedido foi Aprovado!",
}

_APPROVAL_BODY: dict[Locale, str] = {
    Locale.EN: "Order {order_id} in the amount of {total}",
    Locale.PT_BR: "Pedido {order_id} no valor de {total}",
}

# (currency symbol, decimal separator)
_MONEY_STYLE: dict[Locale, tuple[str, str]] = {
    Locale.EN: ("$", "."),
    Locale.PT_BR: ("R$", ","),
}


def approval_subject(locale: Locale = Locale.EN) -> str:
    return _APPROVAL_SUBJECT[locale]


def approval_body(order: Order, locale: Locale = Locale.EN) -> str:
    symbol, separator = _MONEY_STYLE[locale]
    return _APPROVAL_BODY[locale].format(
        order_id=order.id,
        total=order.final_total.format(symbol, separator),
    )
