from __future__ import annotations

from typing import Callable, Optional
from urllib.parse import quote

from shopfront.client.cart import Cart
from shopfront.client.notices import NoticeBoard
from shopfront.config import Settings
from shopfront.constants import NOTICE_WARNING
from shopfront.utils.formatters import money

# символы, которые encodeURIComponent оставляет как есть
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_order_message(cart: Cart, cfg: Settings) -> str:
    lines = [f"Hello {cfg.shop_name}! I would like to place an order:", ""]
    for n, item in enumerate(cart.items, start=1):
        lines.append(f"{n}. {item.name} (Size: {item.size}) - {item.quantity} x {money(item.price, cfg)}")
    lines.append("")
    lines.append(f"Total: {money(cart.get_total(), cfg)}")
    lines.append("")
    lines.append("Please contact me to complete the order.")
    return "\n".join(lines)


def build_checkout_url(message: str, messaging_url: str, recipient: str) -> str:
    return f"{messaging_url.rstrip('/')}/{recipient}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"


def checkout(
    cart: Cart,
    cfg: Settings,
    notices: NoticeBoard,
    opener: Callable[[str], object],
) -> Optional[str]:
    """
    Hand the order off to the messaging service.
    Returns the opened URL, or None when the cart is empty.
    """
    if not cart.items:
        notices.show("Your cart is empty!", NOTICE_WARNING)
        return None

    message = build_order_message(cart, cfg)
    url = build_checkout_url(message, cfg.messaging_url, cfg.whatsapp_number)
    opener(url)
    return url
