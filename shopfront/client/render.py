from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, pass_context, select_autoescape

from shopfront.client.cart import Cart
from shopfront.client.models import Product
from shopfront.client.notices import Notice
from shopfront.config import Settings
from shopfront.utils.formatters import money

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


@pass_context
def _money_filter(ctx, v):
    return money(v, ctx.get("cfg"))


env.filters["money"] = _money_filter


@dataclass(frozen=True)
class CartView:
    items_html: str
    total_text: str
    is_empty: bool


def render_product_grid(products: Iterable[Product], cfg: Optional[Settings] = None) -> str:
    return env.get_template("product_grid.html").render(products=list(products), cfg=cfg)


def render_product_detail(product: Product, cfg: Optional[Settings] = None) -> str:
    return env.get_template("product_detail.html").render(product=product, cfg=cfg)


def render_cart(cart: Cart, cfg: Optional[Settings] = None) -> CartView:
    items = list(cart.items)
    html = env.get_template("cart_items.html").render(items=items, cfg=cfg)
    return CartView(items_html=html, total_text=money(cart.get_total(), cfg), is_empty=not items)


def render_notices(notices: List[Notice]) -> str:
    return env.get_template("notices.html").render(notices=notices)
