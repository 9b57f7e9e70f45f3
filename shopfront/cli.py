from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from shopfront.client.models import Product
from shopfront.client.session import StorefrontSession
from shopfront.config import Settings, settings
from shopfront.constants import ALL_CATEGORIES
from shopfront.utils.formatters import money


def _print_products(products: List[Product], cfg: Settings) -> None:
    if not products:
        print("No products available.")
        return
    for p in products:
        print(f"#{p.id}  {p.name} | {money(p.price, cfg)} | sizes: {', '.join(p.sizes)} | {p.category}")


def _print_cart(session: StorefrontSession) -> None:
    cart, cfg = session.cart, session.settings
    if not cart.items:
        print("Your cart is empty")
        return
    for n, it in enumerate(cart.items, start=1):
        print(f"{n}. #{it.id} {it.name} (Size: {it.size}) - {it.quantity} x {money(it.price, cfg)} = {money(it.line_total, cfg)}")
    print(f"Total: {money(cart.get_total(), cfg)} ({cart.get_count()} items)")


def _print_notices(session: StorefrontSession) -> None:
    for n in reversed(session.notices.active()):
        print(f"[{n.type}] {n.message}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shopfront", description=f"{settings.shop_name} storefront client")
    parser.add_argument("--api", default=settings.api_base_url, help="storefront server base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("products", help="list products")
    p.add_argument("--category", default=ALL_CATEGORIES)

    p = sub.add_parser("show", help="show one product")
    p.add_argument("product_id", type=int)

    p = sub.add_parser("add", help="add a product to the cart")
    p.add_argument("product_id", type=int)
    p.add_argument("size")
    p.add_argument("-q", "--quantity", default="1")

    p = sub.add_parser("update", help="set the quantity of a cart line")
    p.add_argument("product_id", type=int)
    p.add_argument("size")
    p.add_argument("quantity", type=int)

    p = sub.add_parser("remove", help="remove a cart line")
    p.add_argument("product_id", type=int)
    p.add_argument("size")

    sub.add_parser("cart", help="show the cart")
    sub.add_parser("clear", help="empty the cart")

    p = sub.add_parser("checkout", help="send the order via WhatsApp")
    p.add_argument("--no-open", action="store_true", help="print the link instead of opening it")

    return parser


def run(argv: Optional[List[str]] = None, session: Optional[StorefrontSession] = None) -> int:
    args = build_parser().parse_args(argv)

    own_session = session is None
    if session is None:
        session = StorefrontSession(replace(settings, api_base_url=args.api))
    if getattr(args, "no_open", False):
        session.opener = lambda url: None

    try:
        cmd = args.command
        if cmd == "products":
            products = session.filter_products(args.category)
            _print_products(products, session.settings)
        elif cmd == "show":
            product = session.catalog.find_product(args.product_id)
            if product is None:
                print(f"Product #{args.product_id} not found")
                return 1
            _print_products([product], session.settings)
            print(product.description)
        elif cmd == "add":
            ok = session.add_to_cart_from_detail(args.product_id, args.size, args.quantity)
            if not ok and not session.notices.active():
                print(f"Product #{args.product_id} not found")
            _print_notices(session)
            return 0 if ok else 1
        elif cmd == "update":
            session.update_item_quantity(args.product_id, args.size, args.quantity)
            _print_cart(session)
        elif cmd == "remove":
            session.remove_item(args.product_id, args.size)
            _print_cart(session)
        elif cmd == "cart":
            _print_cart(session)
        elif cmd == "clear":
            session.cart.clear()
            print("Cart cleared")
        elif cmd == "checkout":
            url = session.checkout()
            _print_notices(session)
            if url is None:
                return 1
            print(url)
        return 0
    finally:
        if own_session:
            session.close()


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    raise SystemExit(run())


if __name__ == "__main__":
    main()
