from __future__ import annotations

import logging
import webbrowser
from typing import Any, Callable, Dict, List, Optional

from shopfront.client.cart import Cart
from shopfront.client.catalog import CatalogClient, filter_by_category
from shopfront.client.checkout import checkout
from shopfront.client.events import ActionRegistry
from shopfront.client.models import Product
from shopfront.client.notices import NoticeBoard
from shopfront.client.render import CartView, render_cart, render_notices, render_product_detail, render_product_grid
from shopfront.client.storage import LocalStorage
from shopfront.config import Settings, settings as default_settings
from shopfront.constants import ALL_CATEGORIES, CART_STORAGE_KEY, NOTICE_SUCCESS, NOTICE_WARNING
from shopfront.utils.validators import parse_quantity, parse_whole_number

logger = logging.getLogger(__name__)

# id контейнеров на страницах
PRODUCTS_CONTAINER = "productsContainer"
PRODUCT_MODAL = "productModal"
CART_ITEMS = "cartItems"
CART_TOTAL = "cartTotal"
NOTICES = "notices"


class StorefrontSession:
    """
    Everything one shopper's client needs: cart, catalog access, notices and
    the rendered page regions. Built once per client process and passed around.
    """

    def __init__(
        self,
        cfg: Optional[Settings] = None,
        storage: Optional[LocalStorage] = None,
        catalog: Optional[CatalogClient] = None,
        opener: Optional[Callable[[str], Any]] = None,
        notices: Optional[NoticeBoard] = None,
    ) -> None:
        self.settings = cfg or default_settings
        self.storage = storage or LocalStorage(self.settings.cart_storage_path)
        self.catalog = catalog or CatalogClient(self.settings.api_base_url, timeout=self.settings.http_timeout)
        self.opener = opener or webbrowser.open
        self.notices = notices or NoticeBoard()
        self.notices.on_change(self.render_notice_area)

        self.cart = Cart(self.storage, CART_STORAGE_KEY)
        self.cart_count = 0
        self.cart.on_change(self._set_cart_count)

        self.page: Optional[str] = None
        self.views: Dict[str, str] = {}
        self.actions = ActionRegistry()
        self._bind_actions()

    def _bind_actions(self) -> None:
        self.actions.on("product.open", lambda product_id: self.open_product(int(product_id)))
        self.actions.on(
            "product.add",
            lambda product_id, size, quantity=1: self.add_to_cart_from_detail(int(product_id), size, quantity),
        )
        self.actions.on(
            "cart.update",
            lambda product_id, size, quantity: self.update_item_quantity(int(product_id), size, quantity),
        )
        self.actions.on("cart.remove", lambda product_id, size: self.remove_item(int(product_id), size))
        self.actions.on("catalog.filter", lambda category: self.filter_products(category))
        self.actions.on("notice.dismiss", lambda notice_id: self.notices.dismiss(int(notice_id)))
        self.actions.on("checkout", lambda: self.checkout())

    def _set_cart_count(self, count: int) -> None:
        self.cart_count = count

    # ---------------- page lifecycle ----------------

    def start(self, page: str) -> None:
        self.page = page
        self.views = {}
        self.cart.update_cart_count()
        self.render_notice_area()

        if page == "store":
            self.show_products(self.catalog.load_products())
        elif page == "cart":
            self.render_cart_items()

    # ---------------- products ----------------

    def show_products(self, products: List[Product]) -> str:
        html = render_product_grid(products, self.settings)
        self.views[PRODUCTS_CONTAINER] = html
        return html

    def filter_products(self, category: str = ALL_CATEGORIES) -> List[Product]:
        products = filter_by_category(self.catalog.load_products(), category)
        self.show_products(products)
        return products

    def open_product(self, product_id: int) -> Optional[str]:
        product = self.catalog.find_product(product_id)
        if product is None:
            return None
        html = render_product_detail(product, self.settings)
        self.views[PRODUCT_MODAL] = html
        return html

    # ---------------- cart ----------------

    def add_to_cart_from_detail(self, product_id: int, size: str, quantity: Any = 1) -> bool:
        try:
            qty = parse_quantity(quantity)
        except ValueError as e:
            logger.info("Rejected quantity %r: %s", quantity, e)
            self.notices.show("Please enter a valid quantity.", NOTICE_WARNING)
            return False

        product = self.catalog.find_product(product_id)
        if product is None:
            return False
        if product.sizes and size not in product.sizes:
            self.notices.show(f"Size {size} is not available for {product.name}.", NOTICE_WARNING)
            return False

        self.cart.add_item(product, size, qty)
        self.notices.show(f"{product.name} added to cart!", NOTICE_SUCCESS)
        self.views.pop(PRODUCT_MODAL, None)
        return True

    def render_cart_items(self) -> CartView:
        view = render_cart(self.cart, self.settings)
        self.views[CART_ITEMS] = view.items_html
        self.views[CART_TOTAL] = view.total_text
        return view

    def update_item_quantity(self, product_id: int, size: str, quantity: Any) -> CartView:
        # 0 и отрицательные удаляют строку, мусор из поля ввода корзину не трогает
        try:
            qty = parse_whole_number(quantity)
        except ValueError as e:
            logger.info("Rejected quantity %r: %s", quantity, e)
            self.notices.show("Please enter a valid quantity.", NOTICE_WARNING)
            return self.render_cart_items()
        self.cart.update_quantity(product_id, size, qty)
        return self.render_cart_items()

    def remove_item(self, product_id: int, size: str) -> CartView:
        self.cart.remove_item(product_id, size)
        return self.render_cart_items()

    def render_notice_area(self) -> str:
        html = render_notices(self.notices.active())
        self.views[NOTICES] = html
        return html

    def checkout(self) -> Optional[str]:
        return checkout(self.cart, self.settings, self.notices, self.opener)

    def close(self) -> None:
        self.catalog.close()
