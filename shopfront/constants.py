PAGES = {
    "about": "about.html",
    "store": "store.html",
    "cart": "cart.html",
    "contact": "contact.html",
}

HOME_PAGE = "index.html"
NOT_FOUND_PAGE = "404.html"

# ключ, под которым корзина лежит в локальном хранилище клиента
CART_STORAGE_KEY = "beliversCart"

ALL_CATEGORIES = "all"

NOTICE_INFO = "info"
NOTICE_SUCCESS = "success"
NOTICE_WARNING = "warning"
NOTICE_TTL_SECONDS = 5.0

ERR_CATALOG_MISSING = "Products file not found"
ERR_CATALOG_BROKEN = "Failed to load products"
