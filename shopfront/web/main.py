from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from shopfront.catalog import CatalogError, CatalogStore
from shopfront.config import Settings, settings as default_settings
from shopfront.constants import HOME_PAGE, NOT_FOUND_PAGE, PAGES

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _static_file(name: str) -> Optional[Path]:
    p = (STATIC_DIR / name).resolve()
    if p.parent != STATIC_DIR.resolve() or not p.is_file():
        return None
    return p


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    cfg = cfg or default_settings
    catalog = CatalogStore(cfg.catalog_path)

    app = FastAPI(title=cfg.shop_name)
    app.state.settings = cfg
    app.state.catalog = catalog

    def _render(request: Request, name: str, ctx: dict[str, Any], status_code: int = 200) -> HTMLResponse:
        base = {
            "request": request,
            "shop_name": cfg.shop_name,
            "whatsapp_number": cfg.whatsapp_number,
            "pages": list(PAGES.keys()),
        }
        base.update(ctx)
        return templates.TemplateResponse(request, name, base, status_code=status_code)

    # ---------------- api ----------------

    @app.get("/api/products")
    def api_products():
        try:
            return catalog.get()
        except CatalogError as e:
            return JSONResponse(status_code=500, content={"error": str(e)})

    @app.get("/health")
    def health():
        return {"status": "ok", "message": f"{cfg.shop_name} server is running"}

    # ---------------- pages ----------------

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return _render(request, HOME_PAGE, {"active_page": "home"})

    @app.get("/{page}")
    def page(request: Request, page: str):
        name = page.lower()
        if name in PAGES:
            return _render(request, PAGES[name], {"active_page": name})

        # одиночные файлы из public (favicon.ico, robots.txt)
        asset = _static_file(page)
        if asset is not None:
            return FileResponse(str(asset))

        logger.info("Page not found: /%s", page)
        return _render(request, NOT_FOUND_PAGE, {"active_page": None}, status_code=404)

    # всё остальное (css/, js/, images/) отдаётся как есть
    if STATIC_DIR.exists():
        app.mount("/", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


app = create_app()
