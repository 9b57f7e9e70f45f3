from __future__ import annotations

from typing import Optional

from shopfront.config import Settings, settings


def money(v: float, cfg: Optional[Settings] = None) -> str:
    cfg = cfg or settings
    sign = "-" if v < 0 else ""
    return f"{sign}{cfg.currency_symbol}{abs(v):,.{cfg.decimals}f}"
