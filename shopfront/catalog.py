from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Optional, Tuple

from shopfront.constants import ERR_CATALOG_BROKEN, ERR_CATALOG_MISSING

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Catalog file is missing or cannot be parsed."""


class CatalogStore:
    """
    Держит каталог в памяти:
    - файл перечитывается только когда меняется его mtime/размер или после reload()
    - если файла нет, каждый запрос получает CatalogError
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._data: Any = None
        self._stamp: Optional[Tuple[int, int]] = None

    def _file_stamp(self) -> Tuple[int, int]:
        st = os.stat(self.path)
        return st.st_mtime_ns, st.st_size

    def _read(self) -> Any:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        # отдаём как есть, даже если формат неожиданный
        if not isinstance(data, dict) or not isinstance(data.get("products"), list):
            logger.warning("Catalog %s has no 'products' list, serving it unchanged", self.path)
        return data

    def get(self) -> Any:
        with self._lock:
            if not self.path.is_file():
                self._data = None
                self._stamp = None
                logger.error("Catalog file not found: %s", self.path)
                raise CatalogError(ERR_CATALOG_MISSING)

            try:
                stamp = self._file_stamp()
                if self._stamp is None or stamp != self._stamp:
                    self._data = self._read()
                    self._stamp = stamp
                    logger.info("Catalog loaded from %s", self.path)
            except (OSError, ValueError) as e:
                self._data = None
                self._stamp = None
                logger.exception("Error reading products: %s", e)
                raise CatalogError(ERR_CATALOG_BROKEN) from e

            return self._data

    def reload(self) -> Any:
        with self._lock:
            self._data = None
            self._stamp = None
        return self.get()
