from __future__ import annotations

import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class UnknownActionError(Exception):
    pass


class ActionRegistry:
    """Binds the `data-action` names in rendered markup to handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def on(self, name: str, handler: Handler) -> None:
        self._handlers[name] = handler

    def dispatch(self, name: str, **params: Any) -> Any:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownActionError(name)
        logger.debug("dispatch %s %s", name, params)
        return handler(**params)
