from typing import Any, Dict, Optional

from doctor.common.messages import MESSAGES
from .protocols import Renderer


class MessageBus:
    def __init__(self, catalog: Optional[Dict[str, str]] = None):
        self._renderer: Optional[Renderer] = None
        self._catalog = catalog if catalog is not None else MESSAGES

    def set_renderer(self, renderer: Optional[Renderer]):
        self._renderer = renderer

    def resolve(self, msg_id: str, **kwargs: Any) -> str:
        # Unknown ids render as themselves so ad-hoc messages still get through.
        template = self._catalog.get(msg_id, msg_id)
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            return f"<formatting_error for '{msg_id}'>"

    def _render(self, level: str, msg_id: str, **kwargs: Any) -> None:
        if not self._renderer:
            return
        self._renderer.render(self.resolve(msg_id, **kwargs), level)

    def debug(self, msg_id: str, **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: str, **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: str, **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: str, **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: str, **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)


# Global singleton instance
bus = MessageBus()
