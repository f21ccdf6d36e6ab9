from __future__ import annotations

import html
from collections import deque
from dataclasses import dataclass
from typing import Deque, Literal, Tuple

import ipywidgets as w


Level = Literal["info", "warning", "error"]

_COLORS = {
    "error": "#b00020",
    "warning": "#b26a00",
    "info": "#222222",
}


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class HtmlLog:
    """
    Action log of the plot panel, rendered into one HTML widget.

    Repeated messages (same level and text back to back) bump a counter
    instead of adding a row, and only the newest ``max_entries`` rows are kept.
    """

    _ROW = "<div style='color:{color}; white-space:pre-wrap; font-family:monospace;'>{text}</div>"
    _EMPTY = "<div style='color:#666;'>Log is empty.</div>"

    def __init__(self, *, title: str | None = None, height_px: int = 160, max_entries: int = 500) -> None:
        self._entries: Deque[_Entry] = deque(maxlen=int(max_entries))
        self._height_px = int(height_px)
        self.widget = w.HTML()
        if title:
            self.panel = w.VBox([w.HTML(f"<b>{html.escape(str(title))}</b>"), self.widget])
        else:
            self.panel = self.widget
        self.clear()

    @property
    def entries(self) -> Tuple[Tuple[str, str, int], ...]:
        """``(level, message, count)`` for every retained entry, oldest first."""
        return tuple((e.level, e.message, e.count) for e in self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._refresh()

    def info(self, message: str) -> None:
        self._push("info", message)

    def warning(self, message: str) -> None:
        self._push("warning", message)

    def error(self, message: str) -> None:
        self._push("error", message)

    def _push(self, level: Level, message: str) -> None:
        text = str(message) if message is not None else ""
        if self._entries and (self._entries[-1].level, self._entries[-1].message) == (level, text):
            self._entries[-1].count += 1
        else:
            self._entries.append(_Entry(level=level, message=text))
        self._refresh()

    def _row(self, entry: _Entry) -> str:
        text = entry.message if entry.count == 1 else f"{entry.message} (x{entry.count})"
        return self._ROW.format(color=_COLORS[entry.level], text=html.escape(text))

    def _refresh(self) -> None:
        body = "".join(self._row(e) for e in self._entries) or self._EMPTY
        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:8px; height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{body}</div>"
        )
