"""Ring buffer of recent log lines, with filtering and per-type colours."""

from __future__ import annotations

from dataclasses import dataclass

from bonobo.log import Logger, LogType

Color = tuple[float, float, float, float]

_DEFAULT_COLOR: Color = (1.0, 1.0, 1.0, 1.0)
_TYPE_COLORS: dict[LogType, Color] = {
    LogType.WARNING: (0.7, 0.4, 0.0, 1.0),
    LogType.ERROR: (0.7, 0.0, 0.0, 1.0),
    LogType.ASSERT: (0.7, 0.0, 0.0, 1.0),
    LogType.PARAM: (0.7, 0.0, 0.0, 1.0),
    LogType.TRIVIA: (0.8, 0.8, 0.8, 1.0),
}


def text_filter_passes(filter_text: str, text: str) -> bool:
    """Match ``text`` against a comma-separated "incl,-excl" filter, case-insensitively."""
    terms = [term.strip() for term in filter_text.split(",")]
    terms = [term for term in terms if term]
    if not terms:
        return True
    haystack = text.lower()
    includes = 0
    for term in terms:
        if term.startswith("-"):
            needle = term[1:]
            if needle and needle.lower() in haystack:
                return False
        else:
            includes += 1
            if term.lower() in haystack:
                return True
    return includes == 0


@dataclass
class _Row:
    text: str = ""
    length: int = 0
    log_type: LogType = LogType.TRIVIA


class LogView:
    """Keeps the most recent ``rows`` messages, each cut to ``width - 1`` characters."""

    def __init__(self, rows: int = 64, width: int = 512) -> None:
        if rows <= 0 or width <= 0:
            raise ValueError("rows and width must be positive")
        self.width = width
        self._rows = [_Row() for _ in range(rows)]
        self._next = 0
        self.auto_scroll = True
        self.scroll_to_bottom = True

    def attach(self, logger: Logger) -> None:
        """Make this view the custom output of ``logger``."""
        logger.set_custom_output(self.feed)
        self.scroll_to_bottom = True

    def feed(self, log_type: LogType, message: str) -> None:
        row = self._rows[self._next]
        row.text = message[: self.width - 1]
        row.length = len(message)
        row.log_type = LogType(log_type)
        self._next = (self._next + 1) % len(self._rows)
        self.scroll_to_bottom = True

    def clear(self) -> None:
        for row in self._rows:
            row.length = 0
        self._next = 0
        self.scroll_to_bottom = True

    def entries(self, filter_text: str = "") -> list[tuple[LogType, str]]:
        """Stored messages, oldest first, that pass ``filter_text``."""
        count = len(self._rows)
        ordered = self._rows[self._next:] + self._rows[: self._next]
        assert len(ordered) == count
        return [
            (row.log_type, row.text)
            for row in ordered
            if row.length != 0 and text_filter_passes(filter_text, row.text)
        ]

    def color(self, log_type: LogType) -> Color:
        return _TYPE_COLORS.get(LogType(log_type), _DEFAULT_COLOR)