from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional

from ..core.constants import DAY_KEY_FORMAT
from ..sheets.model import Cell

_DATE_HEADER_PATTERNS = (
    re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$"),  # MM/DD/YYYY or M/D/YYYY
    re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$"),  # YYYY-M-D
)


class DateNormalizer:
    """Turns inbound ISO dates and stored header cells into day keys (MM/DD/YYYY)."""

    @staticmethod
    def format_day(value: date) -> str:
        return value.strftime(DAY_KEY_FORMAT)

    def day_key(self, iso_date: Optional[Any], *, today: date) -> str:
        """``2025-05-17`` -> ``05/17/2025``; anything malformed falls back to ``today``.

        Part widths pass through unchanged (``2025-5-7`` -> ``5/7/2025``).
        """

        if isinstance(iso_date, str) and iso_date:
            parts = iso_date.split("-")
            if len(parts) == 3 and all(p.isdigit() for p in parts):
                return f"{parts[1]}/{parts[2]}/{parts[0]}"
        return self.format_day(today)

    def render_header(self, cell: Cell) -> Optional[str]:
        """Day key of a date-typed header cell, None for any other cell."""
        if not cell.is_date:
            return None
        return self.format_day(cell.value)

    @staticmethod
    def is_date_header(cell: Cell) -> bool:
        if cell.is_date:
            return True
        if cell.is_empty:
            return False
        text = cell.as_text().strip()
        return any(p.match(text) for p in _DATE_HEADER_PATTERNS)
