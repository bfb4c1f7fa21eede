from __future__ import annotations

from datetime import date


def today_iso() -> str:
    """Today's local date as YYYY-MM-DD.

    Note: Wrapped so tests can patch it.
    """
    return date.today().strftime("%Y-%m-%d")
