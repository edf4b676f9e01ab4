"""Terminal rendering of Persian strings for the verbose search log."""

from __future__ import annotations

import arabic_reshaper
from bidi.algorithm import get_display


def process_farsi_text(text: str) -> str:
    """
    Return *text* shaped and reordered for a left-to-right terminal.

    Persian letters are swapped for their joined presentation forms, then
    the line is laid out in right-to-left visual order. Latin runs and
    numbers in the same line keep their reading direction.
    """
    if not text:
        return ""
    return get_display(arabic_reshaper.reshape(text))
