"""
Text utilities for matching labels typed by hand into the sheets.
"""

import unicodedata
from typing import Any, Optional


def normalize_label(value: Optional[Any]) -> str:
    """
    Normalize a brand or invoice label for comparison.

    - "  beis " → "BEIS"
    - "Inv-0012" → "INV-0012"
    - "ＢＥＩＳ" (fullwidth) → "BEIS"

    Args:
        value: Label as typed by the user or read from a header cell

    Returns:
        Trimmed uppercase string, or "" if input is empty
    """
    if value is None:
        return ""

    label = str(value).strip()

    if not label:
        return ""

    # NFKC folds fullwidth and compatibility characters to their plain forms
    label = unicodedata.normalize('NFKC', label)

    return label.strip().upper()
