"""
External integrations.
"""

from integrations.sheets_feed import SheetSource, fetch_table, decode_gviz_response

__all__ = [
    "SheetSource",
    "fetch_table",
    "decode_gviz_response",
]
