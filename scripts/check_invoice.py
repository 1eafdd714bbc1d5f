"""
Invoice check script.

Prints the readiness of every line of one invoice, straight from the live
invoice sheet.

Usage:
    python scripts/check_invoice.py --brand BEIS --invoice INV-12345
    python scripts/check_invoice.py --brand BEIS --invoice INV-12345 --today 2026-02-01
"""

import argparse
import os
import sys
from datetime import date

# Allow imports from the project root when running as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from exceptions import SheetFetchError
from models.invoice import QtyStatus
from services.invoice_service import get_invoice_service


def print_header(title: str):
    """Print formatted header."""
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def print_table(headers: list, rows: list, col_widths: list = None):
    """Print formatted table."""
    if not col_widths:
        col_widths = [max(len(str(row[i])) for row in [headers] + rows) + 2
                      for i in range(len(headers))]

    # Header
    header_line = "|".join(str(h).center(w) for h, w in zip(headers, col_widths))
    print(f"|{header_line}|")
    print("|" + "|".join("-" * w for w in col_widths) + "|")

    # Rows
    for row in rows:
        row_line = "|".join(str(v).center(w) for v, w in zip(row, col_widths))
        print(f"|{row_line}|")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Check whether inbound stock covers an invoice."
    )
    parser.add_argument("--brand", required=True, help="Brand label")
    parser.add_argument("--invoice", required=True, help="Invoice number")
    parser.add_argument(
        "--today",
        default=None,
        help="Reference day (YYYY-MM-DD); defaults to the sheet's today cell",
    )
    args = parser.parse_args()

    today = date.fromisoformat(args.today) if args.today else None

    try:
        result = get_invoice_service().find_invoice_status(args.brand, args.invoice, today=today)
    except SheetFetchError as e:
        print(f"ERROR: {e.message}")
        return 1

    print_header(f"INVOICE {args.invoice.upper()} ({args.brand.upper()})")

    if not result.found:
        print("No invoice column matches this brand and invoice number.")
        return 0

    rows = [
        [line.po, line.type, line.color, line.size, line.qty, line.rework,
         line.qty_status.value, line.inv_status]
        for line in result.lines
    ]
    if rows:
        print_table(
            ["PO", "TYPE", "COLOR", "SIZE", "QTY", "REWORK", "QTY STATUS", "EXPORT STATUS"],
            rows,
        )

    ready = sum(1 for line in result.lines if line.qty_status == QtyStatus.READY)
    print(f"\nTarget date: {result.target_date.isoformat() if result.target_date else 'TBA'}")
    print(f"Lines: {result.line_count} ({ready} ready)")
    print(f"Total: {result.total_qty} PCS")
    return 0


if __name__ == "__main__":
    sys.exit(main())
