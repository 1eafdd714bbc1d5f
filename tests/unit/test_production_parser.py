"""
Unit tests for the production sheet parser.
"""

from decimal import Decimal
import pytest

from parsers.production_parser import build_production_records, parse_daily_headers
from tests.factories import GvizFactory, ProductionSheetFactory, gviz_date


# ===================
# TABLE SIZE TESTS
# ===================

class TestTableTooShort:
    """A sheet with fewer than 5 rows is not ready yet."""

    @pytest.mark.parametrize("row_count", [0, 1, 2, 3, 4])
    def test_short_table_yields_empty_list(self, row_count):
        rows = [["x"] * 20 for _ in range(row_count)]
        assert build_production_records(GvizFactory.table(rows)) == []

    def test_header_only_table_yields_empty_list(self):
        """Five rows where the only data row has no work order."""
        table = ProductionSheetFactory.create(rows=[ProductionSheetFactory.row(work_order="")])
        assert build_production_records(table) == []


# ===================
# DAILY HEADER TESTS
# ===================

class TestDailyHeaders:
    """Tests for dynamic daily column discovery."""

    def test_headers_discovered_from_row_zero(self, production_table):
        headers = parse_daily_headers(production_table)
        assert len(headers) == 3
        assert headers[0].date == "2026-01-26"
        assert headers[0].line == "Line 8"
        assert headers[0].shift == "Shift 1"

    def test_line_falls_back_to_date_cell_label(self, production_table):
        """Column without a line label uses the line in its date cell."""
        headers = parse_daily_headers(production_table)
        assert headers[2].date == "2026-01-28"
        assert headers[2].line == "Line 3"

    def test_header_count_grows_with_sheet(self):
        """Appending a day to the sheet adds a header; no fixed width."""
        days = [(gviz_date(2026, 1, d), "Line 1", "S1") for d in range(1, 11)]
        table = ProductionSheetFactory.create(daily_headers=days, rows=[ProductionSheetFactory.row()])
        assert len(parse_daily_headers(table)) == 10

    def test_no_daily_columns(self):
        table = ProductionSheetFactory.create(rows=[ProductionSheetFactory.row()])
        assert parse_daily_headers(table) == []


# ===================
# RECORD TESTS
# ===================

class TestBuildProductionRecords:
    """Tests for row-to-record mapping."""

    def test_rows_without_work_order_are_skipped(self, production_table):
        records = build_production_records(production_table)
        assert [r.work_order_number for r in records] == ["WO-0001", "00012", "WO-0003"]

    def test_descriptive_fields(self, production_table):
        record = build_production_records(production_table)[0]
        assert record.uli_po == "ULI-001"
        assert record.beis_po == "BEIS-001"
        assert record.model_type == "CARRY ON 20"
        assert record.size == "20"
        assert record.color == "PINK"

    def test_formatted_string_preferred(self, production_table):
        """Formatted '00012' keeps its leading zeros."""
        record = build_production_records(production_table)[1]
        assert record.work_order_number == "00012"

    def test_production_date_from_formatted_cell(self, production_table):
        """Column 0 display text wins over the raw date token."""
        record = build_production_records(production_table)[0]
        assert record.production_date == "2026-01-26"
        assert record.extracted_line == "Line 8"

    def test_on_producing_passthrough(self, production_table):
        record = build_production_records(production_table)[1]
        assert record.production_date == "On Producing"
        assert record.extracted_line == "N/A"

    def test_short_date_with_default_year(self, production_table):
        record = build_production_records(production_table, default_year=2030)[2]
        assert record.production_date == "2030-03-15"
        assert record.extracted_line == "Line 2"

    def test_quantities_with_thousands_separators(self, production_table):
        record = build_production_records(production_table)[1]
        assert record.order_qty == Decimal("2500")
        assert record.produced_qty == Decimal("1000")
        assert record.remaining_qty == Decimal("1500")

    def test_bad_quantities_default_to_zero(self, production_table):
        record = build_production_records(production_table)[2]
        assert record.order_qty == Decimal("0")
        assert record.produced_qty == Decimal("0")

    def test_remaining_is_not_recomputed(self):
        """Sheet-reported remaining is kept even when it disagrees."""
        table = ProductionSheetFactory.create(rows=[
            ProductionSheetFactory.row(order_qty=1000, produced_qty=400, remaining_qty=900),
        ])
        record = build_production_records(table)[0]
        assert record.remaining_qty == Decimal("900")

    def test_missing_descriptive_fields_default_to_dash(self):
        table = ProductionSheetFactory.create(rows=[
            ProductionSheetFactory.row(uli_po=None, model_type="", color=None),
        ])
        record = build_production_records(table)[0]
        assert record.uli_po == "-"
        assert record.model_type == "-"
        assert record.color == "-"


class TestDailyLog:
    """Tests for the embedded daily log."""

    def test_only_defined_values_are_logged(self, production_table):
        records = build_production_records(production_table)
        first, second, third = records

        assert [(d.date, d.qty) for d in first.daily_log] == [
            ("2026-01-26", Decimal("200")),
            ("2026-01-27", Decimal("200")),
        ]
        assert [(d.date, d.line, d.qty) for d in second.daily_log] == [
            ("2026-01-28", "Line 3", Decimal("1000")),
        ]
        assert third.daily_log == []

    def test_log_carries_header_line_and_shift(self, production_table):
        entry = build_production_records(production_table)[0].daily_log[1]
        assert entry.line == "Line 8"
        assert entry.shift == "Shift 2"

    def test_zero_quantity_is_still_logged(self):
        """Zero is a defined value, unlike an absent cell."""
        table = ProductionSheetFactory.create(
            daily_headers=[(gviz_date(2026, 1, 26), "Line 1", "S1")],
            rows=[ProductionSheetFactory.row(daily=[0])],
        )
        log = build_production_records(table)[0].daily_log
        assert len(log) == 1
        assert log[0].qty == Decimal("0")

    def test_unparseable_daily_value_logged_as_zero(self):
        table = ProductionSheetFactory.create(
            daily_headers=[(gviz_date(2026, 1, 26), "Line 1", "S1")],
            rows=[ProductionSheetFactory.row(daily=["x"])],
        )
        assert build_production_records(table)[0].daily_log[0].qty == Decimal("0")


class TestRecordsAreImmutable:
    """Records are frozen once built."""

    def test_assignment_raises(self, production_table):
        from pydantic import ValidationError

        record = build_production_records(production_table)[0]
        with pytest.raises(ValidationError):
            record.remaining_qty = Decimal("0")
