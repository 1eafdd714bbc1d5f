"""
Unit tests for production stats and derived row fields.
"""

from datetime import date
from decimal import Decimal
import itertools
import pytest

from models.production import DailyLog, ProductionRecord, ProductionStatus
from services.production_stats_service import (
    aggregate,
    active_line,
    build_rows,
    filter_records,
    production_status,
    progress_pct,
)


def make_record(**overrides) -> ProductionRecord:
    data = {
        "work_order_number": "WO-1",
        "model_type": "CARRY ON 20",
        "beis_po": "BEIS-001",
        "order_qty": Decimal("1000"),
        "produced_qty": Decimal("400"),
        "remaining_qty": Decimal("600"),
        "production_date": "2026-03-01",
    }
    data.update(overrides)
    return ProductionRecord(**data)


# ===================
# AGGREGATE TESTS
# ===================

class TestAggregate:
    """Tests for stats folding."""

    def test_empty_input_is_all_zero(self):
        stats = aggregate([])
        assert stats.total_order == 0
        assert stats.total_produced == 0
        assert stats.total_remaining == 0
        assert stats.completion_rate == 0

    def test_sums_and_rate(self):
        records = [
            make_record(order_qty=Decimal("1000"), produced_qty=Decimal("400"), remaining_qty=Decimal("600")),
            make_record(order_qty=Decimal("3000"), produced_qty=Decimal("600"), remaining_qty=Decimal("2500")),
        ]
        stats = aggregate(records)
        assert stats.total_order == Decimal("4000")
        assert stats.total_produced == Decimal("1000")
        assert stats.total_remaining == Decimal("3100")
        assert stats.completion_rate == Decimal("25")

    def test_zero_orders_gives_zero_rate(self):
        records = [make_record(order_qty=Decimal("0"), produced_qty=Decimal("50"))]
        assert aggregate(records).completion_rate == 0

    def test_permutation_invariant(self):
        records = [
            make_record(order_qty=Decimal("3"), produced_qty=Decimal("1"), remaining_qty=Decimal("2")),
            make_record(order_qty=Decimal("7.5"), produced_qty=Decimal("2.25"), remaining_qty=Decimal("5")),
            make_record(order_qty=Decimal("11"), produced_qty=Decimal("13"), remaining_qty=Decimal("0")),
        ]
        expected = aggregate(records)
        for permutation in itertools.permutations(records):
            assert aggregate(permutation) == expected

    def test_remaining_is_summed_as_reported(self):
        """Totals use reported remaining, not order minus produced."""
        stats = aggregate([make_record(remaining_qty=Decimal("999"))])
        assert stats.total_remaining == Decimal("999")


# ===================
# ROW FIELD TESTS
# ===================

class TestProgress:
    def test_progress(self):
        assert progress_pct(make_record()) == Decimal("40")

    def test_zero_order(self):
        assert progress_pct(make_record(order_qty=Decimal("0"))) == 0


class TestActiveLine:
    def test_row_line_wins(self):
        assert active_line(make_record(extracted_line="Line 8")) == "Line 8"

    def test_first_daily_line_with_output(self):
        record = make_record(daily_log=[
            DailyLog(date="2026-01-26", line="Line 1", shift="S1", qty=Decimal("0")),
            DailyLog(date="2026-01-27", line="Line 4", shift="S1", qty=Decimal("30")),
        ])
        assert active_line(record) == "Line 4"

    def test_idle(self):
        assert active_line(make_record()) == "Idle"


class TestProductionStatus:
    """Tests for row status."""

    def test_finished_wins(self, today):
        record = make_record(remaining_qty=Decimal("0"), production_date="On Producing")
        assert production_status(record, today) == (ProductionStatus.FINISHED, "Finished")

    def test_negative_remaining_is_finished(self, today):
        status, _ = production_status(make_record(remaining_qty=Decimal("-5")), today)
        assert status == ProductionStatus.FINISHED

    def test_no_date_no_status(self, today):
        assert production_status(make_record(production_date=""), today) == (None, None)

    def test_on_producing_marker(self, today):
        status, label = production_status(make_record(production_date="on PRODUCING"), today)
        assert status == ProductionStatus.PRODUCING
        assert label == "Producing"

    def test_past_date_is_producing(self, today):
        status, _ = production_status(make_record(production_date="2026-02-09"), today)
        assert status == ProductionStatus.PRODUCING

    @pytest.mark.parametrize("production_date,label", [
        ("2026-02-10", "Plan on 10-02-2026"),
        ("2026-03-01", "Plan on 01-03-2026"),
        ("TBA", "Plan on TBA"),
    ])
    def test_planned(self, today, production_date, label):
        status, shown = production_status(make_record(production_date=production_date), today)
        assert status == ProductionStatus.PLANNED
        assert shown == label


class TestFilterRecords:
    """Tests for the search filter."""

    @pytest.fixture
    def records(self):
        return [
            make_record(work_order_number="WO-100", model_type="Trolley", beis_po="B-1"),
            make_record(work_order_number="WO-200", model_type="Backpack", beis_po="B-2"),
            make_record(work_order_number="WO-300", model_type="Tote", beis_po="X-TROLL"),
        ]

    def test_blank_keeps_all(self, records):
        assert len(filter_records(records, None)) == 3
        assert len(filter_records(records, "  ")) == 3

    def test_matches_work_order(self, records):
        assert [r.work_order_number for r in filter_records(records, "wo-2")] == ["WO-200"]

    def test_matches_model_and_beis_po(self, records):
        found = filter_records(records, "troll")
        assert [r.work_order_number for r in found] == ["WO-100", "WO-300"]


class TestBuildRows:
    def test_rows_carry_derived_fields(self, today):
        rows = build_rows([make_record(extracted_line="Line 2")], today=today)
        assert len(rows) == 1
        assert rows[0].status == ProductionStatus.PLANNED
        assert rows[0].status_label == "Plan on 01-03-2026"
        assert rows[0].active_line == "Line 2"
        assert rows[0].progress_pct == Decimal("40")
