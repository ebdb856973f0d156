"""Tests for the extraction and aggregation pipeline."""

import logging
from datetime import date

import pytest

from loan_history.config import ExtractionConfig, ReportConfig
from loan_history.exceptions import EmptyCalendarError
from loan_history.models import LoanGroup, LoanOperation, MonthlySeries
from loan_history.parsing import parse_decimal_comma
from loan_history.pipeline import (
    LoanReport,
    aggregate_monthly,
    build_series,
    group_by_loan,
    iter_loan_operations,
    month_span,
    select_loan_operations,
    sort_group,
)


def _operation(
    order_date: str,
    loan_id: str = "42",
    principal: str = "1,00",
    interest: str = "0,10",
) -> LoanOperation:
    return LoanOperation(
        order_date=order_date,
        exec_date=order_date,
        type="Spłata kredytu",
        amount=None,  # type: ignore[arg-type]
        ending_balance=None,  # type: ignore[arg-type]
        principal=principal,
        interest=interest,
        capitalized_interest="0,00",
        penalty_interest="0,00",
        loan_id=loan_id,
    )


class TestSelectLoanOperations:
    """Tests for transaction selection."""

    def test_selects_matching_repayments(self, sample_history) -> None:
        """Test that only parseable repayments are kept, in input order."""
        operations = select_loan_operations(sample_history)

        assert [op.loan_id for op in operations] == ["42", "77", "42", "42"]
        assert operations[0].order_date == "2024-01-10"

    def test_label_is_trimmed(self, transaction_factory, sample_description) -> None:
        """Test that whitespace around the category label is ignored."""
        tx = transaction_factory("2024-03-15", sample_description, tx_type="  Spłata kredytu\n")

        assert len(select_loan_operations([tx])) == 1

    def test_other_category_excluded(self, transaction_factory, sample_description) -> None:
        """Test that another category is excluded whatever its description."""
        tx = transaction_factory("2024-03-15", sample_description, tx_type="Inna operacja")

        assert select_loan_operations([tx]) == []

    def test_missing_identifier_excluded(self, transaction_factory) -> None:
        """Test that a description without loan number is excluded."""
        tx = transaction_factory("2024-03-15", "KAPITAŁ: 100,00 ODSETKI: 20,00 ODSETKI SKAPIT.: 5,00")

        assert select_loan_operations([tx]) == []

    def test_custom_label(self, transaction_factory, sample_description) -> None:
        """Test selecting with another repayment label."""
        tx = transaction_factory("2024-03-15", sample_description, tx_type="Rata kredytu")

        assert select_loan_operations([tx]) == []
        assert len(select_loan_operations([tx], repayment_label="Rata kredytu")) == 1

    def test_iter_is_lazy(self, transaction_factory, sample_description) -> None:
        """Test that iteration consumes input on demand."""
        consumed = []

        def source():
            for day in ("2024-01-01", "2024-02-01"):
                consumed.append(day)
                yield transaction_factory(day, sample_description)

        iterator = iter_loan_operations(source())
        next(iterator)

        assert consumed == ["2024-01-01"]

    def test_skip_logged_at_debug(self, transaction_factory, caplog: pytest.LogCaptureFixture) -> None:
        """Test that skipped repayments are reported at DEBUG level."""
        caplog.set_level(logging.DEBUG, logger="loan_history")
        tx = transaction_factory("2024-03-15", "brak danych")

        select_loan_operations([tx])

        assert "no breakdown" in caplog.text


class TestGroupByLoan:
    """Tests for grouping and sorting."""

    def test_groups_in_first_seen_order(self, sample_history) -> None:
        """Test grouping keeps identifier and operation order."""
        groups = group_by_loan(select_loan_operations(sample_history))

        assert list(groups) == ["42", "77"]
        assert [op.order_date for op in groups["42"].operations] == [
            "2024-01-10",
            "2024-03-05",
            "2024-03-05",
        ]
        assert all(isinstance(g, LoanGroup) and len(g) > 0 for g in groups.values())

    def test_exact_identifier_match(self) -> None:
        """Test that identifiers are compared as exact strings."""
        groups = group_by_loan([_operation("2024-01-01", "042"), _operation("2024-01-01", "42")])

        assert set(groups) == {"042", "42"}

    def test_empty(self) -> None:
        """Test that no operations give no groups."""
        assert group_by_loan([]) == {}

    def test_sort_is_stable(self) -> None:
        """Test that same-day operations keep their input order."""
        group = LoanGroup(
            "42",
            [
                _operation("2024-03-05", principal="3,00"),
                _operation("2024-01-10", principal="1,00"),
                _operation("2024-03-05", principal="4,00"),
                _operation("2024-02-01", principal="2,00"),
            ],
        )

        result = sort_group(group)

        assert [op.principal for op in result.operations] == ["1,00", "2,00", "3,00", "4,00"]
        assert [op.principal for op in group.operations][0] == "3,00"

    def test_unparseable_dates_sort_first(self) -> None:
        """Test that operations with a bad date go to the front."""
        group = LoanGroup("42", [_operation("2024-01-10"), _operation("zły")])

        assert sort_group(group).operations[0].order_date == "zły"


class TestMonthSpan:
    """Tests for month calendars."""

    def test_single_month(self) -> None:
        """Test dates within one month."""
        assert month_span([date(2024, 3, 1), date(2024, 3, 31)]) == ["2024-03"]

    def test_single_date(self) -> None:
        """Test a single date."""
        assert month_span([date(2024, 3, 15)]) == ["2024-03"]

    def test_gap_filled(self) -> None:
        """Test that months without dates are included."""
        assert month_span([date(2024, 1, 10), date(2024, 3, 5)]) == [
            "2024-01",
            "2024-02",
            "2024-03",
        ]

    def test_year_boundary(self) -> None:
        """Test spanning the turn of the year."""
        assert month_span([date(2023, 11, 30), date(2024, 2, 1)]) == [
            "2023-11",
            "2023-12",
            "2024-01",
            "2024-02",
        ]

    @pytest.mark.parametrize(
        ("first", "last"),
        [
            (date(2020, 1, 1), date(2020, 1, 31)),
            (date(2020, 1, 31), date(2020, 2, 1)),
            (date(2019, 6, 15), date(2024, 5, 14)),
            (date(2000, 12, 1), date(2001, 12, 1)),
        ],
    )
    def test_complete_and_increasing(self, first: date, last: date) -> None:
        """Test length, uniqueness and ordering of the calendar."""
        months = month_span([first, last])
        expected_len = (last.year - first.year) * 12 + last.month - first.month + 1

        assert len(months) == expected_len
        assert len(set(months)) == len(months)
        assert all(a < b for a, b in zip(months, months[1:]))
        assert months[0] == f"{first.year:04d}-{first.month:02d}"
        assert months[-1] == f"{last.year:04d}-{last.month:02d}"

    def test_empty_fails_loudly(self) -> None:
        """Test that an empty date set is a contract violation."""
        with pytest.raises(EmptyCalendarError):
            month_span([])

    def test_descending_fails_loudly(self) -> None:
        """Test that a descending date set is a contract violation."""
        with pytest.raises(EmptyCalendarError):
            month_span([date(2024, 3, 1), date(2024, 1, 1)])


class TestAggregateMonthly:
    """Tests for monthly aggregation."""

    def test_zero_fill(self) -> None:
        """Test that months without operations are zero."""
        group = LoanGroup("42", [_operation("2024-01-10", principal="100,00", interest="20,00"),
                                 _operation("2024-03-05", principal="110,00", interest="18,50")])

        series = aggregate_monthly(group, ["2024-01", "2024-02", "2024-03"])

        assert series.months == ("2024-01", "2024-02", "2024-03")
        assert series.principal == (100.0, 0.0, 110.0)
        assert series.interest == (20.0, 0.0, 18.5)

    def test_same_month_summed(self) -> None:
        """Test that operations in one month are added up."""
        group = LoanGroup("42", [_operation("2024-01-01", principal="1,50"),
                                 _operation("2024-01-31", principal="2,25")])

        series = aggregate_monthly(group, ["2024-01"])

        assert series.principal == (pytest.approx(3.75),)

    def test_bad_date_skipped(self) -> None:
        """Test that an operation with an unparseable date is left out."""
        group = LoanGroup("42", [_operation("2024-13-01", principal="99,00"),
                                 _operation("2024-01-05", principal="1,00")])

        series = aggregate_monthly(group, ["2024-01"])

        assert series.principal == (1.0,)

    def test_malformed_amount_is_zero(self) -> None:
        """Test that a malformed amount counts as zero."""
        group = LoanGroup("42", [_operation("2024-01-05", principal="1,2,3", interest="x")])

        series = aggregate_monthly(group, ["2024-01"])

        assert series.principal == (0.0,)
        assert series.interest == (0.0,)

    def test_conservation(self) -> None:
        """Test that monthly sums add up to the sum over valid operations."""
        operations = [
            _operation("2023-12-31", principal="10,10", interest="1,01"),
            _operation("2024-01-01", principal="20,20", interest="2,02"),
            _operation("nie-data", principal="500,00", interest="50,00"),
            _operation("2024-04-15", principal="30,30", interest="3,03"),
            _operation("2024-04-16", principal="40,40", interest="4,04"),
        ]
        series = build_series(sort_group(LoanGroup("42", operations)))
        valid = [op for op in operations if op.order_date != "nie-data"]

        assert series is not None
        assert len(series.months) == 5
        assert series.total_principal == pytest.approx(sum(parse_decimal_comma(op.principal) for op in valid))
        assert series.total_interest == pytest.approx(sum(parse_decimal_comma(op.interest) for op in valid))

    def test_build_series_ignores_bad_dates_for_span(self) -> None:
        """Test that only valid dates define the calendar span."""
        group = LoanGroup("42", [_operation("0000-00-00"), _operation("2024-05-05")])

        series = build_series(sort_group(group))

        assert series is not None
        assert series.months == ("2024-05",)

    def test_build_series_all_dates_bad(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a group without valid dates has no series."""
        caplog.set_level(logging.WARNING, logger="loan_history")
        group = LoanGroup("42", [_operation("15.03.2024")])

        assert build_series(group) is None
        assert "no valid order dates" in caplog.text
        assert caplog.records[-1].loan_id == "42"


class TestLoanReport:
    """End-to-end tests for LoanReport."""

    def test_single_repayment(self, transaction_factory) -> None:
        """Test one repayment gives one single-month series."""
        tx = transaction_factory(
            "2024-03-15", "KAPITAŁ: 100,00 ODSETKI: 20,00 ODSETKI SKAPIT.: 5,00 999"
        )

        series = LoanReport().build([tx])

        assert list(series) == ["999"]
        assert series["999"] == MonthlySeries("999", ("2024-03",), (100.0,), (20.0,))

    def test_penalty_captured_but_not_summed(self, transaction_factory) -> None:
        """Test that penalty interest is extracted but not aggregated."""
        tx = transaction_factory(
            "2024-03-15",
            "KAPITAŁ: 100,00 ODSETKI: 20,00 ODSETKI SKAPIT.: 5,00 ODSETKI KARNE: 3,00 999",
        )
        report = LoanReport()

        groups = report.group([tx])
        series = report.build([tx])

        assert groups["999"].operations[0].penalty_interest == "3,00"
        assert series["999"].principal == (100.0,)
        assert series["999"].interest == (20.0,)

    def test_gap_month(self, transaction_factory, description_factory) -> None:
        """Test a month without repayments appears with zero sums."""
        history = [
            transaction_factory("2024-01-10", description_factory(loan_id="42")),
            transaction_factory("2024-03-05", description_factory(loan_id="42")),
        ]

        series = LoanReport().build(history)["42"]

        assert series.months == ("2024-01", "2024-02", "2024-03")
        assert series.principal[1] == 0.0
        assert series.interest[1] == 0.0

    def test_other_category_excluded(self, transaction_factory, sample_description) -> None:
        """Test that a non-repayment category produces nothing."""
        tx = transaction_factory("2024-03-15", sample_description, tx_type="Inna operacja")

        assert LoanReport().build([tx]) == {}

    def test_missing_identifier_excluded(self, transaction_factory) -> None:
        """Test that a description without loan number produces nothing."""
        tx = transaction_factory("2024-03-15", "KAPITAŁ: 100,00 ODSETKI: 20,00 ODSETKI SKAPIT.: 5,00")

        assert LoanReport().build([tx]) == {}

    def test_unsorted_history(self, sample_history) -> None:
        """Test a mixed history with two loans."""
        series = LoanReport().build(list(reversed(sample_history)))

        assert set(series) == {"42", "77"}
        assert series["42"].months == ("2024-01", "2024-02", "2024-03")
        assert series["42"].principal == pytest.approx((100.0, 0.0, 111.0))
        assert series["42"].interest == pytest.approx((20.0, 0.0, 19.0))
        assert series["77"].months == ("2024-01",)

    def test_parallel_matches_sequential(self, sample_history) -> None:
        """Test that a process pool gives the same result."""
        sequential = LoanReport().build(sample_history)
        parallel = LoanReport(workers=2).build(sample_history)

        assert parallel == sequential
        assert list(parallel) == list(sequential)

    def test_config_overrides(self, transaction_factory, sample_description) -> None:
        """Test that ReportConfig sets label and workers."""
        config = ReportConfig(extraction=ExtractionConfig(repayment_label="Rata"), workers=3)
        report = LoanReport(workers=1, config=config)

        assert report.workers == 3
        assert report.extraction.repayment_label == "Rata"
        assert report.build([transaction_factory("2024-01-01", sample_description, tx_type="Rata")])

    def test_emit_closes_sink(self) -> None:
        """Test that every series is written and the sink closed."""
        calls = []

        class RecordingSink:
            def write_series(self, series: MonthlySeries) -> None:
                calls.append(series.loan_id)

            def close(self) -> None:
                calls.append("closed")

        series = {
            "1": MonthlySeries("1", ("2024-01",), (1.0,), (0.0,)),
            "2": MonthlySeries("2", ("2024-01",), (2.0,), (0.0,)),
        }
        LoanReport.emit(series, RecordingSink())

        assert calls == ["1", "2", "closed"]
