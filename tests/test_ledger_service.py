"""LedgerService tests: form validation and the aggregate snapshot."""

from decimal import Decimal

import pytest

from models.result import ResultStatus
from services.ledger_service import (
    LedgerService, LedgerSnapshot, can_submit, parse_amount, sanitize_amount_input,
)


class TestParseAmount:
    @pytest.mark.parametrize("text,expected", [
        ("1500", Decimal("1500.00")),
        (" 12.5 ", Decimal("12.50")),
        ("1,234.56", Decimal("1234.56")),
        ("0.005", Decimal("0.01")),
    ])
    def test_valid(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, text):
        with pytest.raises(ValueError, match="valid amount"):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["abc", "12..5", "nan", "inf", "1e999999999"])
    def test_not_a_number(self, text):
        with pytest.raises(ValueError, match="valid number"):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["0", "0.00", "-5", "0.001"])
    def test_not_positive(self, text):
        with pytest.raises(ValueError, match="greater than 0"):
            parse_amount(text)


class TestFormInput:
    @pytest.mark.parametrize("typed,kept", [
        ("1500", "1500"),
        ("12a.3.4", "12.34"),
        ("abc", ""),
        ("1,000", "1000"),
        ("-5", "5"),
        (".5.", ".5"),
    ])
    def test_sanitize_amount_input(self, typed, kept):
        assert sanitize_amount_input(typed) == kept

    @pytest.mark.parametrize("amount,description", [
        ("", "Tea"),
        ("0.00", "Tea"),
        ("  ", "Tea"),
        ("5", ""),
        ("5", "   "),
    ])
    def test_cannot_submit_incomplete_form(self, amount, description):
        assert can_submit(amount, description) is False

    def test_can_submit_filled_form(self):
        assert can_submit("5", "Tea") is True


class TestAddTransaction:
    def test_add_expense(self, service, store):
        result = service.add_expense("1500.00", "  Lunch ", "food")

        assert result.ok
        assert result.value.description == "Lunch"
        assert result.value.is_income is False
        assert store.sum_expenses().value == Decimal("1500.00")

    def test_add_income(self, service, store):
        result = service.add_income("50000", "Salary", "business")

        assert result.ok
        assert result.value.is_income is True
        assert store.sum_income().value == Decimal("50000.00")

    def test_empty_description_rejected(self, service, store):
        with pytest.raises(ValueError, match="description"):
            service.add_expense("10", "   ", "food")
        assert store.list_all().value == []

    def test_unknown_category_rejected(self, service):
        with pytest.raises(ValueError, match="category"):
            service.add_expense("10", "Gadget", "gadgets")

    def test_bad_amount_never_reaches_store(self, service, store):
        with pytest.raises(ValueError):
            service.add_income("-1", "Oops", "other")
        assert store.list_all().value == []

    def test_storage_failure_is_returned_not_raised(self, broken_store):
        result = LedgerService(broken_store).add_expense("10", "Taxi", "transport")

        assert result.status is ResultStatus.STORAGE_ERROR


class TestLoad:
    def test_empty_snapshot(self, service):
        snap = service.load()

        assert snap.ok
        assert snap.transactions == []
        assert snap.balance == Decimal("0.00")

    def test_snapshot_totals_and_order(self, service):
        service.add_expense("1500.00", "Lunch", "food")
        service.add_income("50000.00", "Salary", "business")

        snap = service.load()

        assert snap.total_income == Decimal("50000.00")
        assert snap.total_expenses == Decimal("1500.00")
        assert snap.balance == Decimal("48500.00")
        assert [t.description for t in snap.transactions] == ["Salary", "Lunch"]

    def test_balance_matches_signed_sum(self, service):
        service.add_income("300.00", "Gift", "other")
        service.add_expense("120.40", "Shoes", "shopping")
        service.add_expense("80.10", "Doctor", "healthcare")

        snap = service.load()

        assert snap.balance == sum(t.signed_amount for t in snap.transactions)

    def test_snapshot_recomputed_after_delete(self, service):
        keep = service.add_income("100.00", "Keep", "other").value
        drop = service.add_expense("40.00", "Drop", "food").value

        assert service.delete(drop.id).ok
        snap = service.load()

        assert snap.transactions == [keep]
        assert snap.total_expenses == Decimal("0.00")
        assert snap.balance == Decimal("100.00")

    def test_recent_is_capped(self, service):
        for i in range(12):
            service.add_expense("1.00", f"item {i}", "other")

        recent = service.load().recent(10)

        assert len(recent) == 10
        assert recent[0].description == "item 11"

    def test_failed_load_carries_error(self, broken_store):
        snap = LedgerService(broken_store).load()

        assert not snap.ok
        assert snap.transactions == []
        assert snap.balance == Decimal("0.00")

    def test_availability(self, service, unreachable_store):
        assert service.is_available() is True
        assert LedgerService(unreachable_store).is_available() is False


def test_snapshot_defaults():
    snap = LedgerSnapshot()
    assert snap.ok
    assert snap.recent() == []
