"""Tests for the Transaction entity and StoreResult."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from models.result import ResultStatus, StoreResult
from models.transaction import Transaction, to_money


class TestTransaction:
    def test_new_transaction_is_not_persisted(self):
        tx = Transaction(Decimal("5.00"), "Tea", "food", False)
        assert tx.id is None
        assert tx.date_created is None

    def test_type_and_signed_amount(self):
        income = Transaction(Decimal("10.00"), "Tip", "other", True)
        expense = Transaction(Decimal("4.00"), "Bus", "transport", False)

        assert income.type == "income"
        assert expense.type == "expense"
        assert income.signed_amount == Decimal("10.00")
        assert expense.signed_amount == Decimal("-4.00")

    @pytest.mark.parametrize("amount", [
        Decimal("0"), Decimal("0.00"), Decimal("-5"), Decimal("Infinity"), Decimal("NaN"),
    ])
    def test_rejects_non_positive_amount(self, amount):
        with pytest.raises(ValueError, match="positive"):
            Transaction(amount, "Refund", "other", False)

    def test_is_immutable(self):
        tx = Transaction(Decimal("5.00"), "Tea", "food", False, id=1)
        with pytest.raises(FrozenInstanceError):
            tx.id = 2

    @pytest.mark.parametrize("value,expected", [
        (1500.0, Decimal("1500.00")),
        (0.1 + 0.2, Decimal("0.30")),
        ("19.999", Decimal("20.00")),
        (Decimal("2.345"), Decimal("2.35")),
        (7, Decimal("7.00")),
    ])
    def test_to_money(self, value, expected):
        assert to_money(value) == expected


class TestStoreResult:
    def test_success(self):
        result = StoreResult.success([1, 2])
        assert result.ok
        assert result.status is ResultStatus.OK
        assert result.value_or([]) == [1, 2]

    def test_success_without_value(self):
        assert StoreResult.success().ok

    def test_not_found(self):
        result = StoreResult.not_found("Transaction 9 does not exist.")
        assert not result.ok
        assert result.status is ResultStatus.NOT_FOUND
        assert result.value is None
        assert "9" in result.reason

    def test_storage_error_falls_back_to_default(self):
        result = StoreResult.storage_error("disk unplugged")
        assert not result.ok
        assert result.value_or(Decimal("0.00")) == Decimal("0.00")
