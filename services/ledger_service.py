import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from database.ledger_store import LedgerStore
from models.result import StoreResult
from models.transaction import Transaction, to_money
from utils.constants import CATEGORIES, RECENT_LIMIT

logger = logging.getLogger(__name__)

_ZERO = Decimal("0.00")


@dataclass
class LedgerSnapshot:
    """Aggregates and history as of the last load. Never patched in place."""
    transactions: list[Transaction] = field(default_factory=list)
    total_income: Decimal = _ZERO
    total_expenses: Decimal = _ZERO
    error: str = ""

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expenses

    @property
    def ok(self) -> bool:
        return not self.error

    def recent(self, limit: int = RECENT_LIMIT) -> list[Transaction]:
        return self.transactions[:limit]


def parse_amount(text: str) -> Decimal:
    """Parse user input into a positive two-place amount. Raises ValueError."""
    text = (text or "").strip().replace(",", "")
    if not text:
        raise ValueError("Please enter a valid amount!")
    try:
        amount = Decimal(text)
        if not amount.is_finite():
            raise ValueError("Please enter a valid number!")
        amount = to_money(amount)
    except InvalidOperation:
        raise ValueError("Please enter a valid number!") from None
    if amount <= 0:
        raise ValueError("Amount must be greater than 0!")
    return amount


def sanitize_amount_input(text: str) -> str:
    """Strip keystrokes that cannot belong to an amount: digits and one dot."""
    cleaned = "".join(ch for ch in text if ch.isdigit() or ch == ".")
    whole, dot, fraction = cleaned.partition(".")
    return whole + dot + fraction.replace(".", "")


def can_submit(amount_text: str, description: str) -> bool:
    """Add buttons are enabled once both fields hold something."""
    amount_text = (amount_text or "").strip()
    return amount_text not in ("", "0.00") and bool((description or "").strip())


class LedgerService:
    def __init__(self, store: LedgerStore):
        self._store = store

    def add_income(self, amount_text: str, description: str, category: str) -> StoreResult[Transaction]:
        return self.add_transaction(amount_text, description, category, is_income=True)

    def add_expense(self, amount_text: str, description: str, category: str) -> StoreResult[Transaction]:
        return self.add_transaction(amount_text, description, category, is_income=False)

    def add_transaction(
        self,
        amount_text: str,
        description: str,
        category: str,
        is_income: bool,
    ) -> StoreResult[Transaction]:
        """Validate form input and insert. Bad input raises ValueError;
        storage failures come back as the store's result."""
        amount = parse_amount(amount_text)
        description = self._validate(description, category)
        return self._store.insert(amount, description, category, is_income)

    def delete(self, tx_id: int) -> StoreResult[None]:
        return self._store.delete(tx_id)

    def is_available(self) -> bool:
        return self._store.test_connectivity()

    def load(self) -> LedgerSnapshot:
        """Re-read history and totals from the store."""
        listing = self._store.list_all()
        income = self._store.sum_income()
        expenses = self._store.sum_expenses()
        errors = [r.reason for r in (listing, income, expenses) if not r.ok]
        if errors:
            logger.warning("Ledger refresh incomplete: %s", "; ".join(errors))
        return LedgerSnapshot(
            transactions=listing.value_or([]),
            total_income=income.value_or(_ZERO),
            total_expenses=expenses.value_or(_ZERO),
            error=errors[0] if errors else "",
        )

    def _validate(self, description: str, category: str) -> str:
        description = (description or "").strip()
        if not description:
            raise ValueError("Please provide a description!")
        if category not in CATEGORIES:
            raise ValueError(f"Invalid category: {category}")
        return description
