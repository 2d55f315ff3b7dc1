from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a stored or entered amount to a two-place Decimal."""
    if isinstance(value, Decimal):
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Transaction:
    amount: Decimal
    description: str
    category: str
    is_income: bool
    id: Optional[int] = None                  # assigned by the store on insert
    date_created: Optional[datetime] = None   # assigned by the store on insert

    def __post_init__(self):
        # direction lives in is_income, never in the sign
        if not self.amount.is_finite() or self.amount <= 0:
            raise ValueError(f"Transaction amount must be positive, got {self.amount}")

    @property
    def type(self) -> str:
        return "income" if self.is_income else "expense"

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.is_income else -self.amount
