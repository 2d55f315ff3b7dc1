import logging
import sqlite3
from datetime import datetime, timezone
from decimal import Decimal

from database.db_manager import DatabaseManager
from models.result import StoreResult
from models.transaction import Transaction, to_money

logger = logging.getLogger(__name__)

_ZERO = Decimal("0.00")

# Anything that can go wrong talking to sqlite or turning a row into a model.
_STORE_ERRORS = (sqlite3.Error, ValueError, ArithmeticError)


class LedgerStore:
    """Sole reader/writer of the transactions table.

    No error leaves this class: every failure is logged and handed back as a
    StoreResult with status STORAGE_ERROR.
    """

    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Transaction:
        return Transaction(
            id=row["id"],
            amount=to_money(row["amount"]),
            description=row["description"],
            category=row["category"],
            is_income=bool(row["is_income"]),
            date_created=_parse_timestamp(row["date_created"]),
        )

    def _select(self) -> str:
        return """
            SELECT id, amount, description, category, is_income, date_created
            FROM transactions
        """

    def insert(
        self,
        amount: Decimal,
        description: str,
        category: str,
        is_income: bool,
    ) -> StoreResult[Transaction]:
        try:
            if not Decimal(amount).is_finite():
                raise ValueError(f"amount {amount} is not a finite number")
            with self._db.connection() as conn:
                cursor = conn.execute(
                    """INSERT INTO transactions (amount, description, category, is_income)
                       VALUES (?, ?, ?, ?)""",
                    (float(amount), description, category, 1 if is_income else 0),
                )
        except _STORE_ERRORS as e:
            logger.error("Error inserting transaction: %s", e)
            return StoreResult.storage_error("Failed to save transaction to database.")
        result = self.get_by_id(cursor.lastrowid)
        if result.ok:
            tx = result.value
            logger.info("Inserted %s #%s of %s", tx.type, tx.id, tx.amount)
        return result

    def get_by_id(self, tx_id: int) -> StoreResult[Transaction]:
        try:
            with self._db.connection() as conn:
                row = conn.execute(
                    self._select() + " WHERE id = ?", (tx_id,)
                ).fetchone()
            if row is None:
                return StoreResult.not_found(f"Transaction {tx_id} does not exist.")
            return StoreResult.success(self._row_to_model(row))
        except _STORE_ERRORS as e:
            logger.error("Error retrieving transaction %s: %s", tx_id, e)
            return StoreResult.storage_error("Failed to read transaction.")

    def list_all(self) -> StoreResult[list[Transaction]]:
        """Every transaction, most recent first. Rows that cannot be read
        back as a Transaction are logged and left out."""
        try:
            with self._db.connection() as conn:
                rows = conn.execute(
                    self._select() + " ORDER BY date_created DESC, id DESC"
                ).fetchall()
        except sqlite3.Error as e:
            logger.error("Error retrieving transactions: %s", e)
            return StoreResult.storage_error("Failed to load transactions.")

        transactions = []
        for row in rows:
            try:
                transactions.append(self._row_to_model(row))
            except (ValueError, ArithmeticError) as e:
                logger.warning("Skipping unreadable transaction row #%s: %s", row["id"], e)
        return StoreResult.success(transactions)

    def sum_income(self) -> StoreResult[Decimal]:
        return self._sum(is_income=True)

    def sum_expenses(self) -> StoreResult[Decimal]:
        return self._sum(is_income=False)

    def _sum(self, is_income: bool) -> StoreResult[Decimal]:
        label = "income" if is_income else "expenses"
        try:
            with self._db.connection() as conn:
                row = conn.execute(
                    "SELECT COALESCE(SUM(amount), 0) AS total FROM transactions WHERE is_income = ?",
                    (1 if is_income else 0,),
                ).fetchone()
            return StoreResult.success(to_money(row["total"]) if row else _ZERO)
        except _STORE_ERRORS as e:
            logger.error("Error calculating total %s: %s", label, e)
            return StoreResult.storage_error(f"Failed to calculate total {label}.")

    def delete(self, tx_id: int) -> StoreResult[None]:
        try:
            with self._db.connection() as conn:
                cursor = conn.execute("DELETE FROM transactions WHERE id = ?", (tx_id,))
        except sqlite3.Error as e:
            logger.error("Error deleting transaction %s: %s", tx_id, e)
            return StoreResult.storage_error("Failed to delete transaction.")
        if cursor.rowcount == 0:
            return StoreResult.not_found(f"Transaction {tx_id} does not exist.")
        logger.info("Deleted transaction #%s", tx_id)
        return StoreResult.success()

    def test_connectivity(self) -> bool:
        """Best-effort liveness check, used once at startup."""
        try:
            with self._db.connection() as conn:
                conn.execute("SELECT 1").fetchone()
        except sqlite3.Error as e:
            logger.error("Database connection failed: %s", e)
            return False
        return True


def _parse_timestamp(value: str | None) -> datetime | None:
    """date_created is stored as UTC text; hand it back in local time."""
    if not value:
        return None
    value = str(value)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone()
