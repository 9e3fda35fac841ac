import sqlite3
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from finance_tracker.database.connection import DatabaseManager
from finance_tracker.domain.models import Transaction
from finance_tracker.domain.enums import TransactionType
from finance_tracker.logging_setup import get_logger
from finance_tracker.repositories.base import (
    TransactionRepository,
    DuplicateTransactionError,
    TransactionNotFoundError,
)

logger = get_logger(__name__)

SORT_KEY_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

def sort_key(moment: datetime) -> str:
    """
    Fixed-width UTC text for ordering by instant.

    Naive datetimes are taken as local time, so they order correctly
    against aware ones.
    """
    return moment.astimezone(timezone.utc).strftime(SORT_KEY_FORMAT)

class SQLiteTransactionRepository(TransactionRepository):
    """
    SQLite implementation of the TransactionRepository.

    Handles all database operations for transactions using raw SQL.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def add(self, transaction: Transaction) -> Transaction:
        """Insert a single transaction."""
        try:
            with self.db.transaction() as conn:
                conn.execute(
                    """
                    INSERT INTO transactions (
                        id, title, amount, type, category, date, date_sort, notes
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        transaction.id,
                        transaction.title,
                        str(transaction.amount), # Store as string for precision
                        transaction.type.value,
                        transaction.category,
                        transaction.date.isoformat(),
                        sort_key(transaction.date),
                        transaction.notes,
                    ),
                )
        except sqlite3.IntegrityError as e:
            if self.get_by_id(transaction.id) is not None:
                raise DuplicateTransactionError(
                    f"Transaction already exists: {transaction.id}"
                ) from e
            raise

        logger.debug("Inserted transaction %s", transaction.id)
        return transaction

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve a transaction by ID, or None if it doesn't exist"""
        conn = self.db.get_connection()
        cursor = conn.execute(
            "SELECT * FROM transactions WHERE id = ?",
            (transaction_id,)
        )
        row = cursor.fetchone()

        if row is None:
            return None

        return self._row_to_transaction(row)

    def get_all(self) -> List[Transaction]:
        """Retrieve all transactions, newest first."""
        conn = self.db.get_connection()
        cursor = conn.execute(
            "SELECT * FROM transactions ORDER BY date_sort DESC, rowid DESC"
        )
        return [self._row_to_transaction(row) for row in cursor.fetchall()]

    def update(self, transaction: Transaction) -> Transaction:
        """Update an existing transaction."""
        with self.db.transaction() as conn:
            cursor = conn.execute(
                """
                UPDATE transactions
                SET title = ?, amount = ?, type = ?,
                    category = ?, date = ?, date_sort = ?, notes = ?
                WHERE id = ?
                """,
                (
                    transaction.title,
                    str(transaction.amount),
                    transaction.type.value,
                    transaction.category,
                    transaction.date.isoformat(),
                    sort_key(transaction.date),
                    transaction.notes,
                    transaction.id,
                )
            )

            if cursor.rowcount == 0:
                raise TransactionNotFoundError(
                    f"Transaction with ID {transaction.id} not found"
                )

        logger.debug("Updated transaction %s", transaction.id)
        return transaction

    def delete(self, transaction_id: str) -> bool:
        """Delete a transaction by ID."""
        with self.db.transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM transactions WHERE id = ?",
                (transaction_id,)
            )
            deleted = cursor.rowcount > 0

        logger.debug("Delete transaction %s: %s", transaction_id, deleted)
        return deleted

    def _row_to_transaction(self, row: sqlite3.Row) -> Transaction:
        """Convert database row to Transaction object."""
        return Transaction(
            id=row["id"],
            title=row["title"],
            amount=Decimal(row["amount"]),
            type=TransactionType(row["type"]),
            category=row["category"],
            date=datetime.fromisoformat(row["date"]),
            notes=row["notes"],
        )
