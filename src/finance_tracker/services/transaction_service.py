import dataclasses
from datetime import datetime
from typing import Optional

from finance_tracker import analytics
from finance_tracker.domain.enums import StatsPeriod, TransactionType, TypeFilter
from finance_tracker.domain.models import Transaction
from finance_tracker.domain.validation import (
    AmountInput,
    TransactionValidationError,
    validate_transaction_input,
)
from finance_tracker.logging_setup import get_logger
from finance_tracker.repositories.base import TransactionRepository, TransactionNotFoundError
from finance_tracker.services.models import StatisticsReport, TransactionListing

logger = get_logger(__name__)

class TransactionService:
    """
    Entry point for recording transactions and reading statistics.

    Input is validated here, before the repository is touched, so a
    rejected create or edit leaves the stored set exactly as it was.
    Derived data is recomputed from a fresh snapshot on every call.
    """

    def __init__(self, repository: TransactionRepository):
        self.repository = repository

    def add_transaction(
        self,
        title: str,
        amount: AmountInput,
        type: TransactionType,
        category: str,
        date: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> Transaction:
        """
        Record a new transaction.

        Args:
            title: Display title
            amount: Amount as entered; must be greater than 0
            type: INCOME or EXPENSE
            category: Category name
            date: When it happened, defaults to now
            notes: Optional free text

        Returns:
            The stored transaction, with its new ID

        Raises:
            TransactionValidationError: If any field is invalid
        """
        cleaned = self._validate(title, amount, category, notes)

        transaction = Transaction(
            title=cleaned.title,
            amount=cleaned.amount,
            type=type,
            category=cleaned.category,
            date=date or datetime.now(),
            notes=cleaned.notes,
        )
        saved = self.repository.add(transaction)

        logger.info(
            "Added %s transaction %s (%s, %s)",
            type.value.lower(), saved.id, saved.category, saved.amount,
        )
        return saved

    def edit_transaction(
        self,
        transaction_id: str,
        title: str,
        amount: AmountInput,
        type: TransactionType,
        category: str,
        date: datetime,
        notes: Optional[str] = None,
    ) -> Transaction:
        """
        Replace every field of an existing transaction except its ID.

        Raises:
            TransactionValidationError: If any field is invalid
            TransactionNotFoundError: If no transaction has this ID
        """
        cleaned = self._validate(title, amount, category, notes)

        existing = self.repository.get_by_id(transaction_id)
        if existing is None:
            raise TransactionNotFoundError(
                f"Transaction with ID {transaction_id} not found"
            )

        updated = dataclasses.replace(
            existing,
            title=cleaned.title,
            amount=cleaned.amount,
            type=type,
            category=cleaned.category,
            date=date,
            notes=cleaned.notes,
        )
        saved = self.repository.update(updated)

        logger.info("Edited transaction %s", saved.id)
        return saved

    def delete_transaction(self, transaction_id: str) -> bool:
        """
        Delete a transaction.

        Returns:
            True if deleted, False if it didn't exist
        """
        deleted = self.repository.delete(transaction_id)
        if deleted:
            logger.info("Deleted transaction %s", transaction_id)
        else:
            logger.warning("No transaction %s to delete", transaction_id)
        return deleted

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return self.repository.get_by_id(transaction_id)

    def list_transactions(
        self,
        search_text: str = "",
        type_filter: TypeFilter = TypeFilter.ALL,
    ) -> TransactionListing:
        """
        Transactions matching a search and type filter, newest first.

        Example:
            ### All expenses mentioning "coffee"
            listing = service.list_transactions("coffee", TypeFilter.EXPENSE)
            print(listing.totals.total_expense)
        """
        snapshot = self.repository.get_all()
        transactions = analytics.filter_by_search_and_type(
            snapshot, search_text, type_filter
        )

        return TransactionListing(
            transactions=transactions,
            totals=analytics.compute_totals(transactions),
            search_text=search_text,
            type_filter=type_filter,
        )

    def get_statistics(
        self,
        period: StatsPeriod = StatsPeriod.THIS_MONTH,
        reference: Optional[datetime] = None,
    ) -> StatisticsReport:
        """
        Compute statistics for a period.

        Args:
            period: Time window to report on
            reference: The instant treated as "now"; defaults to the current time

        Returns:
            A StatisticsReport for the transactions in the period
        """
        if reference is None:
            reference = datetime.now()

        transactions = analytics.filter_by_period(
            self.repository.get_all(), period, reference
        )
        category_stats = analytics.group_by_category(transactions)

        logger.debug(
            "Computing statistics for %s over %d transactions",
            period.value, len(transactions),
        )

        return StatisticsReport(
            period=period,
            reference=reference,
            transactions=transactions,
            totals=analytics.compute_totals(transactions),
            category_stats=category_stats,
            expense_stats=analytics.expense_stats(category_stats),
            monthly_data=analytics.group_by_month(transactions),
            insights=analytics.compute_insights(transactions),
        )

    def _validate(self, title, amount, category, notes):
        try:
            return validate_transaction_input(title, amount, category, notes)
        except TransactionValidationError as e:
            logger.warning("Rejected transaction input: %s", e)
            raise
