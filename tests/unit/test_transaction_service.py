import pytest
from datetime import datetime
from decimal import Decimal
from typing import List

from finance_tracker.domain.enums import StatsPeriod, TransactionType, TypeFilter
from finance_tracker.domain.models import Transaction
from finance_tracker.domain.validation import TransactionValidationError
from finance_tracker.repositories.base import TransactionRepository, TransactionNotFoundError
from finance_tracker.services.models import StatisticsReport, TransactionListing
from finance_tracker.services.transaction_service import TransactionService

@pytest.fixture
def mock_repository(mocker) -> TransactionRepository:
    """Create a mock repository"""
    repository = mocker.Mock()
    repository.add.side_effect = lambda txn: txn
    repository.update.side_effect = lambda txn: txn
    return repository

@pytest.fixture
def service(mock_repository) -> TransactionService:
    """Create service with mocked repository"""
    return TransactionService(repository=mock_repository)

@pytest.mark.unit
class TestTransactionServiceAdd:
    """Test creating transactions"""

    def test_add_transaction_saves_cleaned_record(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
    ):
        # Arrange
        when = datetime(2025, 8, 1, 12, 0)

        # Act
        txn = service.add_transaction(
            title="  Lunch ",
            amount="45000",
            type=TransactionType.EXPENSE,
            category="Food & Dining",
            date=when,
            notes="   ",
        )

        # Assert
        mock_repository.add.assert_called_once_with(txn)
        assert txn.title == "Lunch"
        assert txn.amount == Decimal("45000")
        assert txn.type == TransactionType.EXPENSE
        assert txn.date == when
        assert txn.notes is None
        assert txn.id

    def test_add_transaction_defaults_date_to_now(self, service: TransactionService):
        before = datetime.now()

        txn = service.add_transaction("Gift", "100", TransactionType.INCOME, "Gift")

        assert before <= txn.date <= datetime.now()

    @pytest.mark.parametrize("title, amount, category", [
        ("", "100", "Bills"),
        ("Rent", "0", "Bills"),
        ("Rent", "-100", "Bills"),
        ("Rent", "abc", "Bills"),
        ("Rent", "100", ""),
    ])
    def test_invalid_input_never_reaches_repository(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            title, amount, category,
    ):
        with pytest.raises(TransactionValidationError):
            service.add_transaction(title, amount, TransactionType.EXPENSE, category)

        mock_repository.add.assert_not_called()

@pytest.mark.unit
class TestTransactionServiceEdit:
    """Test editing and deleting transactions"""

    @pytest.fixture
    def stored(self) -> Transaction:
        return Transaction(
            title="Lunch",
            amount=Decimal("45000"),
            type=TransactionType.EXPENSE,
            category="Food & Dining",
            date=datetime(2025, 8, 1, 12, 0),
            notes="team",
        )

    def test_edit_replaces_fields_and_keeps_id(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            stored: Transaction,
    ):
        # Arrange
        mock_repository.get_by_id.return_value = stored
        new_date = datetime(2025, 8, 3, 9, 0)

        # Act
        edited = service.edit_transaction(
            stored.id,
            title="Refund",
            amount="20000",
            type=TransactionType.INCOME,
            category="Other Income",
            date=new_date,
            notes=" ",
        )

        # Assert
        mock_repository.get_by_id.assert_called_once_with(stored.id)
        mock_repository.update.assert_called_once_with(edited)
        assert edited.id == stored.id
        assert edited.title == "Refund"
        assert edited.amount == Decimal("20000")
        assert edited.type == TransactionType.INCOME
        assert edited.category == "Other Income"
        assert edited.date == new_date
        assert edited.notes is None

    def test_edit_unknown_id_raises(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
    ):
        mock_repository.get_by_id.return_value = None

        with pytest.raises(TransactionNotFoundError):
            service.edit_transaction(
                "missing", "Rent", "100", TransactionType.EXPENSE, "Bills", datetime(2025, 8, 1)
            )

        mock_repository.update.assert_not_called()

    def test_edit_with_invalid_amount_leaves_record_untouched(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            stored: Transaction,
    ):
        mock_repository.get_by_id.return_value = stored

        with pytest.raises(TransactionValidationError, match="greater than 0"):
            service.edit_transaction(
                stored.id, "Lunch", "0", TransactionType.EXPENSE, "Food & Dining", stored.date
            )

        mock_repository.update.assert_not_called()
        assert stored.amount == Decimal("45000")

    def test_delete_delegates_to_repository(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
    ):
        mock_repository.delete.return_value = True

        assert service.delete_transaction("abc") is True
        mock_repository.delete.assert_called_once_with("abc")

    def test_delete_missing_returns_false(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
    ):
        mock_repository.delete.return_value = False

        assert service.delete_transaction("abc") is False

@pytest.mark.unit
class TestTransactionServiceQuery:
    """Test list and statistics operations"""

    def test_list_transactions_filters_and_totals(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            mixed_transactions: List[Transaction],
    ):
        # Arrange
        mock_repository.get_all.return_value = mixed_transactions

        # Act
        listing: TransactionListing = service.list_transactions("dining", TypeFilter.EXPENSE)

        # Assert
        mock_repository.get_all.assert_called_once_with()
        assert [t.title for t in listing.transactions] == ["Groceries", "New year dinner"]
        assert listing.totals.total_expense == Decimal("400000")
        assert listing.totals.total_income == Decimal("0")
        assert listing.totals.balance == Decimal("-400000")
        assert len(listing) == 2

    def test_list_transactions_without_filters(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            mixed_transactions: List[Transaction],
    ):
        mock_repository.get_all.return_value = mixed_transactions

        listing = service.list_transactions()

        assert listing.transactions == mixed_transactions
        assert listing.totals.balance == Decimal("1850000")
        assert not listing.is_empty

    def test_get_statistics_for_month(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            mixed_transactions: List[Transaction],
    ):
        # Arrange
        mock_repository.get_all.return_value = mixed_transactions
        reference = datetime(2025, 7, 15, 12, 0)

        # Act
        report: StatisticsReport = service.get_statistics(StatsPeriod.THIS_MONTH, reference)

        # Assert
        assert report.reference == reference
        assert report.transaction_count == 3
        assert report.totals.total_income == Decimal("2000000")
        assert report.totals.total_expense == Decimal("500000")
        assert [s.category for s in report.category_stats] == ["Salary", "Bills", "Transportation"]
        assert [s.category for s in report.expense_stats] == ["Bills", "Transportation"]
        assert report.max_category_total == Decimal("2000000")
        assert len(report.monthly_data) == 1
        assert report.monthly_data[0].month == datetime(2025, 7, 1)
        # 500000 over 3 distinct days
        assert report.insights.average_daily_spend == Decimal("500000") / 3
        assert report.insights.largest_expense.title == "Electricity"

    def test_get_statistics_all_time(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            mixed_transactions: List[Transaction],
    ):
        mock_repository.get_all.return_value = mixed_transactions

        report = service.get_statistics(StatsPeriod.ALL)

        assert report.transaction_count == 6
        assert len(report.monthly_data) == 3
        assert report.insights.most_common_category == "Food & Dining"

    def test_get_statistics_empty(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
    ):
        mock_repository.get_all.return_value = []

        report = service.get_statistics(StatsPeriod.THIS_YEAR, datetime(2025, 1, 1))

        assert report.transaction_count == 0
        assert report.category_stats == []
        assert report.max_category_total == 0
        assert report.insights.largest_expense is None
        assert report.totals.balance == 0

    def test_report_summary_text(
            self,
            service: TransactionService,
            mock_repository: TransactionRepository,
            august_transactions: List[Transaction],
    ):
        mock_repository.get_all.return_value = august_transactions

        report = service.get_statistics(StatsPeriod.THIS_MONTH, datetime(2025, 8, 15))

        text = str(report)
        assert "Statistics - This Month" in text
        assert "Net:     1,200,000" in text
        assert "Salary: 2,000,000 (1)" in text
