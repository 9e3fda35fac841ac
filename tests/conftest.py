import pytest
from datetime import datetime
from decimal import Decimal
from typing import List

from finance_tracker.domain.enums import TransactionType
from finance_tracker.domain.models import Transaction

@pytest.fixture
def august_transactions() -> List[Transaction]:
    """Two expenses and a salary across two days of August 2025, newest first"""
    return [
        Transaction(
            title="Taxi",
            amount=Decimal("300000"),
            type=TransactionType.EXPENSE,
            category="Transportation",
            date=datetime(2025, 8, 2, 9, 30),
        ),
        Transaction(
            title="Dinner",
            amount=Decimal("500000"),
            type=TransactionType.EXPENSE,
            category="Food & Dining",
            date=datetime(2025, 8, 1, 19, 0),
        ),
        Transaction(
            title="August salary",
            amount=Decimal("2000000"),
            type=TransactionType.INCOME,
            category="Salary",
            date=datetime(2025, 8, 1, 8, 0),
        ),
    ]

@pytest.fixture
def mixed_transactions() -> List[Transaction]:
    """Transactions spread over several months and years, newest first"""
    return [
        Transaction(
            title="Groceries",
            amount=Decimal("150000"),
            type=TransactionType.EXPENSE,
            category="Food & Dining",
            date=datetime(2025, 8, 20, 12, 0),
        ),
        Transaction(
            title="Freelance logo",
            amount=Decimal("750000"),
            type=TransactionType.INCOME,
            category="Business",
            date=datetime(2025, 8, 18, 15, 0),
        ),
        Transaction(
            title="Bus pass",
            amount=Decimal("100000"),
            type=TransactionType.EXPENSE,
            category="Transportation",
            date=datetime(2025, 7, 31, 23, 59),
        ),
        Transaction(
            title="Electricity",
            amount=Decimal("400000"),
            type=TransactionType.EXPENSE,
            category="Bills",
            date=datetime(2025, 7, 5, 10, 0),
        ),
        Transaction(
            title="July salary",
            amount=Decimal("2000000"),
            type=TransactionType.INCOME,
            category="Salary",
            date=datetime(2025, 7, 1, 8, 0),
        ),
        Transaction(
            title="New year dinner",
            amount=Decimal("250000"),
            type=TransactionType.EXPENSE,
            category="Food & Dining",
            date=datetime(2024, 12, 31, 20, 0),
        ),
    ]
