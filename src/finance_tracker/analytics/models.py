"""
Value objects produced by the aggregation engine.

They are frozen and hold no reference back to the transaction set they
were derived from. Insights.largest_expense is a detached copy of the
record, not the record itself.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from finance_tracker.domain.enums import TransactionType
from finance_tracker.domain.models import Transaction

ZERO = Decimal("0")

@dataclass(frozen=True)
class Totals:
    """Running totals over a set of transactions"""
    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        """Income minus expense"""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CategoryStat:
    """Total and count for one category"""
    category: str
    total: Decimal
    count: int
    type: TransactionType

    def share_of(self, maximum: Decimal) -> Decimal:
        """
        Ratio of this total to the largest total in a breakdown.

        Returns 0 when the maximum is not positive.
        """
        if maximum <= 0:
            return ZERO
        return self.total / maximum


@dataclass(frozen=True)
class MonthlyData:
    """Income and expense for one calendar month"""
    month: datetime
    income: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class Insights:
    """Quick summary facts about a set of transactions"""
    average_daily_spend: Decimal = ZERO
    largest_expense: Optional[Transaction] = None
    most_common_category: Optional[str] = None
