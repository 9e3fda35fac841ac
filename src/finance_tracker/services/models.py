"""
Service layer models - DTOs for service operations.

These models bundle what a screen needs in one call; they are not domain
entities and are never persisted.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List

from finance_tracker.analytics.models import CategoryStat, Insights, MonthlyData, Totals
from finance_tracker.domain.enums import StatsPeriod, TypeFilter
from finance_tracker.domain.models import Transaction

@dataclass
class TransactionListing:
    """
    The transaction list as currently filtered, with its running totals.
    """
    transactions: List[Transaction] = field(default_factory=list)
    totals: Totals = field(default_factory=Totals)
    search_text: str = ""
    type_filter: TypeFilter = TypeFilter.ALL

    @property
    def is_empty(self) -> bool:
        return not self.transactions

    def __len__(self) -> int:
        return len(self.transactions)


@dataclass
class StatisticsReport:
    """
    Everything the statistics screen shows for one period.

    Provides:
    - totals for the period
    - category breakdown (all categories, and expense-only for charts)
    - monthly income/expense trend
    - quick insights
    """
    period: StatsPeriod
    reference: datetime

    transactions: List[Transaction] = field(default_factory=list)
    totals: Totals = field(default_factory=Totals)
    category_stats: List[CategoryStat] = field(default_factory=list)
    expense_stats: List[CategoryStat] = field(default_factory=list)
    monthly_data: List[MonthlyData] = field(default_factory=list)
    insights: Insights = field(default_factory=Insights)

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    @property
    def max_category_total(self) -> Decimal:
        """Largest category total, the scale for breakdown bars"""
        if not self.category_stats:
            return Decimal("0")
        return self.category_stats[0].total

    def __str__(self) -> str:
        """Human-readable summary"""
        lines = [
            f"Statistics - {self.period.value}",
            f"Transactions: {self.transaction_count}",
            f"  Income:  {self.totals.total_income:,}",
            f"  Expense: {self.totals.total_expense:,}",
            f"  Net:     {self.totals.balance:,}",
        ]

        if self.category_stats:
            lines.append("\nCategory Breakdown:")
            for stat in self.category_stats[:5]:
                lines.append(f"  • {stat.category}: {stat.total:,} ({stat.count})")

        return "\n".join(lines)
