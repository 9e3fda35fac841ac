"""
Transaction aggregation and filtering engine.

Pure functions over an in-memory snapshot of transactions. Nothing here
touches storage, reads the clock or keeps state between calls.

Quick Start:
    >>> from finance_tracker.analytics import compute_totals, group_by_category
    >>>
    >>> totals = compute_totals(transactions)
    >>> print(f"Balance: {totals.balance}")
    >>> for stat in group_by_category(transactions):
    ...     print(stat.category, stat.total)
"""
from finance_tracker.analytics.aggregation import (
    compute_insights,
    compute_totals,
    expense_stats,
    group_by_category,
    group_by_month,
    start_of_month,
)
from finance_tracker.analytics.filters import (
    filter_by_period,
    filter_by_search_and_type,
)
from finance_tracker.analytics.models import (
    CategoryStat,
    Insights,
    MonthlyData,
    Totals,
)

__all__ = [
    "CategoryStat",
    "Insights",
    "MonthlyData",
    "Totals",
    "compute_insights",
    "compute_totals",
    "expense_stats",
    "filter_by_period",
    "filter_by_search_and_type",
    "group_by_category",
    "group_by_month",
    "start_of_month",
]
