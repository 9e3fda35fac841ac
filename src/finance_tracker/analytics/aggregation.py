"""
Aggregations over a snapshot of transactions.

Every function here is pure: the input is only read, never mutated, and
each call returns freshly built value objects. Callers decide which
transactions to pass in (see analytics.filters) and recompute whenever
their selection or the underlying data changes.
"""
import dataclasses
from collections import Counter
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from finance_tracker.analytics.models import (
    ZERO,
    CategoryStat,
    Insights,
    MonthlyData,
    Totals,
)
from finance_tracker.domain.enums import TransactionType
from finance_tracker.domain.models import Transaction


def _sum_amounts(transactions: Iterable[Transaction], transaction_type: TransactionType) -> Decimal:
    return sum(
        (t.amount for t in transactions if t.type == transaction_type),
        ZERO,
    )


def compute_totals(transactions: Iterable[Transaction]) -> Totals:
    """
    Total income, total expense and balance.

    Returns:
        Totals; all zero for an empty input
    """
    transactions = list(transactions)
    return Totals(
        total_income=_sum_amounts(transactions, TransactionType.INCOME),
        total_expense=_sum_amounts(transactions, TransactionType.EXPENSE),
    )


def group_by_category(transactions: Iterable[Transaction]) -> List[CategoryStat]:
    """
    One CategoryStat per distinct category string.

    Categories are matched exactly, so arbitrary categories outside the
    vocabulary form their own groups. A group reports the type of its first
    transaction; a category mixing income and expense is not split.

    Returns:
        Stats sorted by total descending; ties keep first-seen order
    """
    groups: Dict[str, List[Transaction]] = {}
    for txn in transactions:
        groups.setdefault(txn.category, []).append(txn)

    stats = [
        CategoryStat(
            category=category,
            total=sum((t.amount for t in members), ZERO),
            count=len(members),
            type=members[0].type,
        )
        for category, members in groups.items()
    ]

    # sorted() is stable, so equal totals stay in first-seen order
    return sorted(stats, key=lambda stat: stat.total, reverse=True)


def expense_stats(category_stats: Iterable[CategoryStat]) -> List[CategoryStat]:
    """Only the categories reported as expense, order preserved"""
    return [stat for stat in category_stats if stat.type == TransactionType.EXPENSE]


def start_of_month(moment: datetime) -> datetime:
    """Midnight on the first day of the month, keeping tzinfo"""
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def group_by_month(transactions: Iterable[Transaction]) -> List[MonthlyData]:
    """
    Income and expense per calendar month.

    Returns:
        One MonthlyData per month present, ascending by month
    """
    income: Dict[datetime, Decimal] = {}
    expense: Dict[datetime, Decimal] = {}

    for txn in transactions:
        month = start_of_month(txn.date)
        income.setdefault(month, ZERO)
        expense.setdefault(month, ZERO)
        if txn.type == TransactionType.INCOME:
            income[month] += txn.amount
        else:
            expense[month] += txn.amount

    return [
        MonthlyData(month=month, income=income[month], expense=expense[month])
        for month in sorted(income, key=_month_sort_key)
    ]


def _month_sort_key(month: datetime):
    # Naive and aware month starts can't be compared directly
    offset = month.utcoffset()
    return (month.year, month.month, offset.total_seconds() if offset else 0.0)


def compute_insights(transactions: Iterable[Transaction]) -> Insights:
    """
    Average daily spend, largest expense and most common category.

    The average divides total expense by the number of distinct days that
    have any transaction, income included.

    Ties for the largest expense or the most common category go to whichever
    comes first in the input.
    """
    transactions = list(transactions)
    if not transactions:
        return Insights()

    days = {t.date.date() for t in transactions}
    total_expense = _sum_amounts(transactions, TransactionType.EXPENSE)
    average = total_expense / len(days) if days else ZERO

    return Insights(
        average_daily_spend=average,
        largest_expense=_largest_expense(transactions),
        most_common_category=_most_common_category(transactions),
    )


def _largest_expense(transactions: List[Transaction]) -> Optional[Transaction]:
    expenses = [t for t in transactions if t.type == TransactionType.EXPENSE]
    if not expenses:
        return None
    # max() returns the first maximal element
    largest = max(expenses, key=lambda t: t.amount)
    return dataclasses.replace(largest)


def _most_common_category(transactions: List[Transaction]) -> Optional[str]:
    counts = Counter(t.category for t in transactions)
    if not counts:
        return None
    # Counter keeps insertion order, so max() favours the first-seen category
    return max(counts, key=lambda category: counts[category])
