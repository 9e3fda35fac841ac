from datetime import datetime
from typing import Iterable, List, Tuple

from finance_tracker.domain.enums import StatsPeriod, TypeFilter
from finance_tracker.domain.models import Transaction


def _period_key(moment: datetime, period: StatsPeriod) -> Tuple[int, ...]:
    """Calendar components identifying the unit of `period` containing `moment`"""
    if period == StatsPeriod.THIS_WEEK:
        iso = moment.isocalendar()
        return (iso[0], iso[1])
    if period == StatsPeriod.THIS_MONTH:
        return (moment.year, moment.month)
    if period == StatsPeriod.THIS_YEAR:
        return (moment.year,)
    raise ValueError(f"Period {period} has no calendar unit")


def filter_by_period(
    transactions: Iterable[Transaction],
    period: StatsPeriod,
    reference: datetime,
) -> List[Transaction]:
    """
    Keep transactions dated in the same week, month or year as `reference`.

    Weeks follow ISO 8601 (Monday start, ISO week-numbering year). Timestamps
    are compared by their own calendar components, without normalising to UTC.

    Args:
        transactions: Transactions to filter
        period: Time window; StatsPeriod.ALL keeps everything
        reference: The instant treated as "now"

    Returns:
        Matching transactions in input order
    """
    if period == StatsPeriod.ALL:
        return list(transactions)

    target = _period_key(reference, period)
    return [t for t in transactions if _period_key(t.date, period) == target]


def filter_by_search_and_type(
    transactions: Iterable[Transaction],
    search_text: str = "",
    type_filter: TypeFilter = TypeFilter.ALL,
) -> List[Transaction]:
    """
    Keep transactions matching a free-text query and a type filter.

    The query matches case-insensitively against the title or the category.
    An empty query matches everything.

    Example:
        ```
        # Every expense with "food" in its title or category
        filter_by_search_and_type(transactions, "food", TypeFilter.EXPENSE)
        ```
    """
    needle = (search_text or "").casefold()

    def matches_search(txn: Transaction) -> bool:
        if not needle:
            return True
        return needle in txn.title.casefold() or needle in txn.category.casefold()

    return [
        txn for txn in transactions
        if matches_search(txn) and type_filter.matches(txn.type)
    ]
