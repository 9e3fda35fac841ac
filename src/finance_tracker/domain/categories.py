"""
Category vocabularies offered when recording a transaction.

These are hints for the entry points, not a closed set: any non-empty
category string is accepted and stored as-is.
"""
from typing import Any, Dict, List, Optional

from finance_tracker.config.settings import ConfigLoader
from finance_tracker.domain.enums import TransactionType

INCOME_CATEGORIES = [
    "Salary",
    "Business",
    "Investment",
    "Gift",
    "Bonus",
    "Other Income",
]

EXPENSE_CATEGORIES = [
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Bills",
    "Entertainment",
    "Health",
    "Education",
    "Other Expense",
]


def load_vocabulary(
    config: Optional[Dict[str, Any]] = None
) -> Dict[TransactionType, List[str]]:
    """
    Load the category vocabulary for each transaction type.

    Args:
        config: Optional config dict. If None, loads from ConfigLoader.
            Useful for testing with custom configs.

    Returns:
        Mapping of transaction type to its category names
    """
    if config is None:
        try:
            config = ConfigLoader.load_categories_config()
        except FileNotFoundError:
            config = {}

    return {
        TransactionType.INCOME: list(config.get("income") or INCOME_CATEGORIES),
        TransactionType.EXPENSE: list(config.get("expense") or EXPENSE_CATEGORIES),
    }


def categories_for(
    transaction_type: TransactionType,
    config: Optional[Dict[str, Any]] = None
) -> List[str]:
    """Return the suggested categories for one transaction type"""
    return load_vocabulary(config)[transaction_type]
