from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

AmountInput = Union[str, int, float, Decimal]

class TransactionValidationError(ValueError):
    """Raised when user input cannot become a valid transaction."""
    pass

@dataclass(frozen=True)
class ValidatedInput:
    """Cleaned user input, ready to build or update a Transaction"""
    title: str
    amount: Decimal
    category: str
    notes: Optional[str] = None


def parse_amount(amount: AmountInput) -> Decimal:
    """
    Parse a user-entered amount.

    Args:
        amount: Raw amount, usually the text typed by the user

    Returns:
        The amount as a Decimal

    Raises:
        TransactionValidationError: If the amount is not a positive number
    """
    if isinstance(amount, bool):
        raise TransactionValidationError("Please enter a valid amount")

    if isinstance(amount, float):
        # Go through str so 0.1 stays 0.1
        amount = str(amount)

    try:
        value = Decimal(amount.strip() if isinstance(amount, str) else amount)
    except (InvalidOperation, TypeError, ValueError):
        raise TransactionValidationError("Please enter a valid amount")

    if not value.is_finite():
        raise TransactionValidationError("Please enter a valid amount")

    if value <= 0:
        raise TransactionValidationError(
            "Please enter a valid amount greater than 0"
        )

    return value


def clean_notes(notes: Optional[str]) -> Optional[str]:
    """Trim notes, collapsing blank notes to None"""
    if notes is None:
        return None
    notes = notes.strip()
    return notes or None


def validate_transaction_input(
    title: str,
    amount: AmountInput,
    category: str,
    notes: Optional[str] = None,
) -> ValidatedInput:
    """
    Validate the fields a user supplies when creating or editing a transaction.

    Args:
        title: Display title, trimmed before storage
        amount: Amount as typed; must parse to a number greater than 0
        category: Category name, any non-empty string
        notes: Optional free text

    Returns:
        ValidatedInput with cleaned values

    Raises:
        TransactionValidationError: On the first field that fails
    """
    title = (title or "").strip()
    if not title:
        raise TransactionValidationError("Title is required")

    value = parse_amount(amount)

    category = (category or "").strip()
    if not category:
        raise TransactionValidationError("Category is required")

    return ValidatedInput(
        title=title,
        amount=value,
        category=category,
        notes=clean_notes(notes),
    )
