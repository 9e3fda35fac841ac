from enum import Enum

class TransactionType(Enum):
    """Represents whether money is coming in or out"""
    INCOME = "Income" # in
    EXPENSE = "Expense" # out

    @property
    def symbol(self) -> str:
        return "+" if self is TransactionType.INCOME else "-"


class StatsPeriod(Enum):
    """Time window used when computing statistics"""
    THIS_WEEK = "This Week"
    THIS_MONTH = "This Month"
    THIS_YEAR = "This Year"
    ALL = "All Time"


class TypeFilter(Enum):
    """Type selector used by the transaction list"""
    ALL = "All"
    INCOME = "Income"
    EXPENSE = "Expense"

    def matches(self, transaction_type: TransactionType) -> bool:
        """True if a transaction of this type passes the filter"""
        if self is TypeFilter.ALL:
            return True
        return self.value == transaction_type.value
