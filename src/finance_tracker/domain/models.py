import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from datetime import datetime
from typing import Optional
from finance_tracker.domain.enums import TransactionType

@dataclass
class Transaction:
    """Core domain model representing a single income or expense"""
    title: str
    amount: Decimal
    type: TransactionType
    category: str
    date: datetime = field(default_factory=datetime.now)
    notes: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __setattr__(self, name, value):
        # id is write-once
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Transaction id is immutable")
        super().__setattr__(name, value)

    @property
    def signed_amount(self) -> Decimal:
        """Return amount with sign for net calculations"""
        return self.amount if self.type == TransactionType.INCOME else -self.amount

    def __repr__(self):
        return (
            f"Transaction({self.date:%Y-%m-%d}, {self.title[:30]}, "
            f"{self.type.symbol}{self.amount}, {self.category})"
        )
