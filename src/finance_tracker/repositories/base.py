from abc import ABC, abstractmethod
from typing import List, Optional

from finance_tracker.domain.models import Transaction

class RepositoryError(Exception):
    """Base class for storage errors."""
    pass

class DuplicateTransactionError(RepositoryError):
    """Raised when adding a transaction whose ID is already stored."""
    pass

class TransactionNotFoundError(RepositoryError):
    """Raised when a transaction cannot be found."""
    pass

class TransactionRepository(ABC):
    """
    Abstract repository for transaction persistence.

    Owns the canonical set of transactions. Callers receive snapshots
    (lists) and never hold a live view into storage.
    """

    @abstractmethod
    def add(self, transaction: Transaction) -> Transaction:
        """
        Insert a new transaction.

        Args:
            transaction: Transaction to store, with its ID already assigned

        Returns:
            The stored transaction

        Raises:
            DuplicateTransactionError: If the ID is already stored
        """
        pass

    @abstractmethod
    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """
        Retrieve a transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction if found, None otherwise
        """
        pass

    @abstractmethod
    def get_all(self) -> List[Transaction]:
        """
        Retrieve every transaction.

        Returns:
            List of transactions, newest first
        """
        pass

    @abstractmethod
    def update(self, transaction: Transaction) -> Transaction:
        """
        Replace every field of a stored transaction except its ID.

        Args:
            transaction: Transaction with updated values

        Returns:
            Updated transaction

        Raises:
            TransactionNotFoundError: If transaction doesn't exist
        """
        pass

    @abstractmethod
    def delete(self, transaction_id: str) -> bool:
        """
        Delete a transaction by ID.

        Args:
            transaction_id: ID of transaction to delete

        Returns:
            True if deleted, False if not found
        """
        pass
