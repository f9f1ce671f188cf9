# inventory_engine/logic/transaction_history.py

from typing import Iterator
from inventory_engine.core.models.transaction import Transaction

class TransactionHistory:
    """
    Append-only record of accepted transactions, in the order they were applied.
    """
    def __init__(self):
        self._transactions: list[Transaction] = []

    def append(self, transaction: Transaction):
        self._transactions.append(transaction)

    def entries(self) -> tuple[Transaction, ...]:
        """Returns an immutable snapshot of the history."""
        return tuple(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._transactions)
