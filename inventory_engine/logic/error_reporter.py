# inventory_engine/logic/error_reporter.py

from inventory_engine.core.models.response import ErroredTransaction

class ErrorReporter:
    """
    Collects the processing errors of a batch, one entry per rejected
    submission, in the order they were reported.
    """
    def __init__(self):
        self._errored_transactions: list[ErroredTransaction] = []

    def add_error(self, transaction_id: str, error_reason: str):
        """
        Records a rejected submission. Submissions sharing a transaction ID
        each get their own entry.
        """
        self._errored_transactions.append(
            ErroredTransaction(transaction_id=transaction_id, error_reason=error_reason)
        )

    def get_errors(self) -> list[ErroredTransaction]:
        return list(self._errored_transactions)

    def has_errors(self) -> bool:
        return bool(self._errored_transactions)

    def has_errors_for(self, transaction_id: str) -> bool:
        """
        Checks if at least one error has been reported for the given transaction ID.
        """
        return any(e.transaction_id == transaction_id for e in self._errored_transactions)

    def clear(self):
        self._errored_transactions = []
