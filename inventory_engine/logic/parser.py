# inventory_engine/logic/parser.py

import logging
from typing import Any
from pydantic import ValidationError, TypeAdapter

from inventory_engine.core.models.transaction import Transaction
from inventory_engine.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

class TransactionParser:
    """
    Parses raw transaction dictionaries into validated Transaction objects.
    Handles data type conversions and initial validation using Pydantic.
    All parsing errors are reported to the shared ErrorReporter.
    """
    def __init__(self, error_reporter: ErrorReporter):
        self._single_transaction_adapter = TypeAdapter(Transaction)
        self._error_reporter = error_reporter

    def parse_transactions(
        self, raw_transactions_data: list[dict[str, Any]]
    ) -> list[Transaction]:
        """
        Parses a list of raw transaction dictionaries into validated Transaction objects.
        Transactions that fail validation are left out of the result and reported
        to the ErrorReporter under their transaction_id (or their position when it
        is missing).
        """
        parsed_transactions: list[Transaction] = []

        for position, raw_txn_data in enumerate(raw_transactions_data):
            transaction_id = str(raw_txn_data.get("transaction_id") or f"UNKNOWN_ID_AT_{position}")

            try:
                parsed_transactions.append(self._single_transaction_adapter.validate_python(raw_txn_data))
            except ValidationError as e:
                error_messages = "; ".join(
                    f"{'.'.join(str(part) for part in err['loc']) or 'transaction'}: {err['msg']}"
                    for err in e.errors()
                )
                error_reason = f"Validation error: {error_messages}"
                logger.warning(f"TransactionParser: Rejected transaction {transaction_id}: {error_reason}")
                self._error_reporter.add_error(transaction_id, error_reason)

        logger.debug(f"TransactionParser: Parsed {len(parsed_transactions)} of {len(raw_transactions_data)} transactions.")
        return parsed_transactions
