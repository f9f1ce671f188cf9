# inventory_engine/services/transaction_processor.py

import logging
from typing import Tuple, Any
from inventory_engine.core.exceptions import InventoryEngineError
from inventory_engine.core.models.response import ErroredTransaction, TransactionReceipt
from inventory_engine.logic.parser import TransactionParser
from inventory_engine.logic.warehouse import Warehouse
from inventory_engine.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

class TransactionProcessor:
    """
    Applies a batch of raw transactions to a Warehouse.
    It combines parsing, sequential application and error reporting; each
    transaction succeeds or fails on its own, there is no batch atomicity.
    """
    def __init__(
        self,
        parser: TransactionParser,
        warehouse: Warehouse,
        error_reporter: ErrorReporter
    ):
        self._parser = parser
        self._warehouse = warehouse
        self._error_reporter = error_reporter

    def process_transactions(
        self,
        transactions_raw: list[dict[str, Any]]
    ) -> Tuple[list[TransactionReceipt], list[ErroredTransaction]]:
        """
        Parses the raw transactions and applies the valid ones in submission order.
        Returns the receipts of accepted transactions and the errors of rejected ones.
        """
        logger.info(f"Starting transaction processing. Received: {len(transactions_raw)}")

        # 1. Parse, reporting validation errors
        parsed_transactions = self._parser.parse_transactions(transactions_raw)

        # 2. Apply in order
        receipts: list[TransactionReceipt] = []
        for transaction in parsed_transactions:
            try:
                receipts.append(self._warehouse.transact(transaction))
            except InventoryEngineError as e:
                self._error_reporter.add_error(transaction.transaction_id, str(e))

        # 3. Collect errors reported during parsing and application
        errored_transactions = self._error_reporter.get_errors()
        logger.info(f"Finished processing. Accepted {len(receipts)} transactions, {len(errored_transactions)} errors reported.")

        # The reporter is reused across requests
        self._error_reporter.clear()

        return receipts, errored_transactions
