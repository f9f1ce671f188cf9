# inventory_engine/api/dependencies.py

from functools import lru_cache

from fastapi import Depends

from inventory_engine.logic.error_reporter import ErrorReporter
from inventory_engine.logic.parser import TransactionParser
from inventory_engine.logic.warehouse import Warehouse
from inventory_engine.services.transaction_processor import TransactionProcessor
from inventory_engine.services.warehouse_factory import create_warehouse

@lru_cache
def get_warehouse() -> Warehouse:
    """
    Provides the process-wide Warehouse. Its lots and history live as long
    as the application, so every request shares the same instance.
    """
    return create_warehouse()

def get_transaction_processor(warehouse: Warehouse = Depends(get_warehouse)) -> TransactionProcessor:
    """
    Provides a new TransactionProcessor bound to the shared Warehouse.
    """
    error_reporter = ErrorReporter()
    return TransactionProcessor(
        parser=TransactionParser(error_reporter=error_reporter),
        warehouse=warehouse,
        error_reporter=error_reporter
    )
