# inventory_engine/api/v1/transactions.py

from fastapi import APIRouter, Depends
from inventory_engine.api.dependencies import get_transaction_processor, get_warehouse
from inventory_engine.core.models.request import TransactionProcessingRequest
from inventory_engine.core.models.response import TransactionProcessingResponse, TransactionHistoryResponse
from inventory_engine.logic.warehouse import Warehouse
from inventory_engine.services.transaction_processor import TransactionProcessor

router = APIRouter()

@router.post(
    "/transactions/process",
    response_model=TransactionProcessingResponse,
    summary="Apply produce and consume transactions",
    description="Accepts a list of transactions and applies them in order. "
                "PRODUCE adds a lot priced at total_cost / quantity; CONSUME draws "
                "the cheapest available unit. Returns receipts for accepted "
                "transactions and reasons for rejected ones."
)
def process_transactions_endpoint(
    request: TransactionProcessingRequest,
    processor: TransactionProcessor = Depends(get_transaction_processor)
) -> TransactionProcessingResponse:
    """
    API endpoint to apply inventory transactions.
    """
    receipts, errored = processor.process_transactions(request.transactions)
    return TransactionProcessingResponse(
        receipts=receipts,
        errored_transactions=errored
    )

@router.get(
    "/history",
    response_model=TransactionHistoryResponse,
    summary="List accepted transactions",
)
def get_history_endpoint(warehouse: Warehouse = Depends(get_warehouse)) -> TransactionHistoryResponse:
    return TransactionHistoryResponse(transactions=list(warehouse.history))
