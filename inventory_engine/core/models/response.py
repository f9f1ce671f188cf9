# inventory_engine/core/models/response.py

from typing import List
from pydantic import BaseModel, Field
from inventory_engine.core.enums.transaction_type import TransactionType
from inventory_engine.core.models.lot import LotView
from inventory_engine.core.models.transaction import Transaction

class ErroredTransaction(BaseModel):
    """
    Represents a transaction that failed processing, along with the reason for failure.
    """
    transaction_id: str = Field(..., description="The ID of the transaction that failed.")
    error_reason: str = Field(..., description="The reason why the transaction processing failed.")

class TransactionReceipt(BaseModel):
    """
    Outcome of an accepted transaction.
    A PRODUCE lists the lot it created; a CONSUME lists the unit it drew
    and the price it was carried at.
    """
    transaction_id: str = Field(..., description="The ID of the accepted transaction.")
    transaction_type: TransactionType = Field(..., description="Type of the accepted transaction.")
    product_name: str = Field(..., description="Product the transaction applied to.")
    lots: List[LotView] = Field(default_factory=list, description="Lots created or drawn from by the transaction.")

class TransactionProcessingResponse(BaseModel):
    """
    Represents the output response from the transaction processing API.
    """
    receipts: List[TransactionReceipt] = Field(
        ...,
        description="Receipts of the transactions that were accepted, in submission order."
    )
    errored_transactions: List[ErroredTransaction] = Field(
        default_factory=list,
        description="List of transactions that failed validation or processing, with error reasons."
    )

    class Config:
        json_schema_extra = {
            "example": {
                "receipts": [
                    {
                        "transaction_id": "produce_001",
                        "transaction_type": "PRODUCE",
                        "product_name": "Acrylic Box",
                        "lots": [{"price_per_unit": "1.1111111111", "quantity": 9}]
                    },
                    {
                        "transaction_id": "consume_001",
                        "transaction_type": "CONSUME",
                        "product_name": "Acrylic Box",
                        "lots": [{"price_per_unit": "1.1111111111", "quantity": 1}]
                    }
                ],
                "errored_transactions": [
                    {
                        "transaction_id": "consume_002",
                        "error_reason": "Cannot consume product 'Gadget': it has never been produced."
                    }
                ]
            }
        }

class ProductLotsResponse(BaseModel):
    """
    Open lots of a single product, cheapest first.
    """
    product_name: str = Field(..., description="Name of the product.")
    available_quantity: int = Field(..., description="Units remaining across all open lots.")
    lots: List[LotView] = Field(default_factory=list, description="Open lots ordered by price per unit.")

class TransactionHistoryResponse(BaseModel):
    """
    Accepted transactions in the order they were applied.
    """
    transactions: List[Transaction] = Field(default_factory=list)
