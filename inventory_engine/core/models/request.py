# inventory_engine/core/models/request.py

from pydantic import BaseModel, Field, ConfigDict

class TransactionProcessingRequest(BaseModel):
    """
    Represents the input payload for the transaction processing API.
    """
    transactions: list[dict] = Field(
        ...,
        description="Transactions to apply (raw dictionaries), in the order they should be processed."
    )

    model_config = ConfigDict(
        json_schema_extra = {
            "example": {
                "transactions": [
                    {
                        "transaction_id": "produce_001",
                        "transaction_type": "PRODUCE",
                        "product_name": "Acrylic Box",
                        "quantity": 9,
                        "total_cost": "10.00"
                    },
                    {
                        "transaction_id": "consume_001",
                        "transaction_type": "CONSUME",
                        "product_name": "Acrylic Box",
                        "quantity": 1
                    },
                    {
                        "transaction_id": "consume_002",
                        "transaction_type": "CONSUME",
                        "product_name": "Gadget",
                        "quantity": 1
                    }
                ]
            }
        },
        extra='ignore'
    )
