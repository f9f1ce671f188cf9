# inventory_engine/core/models/transaction.py

from typing import Optional
from uuid import uuid4
from pydantic import BaseModel, Field, condecimal, conint, ConfigDict

from inventory_engine.core.enums.transaction_type import TransactionType


def _new_transaction_id() -> str:
    return uuid4().hex


class Transaction(BaseModel):
    """
    Represents a single inventory transaction request.
    Instances are immutable; whether the cost field matches the transaction
    type is checked by the Warehouse, not here, so that a mismatch surfaces
    as an InvalidTransaction rather than a validation error.
    """
    transaction_id: str = Field(default_factory=_new_transaction_id, description="Unique identifier for the transaction")
    transaction_type: TransactionType = Field(..., description="Type of transaction (PRODUCE or CONSUME)")
    product_name: str = Field(..., min_length=1, description="Name of the product the transaction applies to")
    quantity: conint(ge=0) = Field(default=1, description="Number of units produced or consumed")
    total_cost: Optional[condecimal(ge=0)] = Field(None, description="Total acquisition cost; present only for PRODUCE")

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
    )
