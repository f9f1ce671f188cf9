# inventory_engine/core/models/lot.py

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict


class LotView(BaseModel):
    """
    Read-only view of a lot: its price per unit and a quantity.
    For a peek the quantity is what remains in the lot; for an extraction
    it is the number of units drawn.
    """
    price_per_unit: Decimal = Field(..., description="Cost basis of each unit in the lot")
    quantity: int = Field(..., description="Units covered by this view")

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"LotView(price_per_unit={self.price_per_unit}, quantity={self.quantity})"
