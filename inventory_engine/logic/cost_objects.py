# inventory_engine/logic/cost_objects.py

from decimal import Decimal
from typing import Optional

from inventory_engine.core.models.lot import LotView


class Lot:
    """Represents a single batch of units acquired through a PRODUCE transaction."""
    __slots__ = ("price_per_unit", "quantity")

    def __init__(self, price_per_unit: Decimal, quantity: int):
        self.price_per_unit = price_per_unit
        self.quantity = quantity

    def view(self, quantity: Optional[int] = None) -> LotView:
        """Read-only view of the lot, optionally for a different quantity."""
        return LotView(
            price_per_unit=self.price_per_unit,
            quantity=self.quantity if quantity is None else quantity,
        )

    def __repr__(self) -> str:
        return (f"Lot(price_per_unit={self.price_per_unit}, "
                f"quantity={self.quantity})")
