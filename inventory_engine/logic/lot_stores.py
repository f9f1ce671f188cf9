# inventory_engine/logic/lot_stores.py
import logging
from bisect import insort
from decimal import Decimal
from typing import Protocol

from inventory_engine.core.exceptions import EmptyHeap
from inventory_engine.core.models.lot import LotView
from inventory_engine.logic.cost_objects import Lot

logger = logging.getLogger(__name__)

# --- Lot Store Protocol ---

class LotStore(Protocol):
    """
    Price-ordered store of the open lots of one product.
    The cheapest lot is always the next one drawn from.
    """
    def insert(self, lot: Lot) -> None:
        ...

    def peek_min(self) -> LotView:
        """Price and remaining quantity of the cheapest lot. Raises EmptyHeap when empty."""
        ...

    def delete_one(self) -> None:
        """Removes one unit from the cheapest lot. No-op when empty."""
        ...

    def extract_one(self) -> LotView:
        """Returns a one-unit view of the cheapest lot, then removes that unit. Raises EmptyHeap when empty."""
        ...

    def size(self) -> int:
        ...

    def is_empty(self) -> bool:
        ...

    def total_quantity(self) -> int:
        ...

    def lots(self) -> list[LotView]:
        ...


def _validate_lot(lot: Lot):
    if lot.quantity <= 0:
        raise ValueError(f"Lot quantity must be positive, got {lot.quantity}.")
    if lot.price_per_unit < Decimal(0):
        raise ValueError(f"Lot price per unit must not be negative, got {lot.price_per_unit}.")

# --- Binary Min-Heap Implementation ---

class PriceHeap:
    """
    Binary min-heap of lots keyed on price per unit.

    The heap lives in a flat list: the children of index i sit at 2i + 1 and
    2i + 2. Consuming from a lot with more than one unit only decrements it in
    place; the node is removed once its last unit is drawn.
    """
    def __init__(self):
        self._heap: list[Lot] = []

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left_child(index: int) -> int:
        return (2 * index) + 1

    @staticmethod
    def _right_child(index: int) -> int:
        return (2 * index) + 2

    def _swap(self, i: int, j: int):
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, index: int):
        while index > 0:
            parent = self._parent(index)
            if self._heap[parent].price_per_unit <= self._heap[index].price_per_unit:
                return
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int):
        size = len(self._heap)
        while True:
            left = self._left_child(index)
            right = self._right_child(index)
            smallest = index

            if left < size and self._heap[left].price_per_unit < self._heap[smallest].price_per_unit:
                smallest = left
            # Strict comparison keeps the left child on ties
            if right < size and self._heap[right].price_per_unit < self._heap[smallest].price_per_unit:
                smallest = right

            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, lot: Lot):
        _validate_lot(lot)
        self._heap.append(lot)
        self._sift_up(len(self._heap) - 1)
        logger.debug(f"PriceHeap: Inserted {lot}. Lots: {len(self._heap)}.")

    def peek_min(self) -> LotView:
        if not self._heap:
            raise EmptyHeap("Cannot read the cheapest lot of an empty heap.")
        return self._heap[0].view()

    def delete_one(self):
        if not self._heap:
            return

        root = self._heap[0]
        if root.quantity > 1:
            root.quantity -= 1
            return

        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        logger.debug(f"PriceHeap: Lot at {root.price_per_unit} exhausted and removed. Lots: {len(self._heap)}.")

    def extract_one(self) -> LotView:
        if not self._heap:
            raise EmptyHeap("Cannot extract from an empty heap.")
        drawn = self._heap[0].view(quantity=1)
        self.delete_one()
        return drawn

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return self.size() == 0

    def total_quantity(self) -> int:
        return sum(lot.quantity for lot in self._heap)

    def lots(self) -> list[LotView]:
        """Snapshot of the lots in backing-list order; only index 0 is guaranteed cheapest."""
        return [lot.view() for lot in self._heap]

    def __len__(self) -> int:
        return self.size()

# --- Sorted List Implementation ---

class SortedLotStore:
    """
    Lot store kept as a list sorted by price per unit, cheapest first.
    Inserts are O(n); it serves as a reference to cross-check PriceHeap and
    can be selected through LOT_STORE_KIND.
    """
    def __init__(self):
        self._lots: list[Lot] = []

    def insert(self, lot: Lot):
        _validate_lot(lot)
        # insort places equal prices after the existing ones
        insort(self._lots, lot, key=lambda l: l.price_per_unit)
        logger.debug(f"SortedLotStore: Inserted {lot}. Lots: {len(self._lots)}.")

    def peek_min(self) -> LotView:
        if not self._lots:
            raise EmptyHeap("Cannot read the cheapest lot of an empty store.")
        return self._lots[0].view()

    def delete_one(self):
        if not self._lots:
            return
        cheapest = self._lots[0]
        cheapest.quantity -= 1
        if cheapest.quantity == 0:
            del self._lots[0]

    def extract_one(self) -> LotView:
        if not self._lots:
            raise EmptyHeap("Cannot extract from an empty store.")
        drawn = self._lots[0].view(quantity=1)
        self.delete_one()
        return drawn

    def size(self) -> int:
        return len(self._lots)

    def is_empty(self) -> bool:
        return self.size() == 0

    def total_quantity(self) -> int:
        return sum(lot.quantity for lot in self._lots)

    def lots(self) -> list[LotView]:
        return [lot.view() for lot in self._lots]

    def __len__(self) -> int:
        return self.size()
