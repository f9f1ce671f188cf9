# inventory_engine/core/enums/lot_store_kind.py

from enum import Enum

class LotStoreKind(str, Enum):
    """
    Defines the available price-ordered lot store implementations.
    """
    BINARY_HEAP = "BINARY_HEAP"
    SORTED_LIST = "SORTED_LIST"
