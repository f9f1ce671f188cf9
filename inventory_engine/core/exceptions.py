# inventory_engine/core/exceptions.py


class InventoryEngineError(Exception):
    """Base class for every failure raised by the inventory engine."""


class InvalidTransaction(InventoryEngineError):
    """
    The transaction is malformed for its type: a PRODUCE without a total cost,
    a CONSUME carrying one, or a quantity the transaction type does not allow.
    """


class UnknownProduct(InventoryEngineError):
    """A CONSUME was requested for a product that has never been produced."""

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"Cannot consume product '{product_name}': it has never been produced.")


class InsufficientInventory(InventoryEngineError):
    """A CONSUME was requested for a product whose lots are all exhausted."""

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"Insufficient inventory for product '{product_name}': no units remaining.")


class EmptyHeap(InventoryEngineError):
    """Raised by a lot store when a read or extraction is attempted while it holds no lots."""
