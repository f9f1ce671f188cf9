# inventory_engine/logic/warehouse.py

import logging
from decimal import Decimal
from threading import Lock
from typing import Callable

from inventory_engine.core.enums.transaction_type import TransactionType
from inventory_engine.core.exceptions import (
    EmptyHeap,
    InsufficientInventory,
    InvalidTransaction,
    UnknownProduct,
)
from inventory_engine.core.models.lot import LotView
from inventory_engine.core.models.response import TransactionReceipt
from inventory_engine.core.models.transaction import Transaction
from inventory_engine.logic.cost_objects import Lot
from inventory_engine.logic.lot_stores import LotStore, PriceHeap
from inventory_engine.logic.pricing import price_per_unit
from inventory_engine.logic.product_index import ProductIndex
from inventory_engine.logic.transaction_history import TransactionHistory

logger = logging.getLogger(__name__)

class Warehouse:
    """
    Tracks the open lots of every product and applies PRODUCE and CONSUME
    transactions against them.

    Each product gets its own price-ordered lot store, created on its first
    PRODUCE, and a CONSUME always draws the cheapest unit available. A
    transaction either applies completely and is appended to the history, or
    raises without changing anything.
    """
    def __init__(
        self,
        lot_store_factory: Callable[[], LotStore] = PriceHeap,
        price_decimal_places: int = 10,
        price_rounding: str = "ROUND_HALF_EVEN",
        decimal_precision: int = 28,
    ):
        self._lot_store_factory = lot_store_factory
        self._price_decimal_places = price_decimal_places
        self._price_rounding = price_rounding
        self._decimal_precision = decimal_precision

        self._product_index = ProductIndex()
        self._lot_stores: dict[int, LotStore] = {}
        self._history = TransactionHistory()
        self._lock = Lock()
        self._handlers: dict[TransactionType, Callable[[Transaction], LotView]] = {
            TransactionType.PRODUCE: self._produce,
            TransactionType.CONSUME: self._consume,
        }

    def transact(self, transaction: Transaction) -> TransactionReceipt:
        """
        Validates and applies a single transaction.
        Raises InvalidTransaction, UnknownProduct or InsufficientInventory on
        failure, in which case nothing is mutated or recorded.
        """
        with self._lock:
            self._validate_transaction(transaction)
            handler = self._handlers[transaction.transaction_type]
            lot_view = handler(transaction)
            self._history.append(transaction)

        return TransactionReceipt(
            transaction_id=transaction.transaction_id,
            transaction_type=transaction.transaction_type,
            product_name=transaction.product_name,
            lots=[lot_view],
        )

    def _validate_transaction(self, t: Transaction):
        if t.transaction_type not in self._handlers:
            raise InvalidTransaction(f"Unknown transaction type '{t.transaction_type}'.")

        if t.transaction_type == TransactionType.PRODUCE:
            if t.total_cost is None:
                logger.warning(f"Warehouse: Rejected PRODUCE {t.transaction_id}: total_cost is missing.")
                raise InvalidTransaction("total_cost must be provided for a PRODUCE transaction.")
            if t.quantity <= 0:
                logger.warning(f"Warehouse: Rejected PRODUCE {t.transaction_id}: quantity {t.quantity} is not positive.")
                raise InvalidTransaction(f"PRODUCE quantity must be positive, got {t.quantity}.")
        elif t.transaction_type == TransactionType.CONSUME:
            if t.total_cost is not None:
                logger.warning(f"Warehouse: Rejected CONSUME {t.transaction_id}: total_cost is set.")
                raise InvalidTransaction("total_cost must not be provided for a CONSUME transaction.")
            if t.quantity != 1:
                logger.warning(f"Warehouse: Rejected CONSUME {t.transaction_id}: quantity {t.quantity} is not 1.")
                raise InvalidTransaction(f"CONSUME draws exactly one unit per transaction, got quantity {t.quantity}.")

    def _produce(self, t: Transaction) -> LotView:
        key = self._product_index.key_for(t.product_name)
        lot = Lot(
            price_per_unit=price_per_unit(
                total_cost=Decimal(t.total_cost),
                quantity=t.quantity,
                decimal_places=self._price_decimal_places,
                rounding=self._price_rounding,
                precision=self._decimal_precision,
            ),
            quantity=t.quantity,
        )

        lot_store = self._lot_stores.get(key)
        if lot_store is None:
            lot_store = self._lot_store_factory()
            self._lot_stores[key] = lot_store
            logger.debug(f"Warehouse: Created lot store for product '{t.product_name}' (key {key}).")
        lot_store.insert(lot)

        logger.debug(
            f"Warehouse: Processed PRODUCE {t.transaction_id} for product '{t.product_name}' "
            f"with quantity {lot.quantity} and price per unit {lot.price_per_unit}."
        )
        return lot.view()

    def _consume(self, t: Transaction) -> LotView:
        key = self._product_index.key_for(t.product_name)
        lot_store = self._lot_stores.get(key)
        if lot_store is None:
            logger.warning(f"Warehouse: CONSUME {t.transaction_id} for product '{t.product_name}' that was never produced.")
            raise UnknownProduct(t.product_name)

        try:
            drawn = lot_store.extract_one()
        except EmptyHeap as e:
            logger.warning(f"Warehouse: CONSUME {t.transaction_id} for product '{t.product_name}' with no units remaining.")
            raise InsufficientInventory(t.product_name) from e

        logger.debug(
            f"Warehouse: Processed CONSUME {t.transaction_id} for product '{t.product_name}': "
            f"drew {drawn.quantity} unit(s) at price {drawn.price_per_unit}."
        )
        return drawn

    def get_available_quantity(self, product_name: str) -> int:
        """Units remaining across the open lots of a product; 0 when it was never produced."""
        with self._lock:
            lot_store = self._lot_store_for(product_name)
            return lot_store.total_quantity() if lot_store is not None else 0

    def get_open_lots(self, product_name: str) -> list[LotView]:
        """
        Open lots of a product, cheapest first.
        Raises UnknownProduct when the product has never been produced.
        """
        with self._lock:
            lot_store = self._lot_store_for(product_name)
            if lot_store is None:
                raise UnknownProduct(product_name)
            return sorted(lot_store.lots(), key=lambda lot: lot.price_per_unit)

    def known_products(self) -> list[str]:
        """Every product name referenced so far, in order of first reference."""
        return self._product_index.names()

    @property
    def history(self) -> tuple[Transaction, ...]:
        return self._history.entries()

    def _lot_store_for(self, product_name: str):
        # Lookups must not register the name in the index
        key = self._product_index.get(product_name)
        if key is None:
            return None
        return self._lot_stores.get(key)
