# inventory_engine/tests/unit/test_warehouse.py

import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from inventory_engine.core.enums.transaction_type import TransactionType
from inventory_engine.core.exceptions import (
    EmptyHeap,
    InsufficientInventory,
    InvalidTransaction,
    UnknownProduct,
)
from inventory_engine.core.models.transaction import Transaction
from inventory_engine.logic.lot_stores import LotStore, PriceHeap, SortedLotStore
from inventory_engine.logic.warehouse import Warehouse


def produce(product_name, quantity, total_cost, transaction_id=None):
    fields = dict(
        transaction_type=TransactionType.PRODUCE,
        product_name=product_name,
        quantity=quantity,
        total_cost=None if total_cost is None else Decimal(total_cost),
    )
    if transaction_id:
        fields["transaction_id"] = transaction_id
    return Transaction(**fields)

def consume(product_name, quantity=1, total_cost=None):
    return Transaction(
        transaction_type=TransactionType.CONSUME,
        product_name=product_name,
        quantity=quantity,
        total_cost=None if total_cost is None else Decimal(total_cost),
    )

@pytest.fixture(params=[PriceHeap, SortedLotStore], ids=["heap", "sorted"])
def warehouse(request):
    """Provides a Warehouse backed by each lot store implementation."""
    return Warehouse(lot_store_factory=request.param)

# --- Scenarios ---

def test_produce_then_consume_single_lot(warehouse):
    """Scenario A: one lot of 9 units for 10.00."""
    receipt = warehouse.transact(produce("Box", 9, "10.00"))

    assert receipt.transaction_type == TransactionType.PRODUCE
    assert receipt.lots[0].price_per_unit == Decimal("1.1111111111")
    assert receipt.lots[0].quantity == 9

    receipt = warehouse.transact(consume("Box"))

    assert receipt.transaction_type == TransactionType.CONSUME
    assert receipt.product_name == "Box"
    assert receipt.lots[0].price_per_unit == Decimal("1.1111111111")
    assert receipt.lots[0].quantity == 1
    assert warehouse.get_available_quantity("Box") == 8
    assert len(warehouse.get_open_lots("Box")) == 1

def test_consume_draws_cheapest_lot_first(warehouse):
    """Scenario B: the later, cheaper lot is consumed before the earlier one."""
    warehouse.transact(produce("Box", 2, "2.00"))
    warehouse.transact(produce("Box", 1, "0.50"))

    prices = [warehouse.transact(consume("Box")).lots[0].price_per_unit for _ in range(3)]

    assert prices == [Decimal("0.50"), Decimal("1.00"), Decimal("1.00")]
    assert warehouse.get_available_quantity("Box") == 0

def test_consume_after_exhaustion_fails(warehouse):
    """Scenario C: second consume of a single unit lot fails and is not recorded."""
    warehouse.transact(produce("Box", 1, "5.00"))
    warehouse.transact(consume("Box"))

    with pytest.raises(InsufficientInventory) as excinfo:
        warehouse.transact(consume("Box"))

    assert isinstance(excinfo.value.__cause__, EmptyHeap)
    assert len(warehouse.history) == 2
    assert [t.transaction_type for t in warehouse.history] == [TransactionType.PRODUCE, TransactionType.CONSUME]

def test_consume_unknown_product_fails(warehouse):
    """Scenario D: nothing was ever produced for the product."""
    with pytest.raises(UnknownProduct) as excinfo:
        warehouse.transact(consume("Gadget"))

    assert excinfo.value.product_name == "Gadget"
    assert warehouse.history == ()

# --- Validation ---

def test_produce_without_cost_is_rejected(warehouse):
    with pytest.raises(InvalidTransaction):
        warehouse.transact(produce("Box", 3, None))
    assert warehouse.history == ()
    assert warehouse.get_available_quantity("Box") == 0

def test_consume_with_cost_is_rejected(warehouse):
    warehouse.transact(produce("Box", 3, "3.00"))

    with pytest.raises(InvalidTransaction):
        warehouse.transact(consume("Box", total_cost="1.00"))

    assert len(warehouse.history) == 1
    assert warehouse.get_available_quantity("Box") == 3

def test_zero_quantity_produce_is_rejected(warehouse):
    with pytest.raises(InvalidTransaction):
        warehouse.transact(produce("Box", 0, "1.00"))
    assert warehouse.history == ()

@pytest.mark.parametrize("quantity", [0, 2])
def test_consume_quantity_other_than_one_is_rejected(warehouse, quantity):
    warehouse.transact(produce("Box", 5, "5.00"))

    with pytest.raises(InvalidTransaction):
        warehouse.transact(consume("Box", quantity=quantity))

    assert warehouse.get_available_quantity("Box") == 5
    assert len(warehouse.history) == 1

# --- Bookkeeping ---

def test_identical_produces_are_not_merged(warehouse):
    warehouse.transact(produce("Box", 2, "2.00"))
    warehouse.transact(produce("Box", 2, "2.00"))

    lots = warehouse.get_open_lots("Box")
    assert len(lots) == 2
    assert all(lot.quantity == 2 for lot in lots)

def test_products_are_tracked_independently(warehouse):
    warehouse.transact(produce("Box", 1, "1.00"))
    warehouse.transact(produce("Gadget", 1, "9.00"))

    assert warehouse.transact(consume("Gadget")).lots[0].price_per_unit == Decimal("9")
    assert warehouse.get_available_quantity("Box") == 1
    assert warehouse.get_available_quantity("Gadget") == 0

def test_open_lots_are_listed_cheapest_first(warehouse):
    for quantity, cost in ((1, "3.00"), (1, "1.00"), (1, "2.00")):
        warehouse.transact(produce("Box", quantity, cost))

    assert [lot.price_per_unit for lot in warehouse.get_open_lots("Box")] == [
        Decimal("1"), Decimal("2"), Decimal("3")
    ]

def test_open_lots_of_unknown_product_raises(warehouse):
    with pytest.raises(UnknownProduct):
        warehouse.get_open_lots("Gadget")

def test_exhausted_product_keeps_an_empty_store(warehouse):
    warehouse.transact(produce("Box", 1, "1.00"))
    warehouse.transact(consume("Box"))

    assert warehouse.get_open_lots("Box") == []
    warehouse.transact(produce("Box", 1, "4.00"))
    assert warehouse.transact(consume("Box")).lots[0].price_per_unit == Decimal("4")

def test_history_preserves_call_order(warehouse):
    transactions = [
        produce("Box", 2, "2.00", transaction_id="t1"),
        produce("Gadget", 1, "1.00", transaction_id="t2"),
        consume("Box"),
    ]
    for t in transactions:
        warehouse.transact(t)

    assert list(warehouse.history) == transactions

def test_consume_registers_product_name_but_lookups_do_not(warehouse):
    warehouse.get_available_quantity("Widget")
    assert warehouse.known_products() == []

    with pytest.raises(UnknownProduct):
        warehouse.transact(consume("Gadget"))
    warehouse.transact(produce("Box", 1, "1.00"))

    assert warehouse.known_products() == ["Gadget", "Box"]

def test_warehouse_uses_injected_store_factory():
    mock_store = MagicMock(spec=LotStore)
    factory = MagicMock(return_value=mock_store)
    warehouse = Warehouse(lot_store_factory=factory)

    warehouse.transact(produce("Box", 4, "8.00"))
    warehouse.transact(produce("Box", 1, "1.00"))

    factory.assert_called_once_with()
    assert mock_store.insert.call_count == 2
    inserted = mock_store.insert.call_args_list[0].args[0]
    assert inserted.price_per_unit == Decimal("2")
    assert inserted.quantity == 4

def test_price_rounding_policy_is_configurable():
    warehouse = Warehouse(price_decimal_places=2, price_rounding="ROUND_DOWN")

    receipt = warehouse.transact(produce("Box", 3, "20.00"))

    assert receipt.lots[0].price_per_unit == Decimal("6.66")
