# inventory_engine/tests/unit/test_product_index.py

from concurrent.futures import ThreadPoolExecutor

from inventory_engine.logic.product_index import ProductIndex

def test_keys_are_assigned_from_zero_in_order():
    index = ProductIndex()
    assert index.key_for("Box") == 0
    assert index.key_for("Gadget") == 1
    assert index.key_for("Widget") == 2

def test_repeated_reference_returns_same_key():
    index = ProductIndex()
    first = index.key_for("Box")
    index.key_for("Gadget")
    assert index.key_for("Box") == first
    assert len(index) == 2

def test_get_does_not_assign():
    index = ProductIndex()
    assert index.get("Box") is None
    assert "Box" not in index
    assert len(index) == 0

def test_names_preserve_first_reference_order():
    index = ProductIndex()
    for name in ("b", "a", "b", "c"):
        index.key_for(name)
    assert index.names() == ["b", "a", "c"]

def test_concurrent_first_references_share_one_key():
    index = ProductIndex()
    with ThreadPoolExecutor(max_workers=8) as pool:
        keys = set(pool.map(lambda _: index.key_for("Box"), range(100)))
    assert keys == {0}
    assert len(index) == 1
