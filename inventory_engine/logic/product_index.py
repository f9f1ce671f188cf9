# inventory_engine/logic/product_index.py

import logging
from threading import Lock
from typing import Optional

logger = logging.getLogger(__name__)

class ProductIndex:
    """
    Maps product names to stable integer keys.
    A key is assigned on the first reference to a name, counting up from 0,
    and is never reused or reclaimed.
    """
    def __init__(self):
        self._keys: dict[str, int] = {}
        self._next_key = 0
        self._lock = Lock()

    def key_for(self, product_name: str) -> int:
        """Returns the key for a product name, assigning the next one on first reference."""
        with self._lock:
            key = self._keys.get(product_name)
            if key is None:
                key = self._next_key
                self._keys[product_name] = key
                self._next_key += 1
                logger.debug(f"ProductIndex: Assigned key {key} to product '{product_name}'.")
            return key

    def get(self, product_name: str) -> Optional[int]:
        """Returns the key for a product name without assigning one."""
        return self._keys.get(product_name)

    def names(self) -> list[str]:
        return list(self._keys)

    def __contains__(self, product_name: str) -> bool:
        return product_name in self._keys

    def __len__(self) -> int:
        return len(self._keys)
