# inventory_engine/services/warehouse_factory.py

import logging
from typing import Callable, Optional

from inventory_engine.core.config.settings import Settings, settings as default_settings
from inventory_engine.core.enums.lot_store_kind import LotStoreKind
from inventory_engine.logic.lot_stores import LotStore, PriceHeap, SortedLotStore
from inventory_engine.logic.warehouse import Warehouse

logger = logging.getLogger(__name__)

def get_lot_store_factory(kind: LotStoreKind) -> Callable[[], LotStore]:
    """
    Returns the constructor of the lot store selected by configuration.
    """
    if kind == LotStoreKind.BINARY_HEAP:
        return PriceHeap
    elif kind == LotStoreKind.SORTED_LIST:
        return SortedLotStore
    else:
        raise ValueError(f"Unknown LOT_STORE_KIND: {kind}")

def create_warehouse(app_settings: Optional[Settings] = None) -> Warehouse:
    """
    Builds a Warehouse wired with the configured lot store and pricing policy.
    """
    app_settings = app_settings or default_settings
    logger.info(
        f"Creating warehouse with {app_settings.LOT_STORE_KIND.value} lot stores, prices quantized to "
        f"{app_settings.PRICE_DECIMAL_PLACES} places ({app_settings.PRICE_ROUNDING})."
    )
    return Warehouse(
        lot_store_factory=get_lot_store_factory(app_settings.LOT_STORE_KIND),
        price_decimal_places=app_settings.PRICE_DECIMAL_PLACES,
        price_rounding=app_settings.PRICE_ROUNDING,
        decimal_precision=app_settings.DECIMAL_PRECISION,
    )
