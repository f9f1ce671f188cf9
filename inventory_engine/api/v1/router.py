# inventory_engine/api/v1/router.py

from fastapi import APIRouter
from inventory_engine.api.v1.transactions import router as transactions_router
from inventory_engine.api.v1.products import router as products_router

# Create a main router for API version 1
router = APIRouter()

router.include_router(transactions_router, tags=["Transactions"])
router.include_router(products_router, tags=["Products"])
