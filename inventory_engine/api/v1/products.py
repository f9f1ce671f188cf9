# inventory_engine/api/v1/products.py

from fastapi import APIRouter, Depends, HTTPException, status
from inventory_engine.api.dependencies import get_warehouse
from inventory_engine.core.exceptions import UnknownProduct
from inventory_engine.core.models.response import ProductLotsResponse
from inventory_engine.logic.warehouse import Warehouse

router = APIRouter()

@router.get(
    "/products/{product_name}/lots",
    response_model=ProductLotsResponse,
    summary="List the open lots of a product",
    description="Returns the product's open lots ordered by price per unit, "
                "cheapest (next to be consumed) first."
)
def get_product_lots_endpoint(
    product_name: str,
    warehouse: Warehouse = Depends(get_warehouse)
) -> ProductLotsResponse:
    try:
        lots = warehouse.get_open_lots(product_name)
    except UnknownProduct as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProductLotsResponse(
        product_name=product_name,
        available_quantity=sum(lot.quantity for lot in lots),
        lots=lots
    )
