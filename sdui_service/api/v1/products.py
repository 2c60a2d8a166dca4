"""Product endpoints."""
from typing import List

from fastapi import APIRouter

from sdui_service.models.schemas.product import Product
from sdui_service.services.catalog import product_catalog

router = APIRouter()


@router.get(
    "/products",
    response_model=List[Product],
    response_model_exclude_none=True,
    tags=["Products"],
    summary="List catalog products",
)
def list_products() -> List[Product]:
    return product_catalog.all()


@router.get(
    "/products/{product_id}",
    response_model=Product,
    response_model_exclude_none=True,
    tags=["Products"],
    summary="Get product by id",
    description="Unknown ids return a placeholder product named 'Unknown Product'.",
)
def get_product(product_id: str) -> Product:
    return product_catalog.lookup(product_id)
