"""
Product models used by the catalog and by product listings.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    """Catalog entry served by /products/{id}"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float
    image_url: str = ""
    description: str = ""
    discount: Optional[int] = None

    @classmethod
    def not_found(cls, product_id: str) -> "Product":
        """Sentinel returned for ids the catalog does not know"""
        return cls(
            id=product_id,
            name="Unknown Product",
            price=99.99,
            image_url="",
            description="Product not found",
        )

    @property
    def is_sentinel(self) -> bool:
        return self.name == "Unknown Product" and self.description == "Product not found"


class ProductCard(BaseModel):
    """Listing entry rendered inside product grids and carousels"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float
    original_price: Optional[float] = None
    discount: Optional[int] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    badge: Optional[str] = None
    is_favorite: Optional[bool] = None
    image_url: str

    def to_props(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
