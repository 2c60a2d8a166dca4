"""
Product Catalog
===============

In-memory lookup over the static sample catalog. Unknown ids resolve to a
"not found" sentinel product instead of an error so the product screen and
the product endpoint always have something to render.
"""
from typing import Dict, Iterable, List

from loguru import logger

from sdui_service.data.sample_products import CATALOG_PRODUCTS
from sdui_service.models.schemas.product import Product


class ProductCatalog:
    """Read-only product index keyed by id"""

    def __init__(self, products: Iterable[Product] = CATALOG_PRODUCTS):
        self._products: Dict[str, Product] = {product.id: product for product in products}
        logger.debug(f"ProductCatalog loaded: {len(self._products)} products")

    def __len__(self) -> int:
        return len(self._products)

    @property
    def is_loaded(self) -> bool:
        return bool(self._products)

    def lookup(self, product_id: str) -> Product:
        """
        Resolve a product id.

        Args:
            product_id: Catalog id, e.g. ``prod_3``

        Returns:
            The catalog entry, or the not-found sentinel for unknown ids
        """
        product = self._products.get(product_id)
        if product is None:
            logger.info(f"Product not found, serving sentinel: {product_id!r}")
            return Product.not_found(product_id)
        return product

    def all(self) -> List[Product]:
        return list(self._products.values())


product_catalog = ProductCatalog()
