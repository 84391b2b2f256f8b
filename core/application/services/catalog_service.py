"""Static product catalog."""

from typing import List

from core.application.dtos.product_dto import ProductDTO


PRODUCTS: List[ProductDTO] = [
    ProductDTO(id=1, name="Chocolate Chip", price=25),
    ProductDTO(id=2, name="Red Velvet", price=30),
]


class CatalogService:
    """Read-only catalog of cookies on offer."""

    def __init__(self, products: List[ProductDTO] = PRODUCTS) -> None:
        self._products = list(products)

    def list_products(self) -> List[ProductDTO]:
        return list(self._products)
