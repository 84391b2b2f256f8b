"""Application DTOs for the product catalog."""

from pydantic import BaseModel


class ProductDTO(BaseModel):
    """One catalog entry."""

    id: int
    name: str
    price: int

    model_config = {"frozen": True}
