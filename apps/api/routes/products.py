"""Product catalog endpoint."""

from typing import List

from fastapi import APIRouter, Depends

from core.application.dtos import ProductDTO
from core.application.services import CatalogService

from apps.api.deps import get_catalog_service

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductDTO])
async def list_products(
    catalog: CatalogService = Depends(get_catalog_service),
) -> List[ProductDTO]:
    return catalog.list_products()
