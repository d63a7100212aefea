from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from empleos.api.v1.dependencies import get_category_service
from empleos.models.categoria import Category, CategoryIn
from empleos.services.categoria_service import CategoryService

router = APIRouter(prefix="/categorias", tags=["categorias"])


@router.get("/index", summary="List saved categories")
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> List[Category]:
    return service.find_all()


@router.post(
    "/save",
    summary="Save a new category",
    status_code=status.HTTP_201_CREATED,
)
async def save_category(
    payload: CategoryIn,
    service: CategoryService = Depends(get_category_service),
) -> Category:
    return service.save(payload)
