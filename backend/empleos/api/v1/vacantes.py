from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from empleos.api.v1.dependencies import get_vacante_service
from empleos.models.vacante import JobPosting
from empleos.services.vacante_service import VacanteService

router = APIRouter(prefix="/vacantes", tags=["vacantes"])

logger = logging.getLogger(__name__)


def posting_to_dict(posting: JobPosting, service: VacanteService) -> dict:
    """Serializa una vacante junto con su nivel salarial."""
    tier = service.classify(posting)
    return {
        "id": posting.id,
        "title": posting.title,
        "description": posting.description,
        "posted_date": posting.posted_date,
        "salary": posting.salary,
        "featured": posting.featured,
        "image": posting.image,
        "salary_tier": tier,
        "salary_tier_label": tier.label,
    }


def _get_posting_or_404(service: VacanteService, posting_id: int) -> JobPosting:
    found = service.find_by_id(posting_id)
    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vacante not found.",
        )
    return found[0]


@router.get("/view-patch/{posting_id}", summary="Get a job posting by path id (legacy path)")
@router.get("/view/{posting_id}", summary="Get a job posting by path id")
async def view_posting(
    posting_id: int,
    service: VacanteService = Depends(get_vacante_service),
) -> dict:
    logger.info("View posting requested via path: id=%s", posting_id)
    posting = _get_posting_or_404(service, posting_id)
    return posting_to_dict(posting, service)


@router.get("/view-request", summary="Get a job posting by query parameter")
async def view_posting_request(
    posting_id: int = Query(..., alias="idVacante"),
    service: VacanteService = Depends(get_vacante_service),
) -> dict:
    logger.info("View posting requested via query: idVacante=%s", posting_id)
    posting = _get_posting_or_404(service, posting_id)
    return posting_to_dict(posting, service)


@router.get("/delete", summary="Acknowledge a delete request")
async def delete_posting(posting_id: int = Query(..., alias="id")) -> dict:
    # El almacén es de sólo lectura: no se borra nada, sólo se confirma.
    logger.info("Delete requested for posting id=%s", posting_id)
    return {
        "id": posting_id,
        "mensaje": f"Borrando vacante con id: {posting_id}",
    }
