"""Rutas de la portada: bienvenida, tabla y listado de vacantes."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from empleos.api.v1.dependencies import get_vacante_service
from empleos.api.v1.vacantes import posting_to_dict
from empleos.core.config import get_settings
from empleos.services.vacante_service import VacanteService

router = APIRouter(tags=["home"])

logger = logging.getLogger(__name__)


@router.get("/", summary="Home page data")
async def home(service: VacanteService = Depends(get_vacante_service)) -> dict:
    postings = service.find_all()
    if postings:
        logger.info("Sending %d postings to home", len(postings))
    else:
        logger.warning("No postings available for the home page")

    return {
        "mensaje": get_settings().welcome_message,
        "fecha": date.today(),
        "total": len(postings),
        "vacantes": [posting_to_dict(p, service) for p in postings],
    }


@router.get("/tabla", summary="All postings as a table")
async def table(service: VacanteService = Depends(get_vacante_service)) -> list:
    postings = service.find_all()
    logger.info("Sending %d postings to table", len(postings))
    return [posting_to_dict(p, service) for p in postings]


@router.get("/listado", summary="Posting titles")
async def listing(service: VacanteService = Depends(get_vacante_service)) -> dict:
    return {"empleos": [p.title for p in service.find_all()]}


@router.get("/detalle", summary="Detail of the first featured posting")
async def featured_detail(
    service: VacanteService = Depends(get_vacante_service),
) -> dict:
    for posting in service.find_all():
        if posting.featured:
            return posting_to_dict(posting, service)

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="No featured posting.",
    )
