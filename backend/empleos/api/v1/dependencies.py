"""Proveedores de dependencias para los routers.

Los servicios se construyen en `create_app` y se guardan en `app.state`;
aquí sólo los recuperamos para inyectarlos con `Depends`.
"""

from fastapi import Request

from empleos.services.categoria_service import CategoryService
from empleos.services.vacante_service import VacanteService


def get_vacante_service(request: Request) -> VacanteService:
    return request.app.state.vacante_service


def get_category_service(request: Request) -> CategoryService:
    return request.app.state.category_service
