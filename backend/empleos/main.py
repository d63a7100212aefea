"""Punto de entrada de la API usando FastAPI.

Este módulo compone la aplicación: crea el almacén y los servicios,
configura CORS y logging y registra los routers. Los servicios se pasan
explícitamente a `create_app`, lo que permite a los tests montar la
aplicación con datos propios.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from empleos.api.v1.categorias import router as categorias_router
from empleos.api.v1.home import router as home_router
from empleos.api.v1.vacantes import router as vacantes_router
from empleos.core.config import get_settings
from empleos.core.logging import configure_logging
from empleos.services.categoria_service import CategoryService
from empleos.services.vacante_service import VacanteService
from empleos.services.vacante_store import VacanteStore


def create_app(
    vacante_service: Optional[VacanteService] = None,
    category_service: Optional[CategoryService] = None,
) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    # Los servicios viven mientras el proceso está en marcha.
    app.state.vacante_service = vacante_service or VacanteService(VacanteStore())
    app.state.category_service = category_service or CategoryService()

    # CORS configurable via `settings.allowed_origins` (definido en .env)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o) for o in settings.allowed_origins],
        allow_credentials=settings.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def ensure_cors_header(request: Request, call_next):
        """Fallback middleware that sets the CORS headers dynamically.

        - If `ALLOWED_ORIGINS` contains `*`, respond `Access-Control-Allow-Origin: *`.
        - Otherwise, if Origin is present and in the whitelist, echo it back.
        """
        origin = request.headers.get("origin")
        response = await call_next(request)

        if not origin:
            return response

        allowed = [str(o) for o in settings.allowed_origins]
        if allowed == ["*"]:
            response.headers["Access-Control-Allow-Origin"] = "*"
        elif origin in allowed:
            response.headers["Access-Control-Allow-Origin"] = origin
        else:
            return response

        if settings.allow_credentials:
            response.headers["Access-Control-Allow-Credentials"] = "true"
        return response

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(home_router, prefix="/api/v1")
    app.include_router(vacantes_router, prefix="/api/v1")
    app.include_router(categorias_router, prefix="/api/v1")

    return app


app = create_app()
