"""Almacén en memoria de vacantes.

En esta versión no hay base de datos: el almacén se rellena una sola vez
con datos de ejemplo al construirse y a partir de ahí sólo se lee. Como
nada se modifica después del sembrado, varias peticiones pueden leer a la
vez sin necesidad de bloqueos.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from empleos.core.config import get_settings
from empleos.models.vacante import JobPosting

logger = logging.getLogger(__name__)


# Filas de ejemplo; la fecha se guarda como texto dd-MM-yyyy y se parsea al sembrar.
SEED_ROWS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "title": "Ingeniero Civil",
        "description": "Solicitamos para el equipo de construcción de puente peatonal",
        "posted_date": "01-01-2025",
        "salary": 14000.0,
        "featured": 1,
        "image": "logo1.png",
    },
    {
        "id": 2,
        "title": "Contador Público",
        "description": "Contador titulado con experiencia en contabilidades de costo",
        "posted_date": "01-02-2025",
        "salary": 12000.0,
        "featured": 0,
        "image": "logo2.png",
    },
    {
        "id": 3,
        "title": "Ingeniero Eléctrico",
        "description": "Ingeniero eléctrico con experiencia en instalaciones industriales",
        "posted_date": "01-03-2025",
        "salary": 10500.0,
        "featured": 0,
    },
    {
        "id": 4,
        "title": "Diseñador Gráfico",
        "description": "Diseñador gráfico con experiencia en diseño digital y branding",
        "posted_date": "01-04-2025",
        "salary": 7900.0,
        "featured": 1,
        "image": "logo4.png",
    },
]


class SeedParseError(ValueError):
    """Fecha literal mal formada en los datos de ejemplo."""


class VacanteStore:
    """
    Colección ordenada de vacantes. MVP: almacenamiento en memoria.
    Más adelante se puede sustituir por BD persistente.
    """

    def __init__(
        self,
        rows: Optional[Iterable[Dict[str, Any]]] = None,
        date_format: Optional[str] = None,
    ) -> None:
        self.date_format = date_format or get_settings().seed_date_format
        self._postings: List[JobPosting] = []
        self.seed(SEED_ROWS if rows is None else rows)

    def seed(self, rows: Iterable[Dict[str, Any]]) -> None:
        """Crea las vacantes a partir de las filas; las filas inválidas se omiten."""
        for row in rows:
            try:
                posted_date = self._parse_date(row.get("posted_date"))
                posting = JobPosting(**{**row, "posted_date": posted_date})
            except (SeedParseError, ValidationError) as e:
                logger.warning("Skipping seed row id=%s: %s", row.get("id"), e)
                continue
            self._postings.append(posting)

        logger.info("Vacante store seeded with %d postings", len(self._postings))

    def _parse_date(self, raw: Any) -> date:
        if isinstance(raw, date):
            return raw
        try:
            return datetime.strptime(str(raw), self.date_format).date()
        except ValueError as e:
            raise SeedParseError(f"invalid date {raw!r}") from e

    def all(self) -> List[JobPosting]:
        """Devuelve todas las vacantes en orden de inserción (copia de la lista)."""
        return list(self._postings)
