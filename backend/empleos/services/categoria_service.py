"""Servicio simple en memoria para las categorías de empleo."""

from __future__ import annotations

import logging
from threading import Lock
from typing import List

from empleos.models.categoria import Category, CategoryIn

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Gestión de categorías. MVP: almacenamiento en memoria.
    Es el único estado mutable de la aplicación, por eso las escrituras
    pasan por un lock.
    """

    def __init__(self) -> None:
        self._categories: List[Category] = []
        self._lock = Lock()

    def save(self, data: CategoryIn) -> Category:
        """Asigna el siguiente id secuencial y guarda la categoría."""
        logger.info("Saving category name=%r description=%r", data.name, data.description)
        with self._lock:
            category = Category(
                id=len(self._categories) + 1,
                name=data.name,
                description=data.description,
            )
            self._categories.append(category)
        return category

    def find_all(self) -> List[Category]:
        with self._lock:
            return list(self._categories)
