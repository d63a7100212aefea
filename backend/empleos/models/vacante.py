"""Definición del modelo de datos de una vacante (oferta de empleo).

Las vacantes se crean una única vez al arrancar el proceso y nunca se
modifican después, por eso el modelo está congelado: cualquier intento de
reasignar un campo lanza un error de validación.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_IMAGE = "no-image.png"


class JobPosting(BaseModel):
    """Una oferta de trabajo publicada en el portal."""

    id: Optional[int] = None  # Único por convención; el almacén no lo comprueba
    title: str  # Nombre del puesto
    description: str = ""
    posted_date: date  # Fecha de publicación
    salary: float = 0.0
    # Destacada (True), no destacada (False) o sin indicar (None).
    # Acepta también los valores heredados 1/0.
    featured: Optional[bool] = None
    image: str = DEFAULT_IMAGE  # Logo de la vacante

    model_config = ConfigDict(frozen=True)

    @field_validator("image", mode="before")
    @classmethod
    def _default_image(cls, value: object) -> object:
        """Sustituye una imagen vacía o ausente por la imagen por defecto."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_IMAGE
        return value
