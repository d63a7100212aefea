"""Modelos de categorías de empleo."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CategoryIn(BaseModel):
    """Datos recibidos desde el formulario de alta de categoría."""

    name: str = Field(min_length=1)
    description: str = ""


class Category(BaseModel):
    """Categoría ya guardada, con su identificador asignado."""

    id: int
    name: str
    description: str = ""

    model_config = ConfigDict(frozen=True)
