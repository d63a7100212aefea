"""Servicio de consulta de vacantes.

Es la única superficie de lógica de negocio que usan los routers: listar,
buscar por id y clasificar el salario. No guarda estado propio más allá del
almacén que recibe en el constructor.
"""

from __future__ import annotations

from typing import List

from empleos.core.enums import SalaryTier
from empleos.models.vacante import JobPosting
from empleos.services.vacante_store import VacanteStore

LOW_SALARY_THRESHOLD = 2000.0
NORMAL_SALARY_THRESHOLD = 8000.0


class VacanteService:
    def __init__(self, store: VacanteStore) -> None:
        self.store = store

    def find_all(self) -> List[JobPosting]:
        return self.store.all()

    def find_by_id(self, posting_id: int) -> List[JobPosting]:
        """Lista con la vacante encontrada, o vacía si el id no existe.

        Si hubiera ids duplicados gana el primero en orden de inserción.
        """
        for posting in self.store.all():
            if posting.id is not None and posting.id == posting_id:
                return [posting]
        return []

    @staticmethod
    def classify(posting: JobPosting) -> SalaryTier:
        """Clasifica el salario; un valor justo en el umbral cae en el nivel inferior."""
        if posting.salary <= LOW_SALARY_THRESHOLD:
            return SalaryTier.LOW
        if posting.salary <= NORMAL_SALARY_THRESHOLD:
            return SalaryTier.NORMAL
        return SalaryTier.HIGH
