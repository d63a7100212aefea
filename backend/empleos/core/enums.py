"""Enumeraciones compartidas del dominio de vacantes."""

from enum import Enum


class SalaryTier(str, Enum):
    """Nivel salarial de una vacante, ordenado de menor a mayor."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"

    @property
    def label(self) -> str:
        """Texto descriptivo que se muestra junto a la vacante."""
        return _SALARY_TIER_LABELS[self]


_SALARY_TIER_LABELS = {
    SalaryTier.LOW: "Sueldo malo",
    SalaryTier.NORMAL: "Sueldo normal",
    SalaryTier.HIGH: "Buen sueldo",
}
