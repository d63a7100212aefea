from datetime import date

import pytest

from empleos.core.enums import SalaryTier
from empleos.models.vacante import DEFAULT_IMAGE, JobPosting
from empleos.services.vacante_service import VacanteService
from empleos.services.vacante_store import VacanteStore


def _posting(salary: float) -> JobPosting:
    return JobPosting(id=1, title="x", posted_date=date(2025, 1, 1), salary=salary)


def test_find_all_delegates_to_store():
    store = VacanteStore()
    service = VacanteService(store)

    assert service.find_all() == store.all()
    assert service.find_all() == service.find_all()


def test_find_by_id_returns_single_match():
    service = VacanteService(VacanteStore())

    found = service.find_by_id(4)

    assert len(found) == 1
    assert found[0].id == 4
    assert found[0].salary == 7900.0


@pytest.mark.parametrize("missing_id", [0, 5, -1, 999])
def test_find_by_id_unknown_returns_empty(missing_id):
    service = VacanteService(VacanteStore())

    assert service.find_by_id(missing_id) == []


def test_find_by_id_first_duplicate_wins_and_skips_unset_ids():
    store = VacanteStore(
        rows=[
            {"title": "sin id", "posted_date": "01-01-2025"},
            {"id": 2, "title": "primera", "posted_date": "01-01-2025"},
            {"id": 2, "title": "segunda", "posted_date": "02-01-2025"},
        ]
    )
    service = VacanteService(store)

    found = service.find_by_id(2)

    assert [p.title for p in found] == ["primera"]


@pytest.mark.parametrize(
    "salary, expected",
    [
        (0.0, SalaryTier.LOW),
        (2000.0, SalaryTier.LOW),
        (2000.01, SalaryTier.NORMAL),
        (8000.0, SalaryTier.NORMAL),
        (8000.01, SalaryTier.HIGH),
    ],
)
def test_classify_boundaries(salary, expected):
    assert VacanteService.classify(_posting(salary)) == expected


def test_tier_labels():
    assert SalaryTier.LOW.label == "Sueldo malo"
    assert SalaryTier.NORMAL.label == "Sueldo normal"
    assert SalaryTier.HIGH.label == "Buen sueldo"


def test_reference_seed_scenario():
    service = VacanteService(VacanteStore())

    tiers = [service.classify(p) for p in service.find_all()]

    assert tiers == [SalaryTier.HIGH, SalaryTier.HIGH, SalaryTier.HIGH, SalaryTier.NORMAL]
    assert service.find_by_id(3)[0].image == DEFAULT_IMAGE
    assert service.find_by_id(4)[0].image == "logo4.png"
