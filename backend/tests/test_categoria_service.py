from empleos.models.categoria import CategoryIn
from empleos.services.categoria_service import CategoryService


def test_save_assigns_sequential_ids():
    service = CategoryService()

    first = service.save(CategoryIn(name="Ventas", description="Comerciales"))
    second = service.save(CategoryIn(name="Arquitectura"))

    assert (first.id, second.id) == (1, 2)
    assert [c.name for c in service.find_all()] == ["Ventas", "Arquitectura"]
    assert second.description == ""
