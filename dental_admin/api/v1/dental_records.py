"""
Endpoints de la página de expedientes dentales: búsqueda y edición de
visitas del borrador abierto.
"""

from typing import Any

from fastapi import Body, Depends, Query

from dental_admin.api.dependencies import get_dental_records_page
from dental_admin.api.v1.page_router import build_page_router, form_edit_errors
from dental_admin.pages import DentalRecordsPage
from dental_admin.schemas.page import PageView

router = build_page_router(get_dental_records_page, "Expediente")

_VISIT_ALIASES = {"dentistId": "dentist_id", "additionalInfo": "additional_info"}


@router.get("/search", response_model=PageView)
async def search_records(
    q: str = Query("", description="Paciente, diagnóstico o procedimiento"),
    page: DentalRecordsPage = Depends(get_dental_records_page),
):
    page.search(q)
    return await page.view()


@router.post("/form/visits", response_model=PageView)
async def add_visit(page: DentalRecordsPage = Depends(get_dental_records_page)):
    """Agrega una visita con fecha de hoy al borrador."""
    page.add_visit()
    return await page.view()


@router.patch("/form/visits/{index}", response_model=PageView)
async def update_visit(
    index: int,
    fields: dict[str, Any] = Body(...),
    page: DentalRecordsPage = Depends(get_dental_records_page),
):
    with form_edit_errors():
        for name, value in fields.items():
            page.update_visit(index, _VISIT_ALIASES.get(name, name), value)
    return await page.view()


@router.delete("/form/visits/{index}", response_model=PageView)
async def remove_visit(index: int, page: DentalRecordsPage = Depends(get_dental_records_page)):
    with form_edit_errors():
        page.remove_visit(index)
    return await page.view()
