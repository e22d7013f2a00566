"""
Endpoints de la página de odontólogos, incluida la edición de horarios
de trabajo del borrador abierto.
"""

from fastapi import Body, Depends

from dental_admin.api.dependencies import get_dentists_page
from dental_admin.api.v1.page_router import build_page_router, form_edit_errors
from dental_admin.pages import DentistsPage
from dental_admin.schemas.page import PageView

router = build_page_router(get_dentists_page, "Odontólogo")


@router.post("/form/working-hours", response_model=PageView)
async def add_working_hours(page: DentistsPage = Depends(get_dentists_page)):
    """Agrega un horario (08:30–17:30, sin día) al borrador."""
    page.add_working_hours()
    return await page.view()


@router.patch("/form/working-hours/{index}", response_model=PageView)
async def update_working_hours(
    index: int,
    fields: dict[str, str] = Body(..., description="dayOfWeek / startTime / endTime"),
    page: DentistsPage = Depends(get_dentists_page),
):
    """Modifica un horario; las horas se normalizan a HH:MM."""
    aliases = {"dayOfWeek": "day_of_week", "startTime": "start_time", "endTime": "end_time"}
    with form_edit_errors():
        for name, value in fields.items():
            page.update_working_hours(index, aliases.get(name, name), value)
    return await page.view()


@router.delete("/form/working-hours/{index}", response_model=PageView)
async def remove_working_hours(index: int, page: DentistsPage = Depends(get_dentists_page)):
    with form_edit_errors():
        page.remove_working_hours(index)
    return await page.view()
