"""
Endpoints de la página de citas.
"""

from fastapi import Depends

from dental_admin.api.dependencies import get_appointments_page
from dental_admin.api.v1.page_router import build_page_router, get_row_or_404
from dental_admin.pages import AppointmentsPage
from dental_admin.schemas.page import PageView

router = build_page_router(get_appointments_page, "Cita")


@router.post("/{record_id}/cancel", response_model=PageView)
async def cancel_appointment(
    record_id: str,
    page: AppointmentsPage = Depends(get_appointments_page),
):
    """
    Cancela una cita programada (SCHEDULED → CANCELLED) sin confirmación.
    El resultado se informa con un toast.
    """
    record = await get_row_or_404(page, record_id, "Cita")
    await page.cancel_appointment(record)
    return await page.view()
