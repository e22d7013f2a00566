"""
Dependencies de FastAPI: acceso a las páginas creadas en el lifespan.
"""

from fastapi import Request

from dental_admin.pages import (
    AppointmentsPage,
    DentalRecordsPage,
    DentistsPage,
    EntityPage,
    PatientsPage,
)


def _page(request: Request, name: str) -> EntityPage:
    return request.app.state.pages[name]


def get_patients_page(request: Request) -> PatientsPage:
    return _page(request, "patients")


def get_dentists_page(request: Request) -> DentistsPage:
    return _page(request, "dentists")


def get_appointments_page(request: Request) -> AppointmentsPage:
    return _page(request, "appointments")


def get_dental_records_page(request: Request) -> DentalRecordsPage:
    return _page(request, "dental-records")
