"""
Router principal de la API v1.
Agrupa las páginas de la administración.
"""

from fastapi import APIRouter

from dental_admin.api.v1.patients import router as patients_router
from dental_admin.api.v1.dentists import router as dentists_router
from dental_admin.api.v1.appointments import router as appointments_router
from dental_admin.api.v1.dental_records import router as dental_records_router

api_v1_router = APIRouter()

api_v1_router.include_router(
    patients_router,
    prefix="/patients",
    tags=["Pacientes"],
)

api_v1_router.include_router(
    dentists_router,
    prefix="/dentists",
    tags=["Odontólogos"],
)

api_v1_router.include_router(
    appointments_router,
    prefix="/appointments",
    tags=["Citas"],
)

api_v1_router.include_router(
    dental_records_router,
    prefix="/dental-records",
    tags=["Expedientes Dentales"],
)
