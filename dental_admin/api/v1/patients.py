"""
Endpoints de la página de pacientes.
"""

from dental_admin.api.dependencies import get_patients_page
from dental_admin.api.v1.page_router import build_page_router

router = build_page_router(get_patients_page, "Paciente")
