"""
Formulario de pacientes.
"""

import re

from dental_admin.forms.base import EntityForm, check_person
from dental_admin.schemas.patient import PatientDraft

DNI_PATTERN = re.compile(r"^[A-Za-z0-9]{8,12}$")
DNI_ERROR = "El DNI debe tener entre 8 y 12 caracteres alfanuméricos"


class PatientForm(EntityForm[PatientDraft]):
    draft_model = PatientDraft
    # record_number lo asigna el servidor
    editable_fields = frozenset({
        "dni", "first_name", "last_name", "email", "phone",
        "address", "birth_date", "gender",
    })

    def check(self, draft: PatientDraft) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not DNI_PATTERN.match(draft.dni):
            errors["dni"] = DNI_ERROR
        check_person(draft, errors)
        return errors
