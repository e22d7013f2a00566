"""
Formulario de citas.
"""

from datetime import datetime, timezone

from dental_admin.forms.base import EntityForm
from dental_admin.schemas.appointment import AppointmentDraft, AppointmentStatus


class AppointmentForm(EntityForm[AppointmentDraft]):
    draft_model = AppointmentDraft
    editable_fields = frozenset({"patient_id", "dentist_id", "date_time", "notes"})

    def empty_draft(self) -> AppointmentDraft:
        """Las citas nuevas nacen SCHEDULED y con fecha/hora actual."""
        return AppointmentDraft(
            date_time=datetime.now(timezone.utc),
            status=AppointmentStatus.SCHEDULED,
        )

    def check(self, draft: AppointmentDraft) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not draft.patient_id:
            errors["patient_id"] = "Debe seleccionar un paciente"
        if not draft.dentist_id:
            errors["dentist_id"] = "Debe seleccionar un odontólogo"
        if draft.date_time is None:
            errors["date_time"] = "Debe seleccionar una fecha y hora"
        return errors
