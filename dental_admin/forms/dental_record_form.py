"""
Formulario de expedientes dentales.

Las visitas se editan localmente; cada visita nueva recibe un id generado
en el cliente hasta que el expediente se guarda.
"""

from datetime import date
from typing import Any
from uuid import uuid4

from dental_admin.forms.base import EntityForm
from dental_admin.schemas.dental_record import DentalRecordDraft, DentalVisit

VISITS_ERROR = "Se requiere al menos una visita"

_VISIT_FIELDS = {
    "date", "reason", "diagnosis", "treatment", "observations",
    "dentist_id", "additional_info",
}


class DentalRecordForm(EntityForm[DentalRecordDraft]):
    draft_model = DentalRecordDraft
    editable_fields = frozenset({"patient_id", "active"})

    def add_visit(self) -> DentalVisit:
        visit = DentalVisit(id=str(uuid4()), date=date.today().isoformat())
        self.draft.visits.append(visit)
        self.errors.pop("visits", None)
        return visit

    def update_visit(self, index: int, field: str, value: Any) -> None:
        if field not in _VISIT_FIELDS:
            raise KeyError(f"Campo de visita inválido: {field}")
        current = self.draft.visits[index]
        self.draft.visits[index] = DentalVisit.model_validate(
            {**current.model_dump(), field: value}
        )
        self.errors.pop("visits", None)

    def remove_visit(self, index: int) -> None:
        del self.draft.visits[index]
        self.errors.pop("visits", None)

    def check(self, draft: DentalRecordDraft) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not draft.patient_id:
            errors["patient_id"] = "El ID del paciente es requerido"
        if not draft.visits:
            errors["visits"] = VISITS_ERROR
        return errors
