"""
Formulario de odontólogos, con edición local de horarios de trabajo.

Las horas se normalizan a `HH:MM` al cargarse y al editarse. Los horarios
se quitan por posición: se asume un único editor por borrador.
"""

import re

from dental_admin.core.timefmt import normalize_time
from dental_admin.forms.base import EntityForm, check_person
from dental_admin.schemas.dentist import SPECIALTIES, DentistDraft, WorkingHours

LICENSE_PATTERN = re.compile(r"^[A-Za-z0-9]{5,10}$")
LICENSE_ERROR = "El número de licencia debe tener entre 5 y 10 caracteres alfanuméricos"
SPECIALTY_ERROR = "Debe seleccionar una especialidad"
WORKING_HOURS_ERROR = "Cada horario debe tener hora de inicio y fin válidas (HH:MM)"

DEFAULT_START_TIME = "08:30"
DEFAULT_END_TIME = "17:30"

_TIME_FIELDS = {"start_time", "end_time"}
_WORKING_HOURS_FIELDS = {"day_of_week"} | _TIME_FIELDS


class DentistForm(EntityForm[DentistDraft]):
    draft_model = DentistDraft
    editable_fields = frozenset({
        "license_number", "first_name", "last_name", "email", "phone",
        "specialty", "active",
    })

    def draft_from(self, record) -> DentistDraft:
        draft = super().draft_from(record)
        draft.working_hours = [
            wh.model_copy(update={
                "start_time": normalize_time(wh.start_time),
                "end_time": normalize_time(wh.end_time),
            })
            for wh in draft.working_hours
        ]
        return draft

    # ── Horarios de trabajo ──────────────────────────

    def add_working_hours(self) -> None:
        self.draft.working_hours.append(
            WorkingHours(start_time=DEFAULT_START_TIME, end_time=DEFAULT_END_TIME)
        )
        self.errors.pop("working_hours", None)

    def update_working_hours(self, index: int, field: str, value: str) -> None:
        if field not in _WORKING_HOURS_FIELDS:
            raise KeyError(f"Campo de horario inválido: {field}")
        if field in _TIME_FIELDS:
            value = normalize_time(value)
        current = self.draft.working_hours[index]
        self.draft.working_hours[index] = current.model_copy(update={field: value})
        self.errors.pop("working_hours", None)

    def remove_working_hours(self, index: int) -> None:
        del self.draft.working_hours[index]
        self.errors.pop("working_hours", None)

    # ── Validación ───────────────────────────────────

    def check(self, draft: DentistDraft) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not LICENSE_PATTERN.match(draft.license_number):
            errors["license_number"] = LICENSE_ERROR
        check_person(draft, errors)
        if draft.specialty not in SPECIALTIES:
            errors["specialty"] = SPECIALTY_ERROR
        if any(
            not normalize_time(wh.start_time) or not normalize_time(wh.end_time)
            for wh in draft.working_hours
        ):
            errors["working_hours"] = WORKING_HOURS_ERROR
        return errors
