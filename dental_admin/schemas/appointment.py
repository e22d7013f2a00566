"""
Schemas para Appointment — citas.

Estados:
    SCHEDULED → CANCELLED   (vía endpoint dedicado de cancelación)
    SCHEDULED → COMPLETED   (flujo clínico, no se fuerza en el cliente)
"""

import enum
from datetime import datetime

from dental_admin.schemas.base import WireModel


class AppointmentStatus(str, enum.Enum):
    """Estados de una cita."""
    SCHEDULED = "SCHEDULED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    AppointmentStatus.SCHEDULED: "Programada",
    AppointmentStatus.CANCELLED: "Cancelada",
    AppointmentStatus.COMPLETED: "Completada",
}


class AppointmentDraft(WireModel):
    """Borrador editable de una cita (sin id)."""
    patient_id: str = ""
    dentist_id: str = ""
    date_time: datetime | None = None
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    consultation_number: str = ""
    notes: str = ""

    def create_payload(self) -> dict:
        return self.to_wire()


class Appointment(AppointmentDraft):
    id: str
