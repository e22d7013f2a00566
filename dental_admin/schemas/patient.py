"""
Schemas para Patient.
El número de expediente lo asigna el sistema remoto.
"""

from pydantic import Field

from dental_admin.schemas.base import WireModel


class PatientDraft(WireModel):
    """Borrador editable de un paciente (sin id)."""
    dni: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    record_number: str = Field("", description="Asignado por el servidor, solo lectura")
    address: str = ""
    birth_date: str = ""
    gender: str = ""

    def create_payload(self) -> dict:
        return self.to_wire(exclude={"record_number"})


class Patient(PatientDraft):
    id: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
