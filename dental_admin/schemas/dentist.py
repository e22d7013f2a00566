"""
Schemas para Dentist — odontólogos y sus horarios de trabajo.
"""

from pydantic import Field

from dental_admin.schemas.base import WireModel

SPECIALTIES: tuple[str, ...] = (
    "Odontología General",
    "Ortodoncista",
    "Endodoncista",
    "Periodoncista",
    "Cirujano Oral",
    "Odontopediatra",
    "Prostodoncista",
)

DAYS_OF_WEEK: tuple[str, ...] = (
    "Lunes",
    "Martes",
    "Miércoles",
    "Jueves",
    "Viernes",
    "Sábado",
    "Domingo",
)


class WorkingHours(WireModel):
    day_of_week: str = ""
    start_time: str = ""
    end_time: str = ""


class DentistDraft(WireModel):
    """Borrador editable de un odontólogo (sin id)."""
    license_number: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    specialty: str = ""
    working_hours: list[WorkingHours] = Field(default_factory=list)
    active: bool = True

    def create_payload(self) -> dict:
        return self.to_wire()


class Dentist(DentistDraft):
    id: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
