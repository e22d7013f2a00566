"""
Schemas para Treatment — catálogo de tratamientos.
"""

from dental_admin.schemas.base import WireModel


class TreatmentDraft(WireModel):
    name: str = ""
    description: str = ""
    category: str = ""
    price: float = 0.0
    duration: int = 0  # minutos

    def create_payload(self) -> dict:
        return self.to_wire()


class Treatment(TreatmentDraft):
    id: str
