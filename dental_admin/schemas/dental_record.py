"""
Schemas para DentalRecord — expediente dental basado en visitas.

El modelo canónico es el arreglo de visitas; el expediente no tiene campos
planos de diagnóstico/tratamiento.

Mapas abiertos (`personal_info`, `medical_history`, `dental_history`,
`notes` y los `additional_info` de los sub-registros): claves string con
valores JSON arbitrarios. Versión del esquema de estos mapas:
`OPEN_MAP_SCHEMA_VERSION`.
"""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from dental_admin.schemas.base import WireModel

OPEN_MAP_SCHEMA_VERSION = 1

OpenMap = dict[str, Any]


class SubRecord(WireModel):
    """Sub-registro abierto: acepta campos extra que envíe la API."""
    model_config = ConfigDict(extra="allow")

    id: str = ""
    additional_info: OpenMap = Field(default_factory=dict)


class DentalVisit(SubRecord):
    date: str = ""
    reason: str = ""
    diagnosis: str = ""
    treatment: str = ""
    observations: str = ""
    dentist_id: str = ""


class DentalProcedure(SubRecord):
    name: str = ""
    description: str = ""
    date: str = ""
    tooth: str = ""
    dentist_id: str = ""


class DentalImage(SubRecord):
    url: str = ""
    type: str = ""
    date: str = ""
    description: str = ""


class Prescription(SubRecord):
    date: str = ""
    medication: str = ""
    dosage: str = ""
    instructions: str = ""
    dentist_id: str = ""


class DentalRecordDraft(WireModel):
    """Borrador editable de un expediente (sin id ni timestamps)."""
    patient_id: str = ""
    personal_info: OpenMap = Field(default_factory=dict)
    visits: list[DentalVisit] = Field(default_factory=list)
    procedures: list[DentalProcedure] = Field(default_factory=list)
    images: list[DentalImage] = Field(default_factory=list)
    prescriptions: list[Prescription] = Field(default_factory=list)
    medical_history: OpenMap = Field(default_factory=dict)
    dental_history: OpenMap = Field(default_factory=dict)
    allergies: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)
    notes: OpenMap = Field(default_factory=dict)
    active: bool = True

    @field_validator("allergies", "medications")
    @classmethod
    def unique_strings(cls, v: list[str]) -> list[str]:
        """Conjuntos de strings: sin duplicados, conservando el orden."""
        return list(dict.fromkeys(v))

    def create_payload(self) -> dict:
        return self.to_wire()


class DentalRecord(DentalRecordDraft):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def last_visit(self) -> DentalVisit | None:
        return self.visits[-1] if self.visits else None
