"""
Servicio de pacientes: recurso `/patients` de la API remota.
"""

from dental_admin.schemas.patient import Patient, PatientDraft
from dental_admin.services.api_client import ApiClient, path_param

COLLECTION = "patients"


async def list_patients(client: ApiClient) -> list[Patient]:
    data = await client.get("/patients")
    return [Patient.model_validate(item) for item in data or []]


async def get_patient(client: ApiClient, patient_id: str) -> Patient:
    data = await client.get(f"/patients/{path_param(patient_id)}")
    return Patient.model_validate(data)


async def get_patient_by_dni(client: ApiClient, dni: str) -> Patient:
    data = await client.get(f"/patients/dni/{path_param(dni)}")
    return Patient.model_validate(data)


async def get_patient_by_record_number(client: ApiClient, record_number: str) -> Patient:
    """Busca por número de expediente (asignado por el servidor)."""
    data = await client.get(f"/patients/record/{path_param(record_number)}")
    return Patient.model_validate(data)


async def create_patient(client: ApiClient, draft: PatientDraft) -> Patient | None:
    data = await client.post("/patients", draft.create_payload())
    return Patient.model_validate(data) if data else None


async def update_patient(client: ApiClient, patient: Patient) -> Patient | None:
    data = await client.put(f"/patients/{path_param(patient.id)}", patient.to_wire())
    return Patient.model_validate(data) if data else None


async def delete_patient(client: ApiClient, patient_id: str) -> None:
    await client.delete(f"/patients/{path_param(patient_id)}")
