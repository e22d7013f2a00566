"""
Servicio de expedientes dentales: recurso `/dental-records` de la API remota.
"""

from dental_admin.schemas.dental_record import DentalRecord, DentalRecordDraft
from dental_admin.services.api_client import ApiClient, path_param

COLLECTION = "dental-records"

# Timestamps asignados por el servidor
_SERVER_FIELDS = {"created_at", "updated_at"}


async def list_dental_records(client: ApiClient) -> list[DentalRecord]:
    data = await client.get("/dental-records")
    return [DentalRecord.model_validate(item) for item in data or []]


async def get_dental_record(client: ApiClient, record_id: str) -> DentalRecord:
    data = await client.get(f"/dental-records/{path_param(record_id)}")
    return DentalRecord.model_validate(data)


async def get_dental_record_by_patient(client: ApiClient, patient_id: str) -> DentalRecord:
    data = await client.get(f"/dental-records/patient/{path_param(patient_id)}")
    return DentalRecord.model_validate(data)


async def create_dental_record(client: ApiClient, draft: DentalRecordDraft) -> DentalRecord | None:
    data = await client.post("/dental-records", draft.create_payload())
    return DentalRecord.model_validate(data) if data else None


async def update_dental_record(client: ApiClient, record: DentalRecord) -> DentalRecord | None:
    data = await client.put(
        f"/dental-records/{path_param(record.id)}",
        record.to_wire(exclude=_SERVER_FIELDS),
    )
    return DentalRecord.model_validate(data) if data else None


async def delete_dental_record(client: ApiClient, record_id: str) -> None:
    await client.delete(f"/dental-records/{path_param(record_id)}")
