"""
Servicio de tratamientos: recurso `/treatments` de la API remota.
"""

from dental_admin.schemas.treatment import Treatment, TreatmentDraft
from dental_admin.services.api_client import ApiClient, path_param

COLLECTION = "treatments"


async def list_treatments(client: ApiClient) -> list[Treatment]:
    data = await client.get("/treatments")
    return [Treatment.model_validate(item) for item in data or []]


async def get_treatment(client: ApiClient, treatment_id: str) -> Treatment:
    data = await client.get(f"/treatments/{path_param(treatment_id)}")
    return Treatment.model_validate(data)


async def list_treatments_by_category(client: ApiClient, category: str) -> list[Treatment]:
    data = await client.get(f"/treatments/category/{path_param(category)}")
    return [Treatment.model_validate(item) for item in data or []]


async def create_treatment(client: ApiClient, draft: TreatmentDraft) -> Treatment | None:
    data = await client.post("/treatments", draft.create_payload())
    return Treatment.model_validate(data) if data else None


async def update_treatment(client: ApiClient, treatment: Treatment) -> Treatment | None:
    data = await client.put(f"/treatments/{path_param(treatment.id)}", treatment.to_wire())
    return Treatment.model_validate(data) if data else None


async def delete_treatment(client: ApiClient, treatment_id: str) -> None:
    await client.delete(f"/treatments/{path_param(treatment_id)}")
