"""
Servicio de odontólogos: recurso `/dentists` de la API remota.
"""

from dental_admin.schemas.dentist import Dentist, DentistDraft
from dental_admin.services.api_client import ApiClient, path_param

COLLECTION = "dentists"


async def list_dentists(client: ApiClient) -> list[Dentist]:
    data = await client.get("/dentists")
    return [Dentist.model_validate(item) for item in data or []]


async def get_dentist(client: ApiClient, dentist_id: str) -> Dentist:
    data = await client.get(f"/dentists/{path_param(dentist_id)}")
    return Dentist.model_validate(data)


async def get_dentist_by_license_number(client: ApiClient, license_number: str) -> Dentist:
    data = await client.get(f"/dentists/license/{path_param(license_number)}")
    return Dentist.model_validate(data)


async def list_dentists_by_specialty(client: ApiClient, specialty: str) -> list[Dentist]:
    data = await client.get(f"/dentists/specialty/{path_param(specialty)}")
    return [Dentist.model_validate(item) for item in data or []]


async def create_dentist(client: ApiClient, draft: DentistDraft) -> Dentist | None:
    data = await client.post("/dentists", draft.create_payload())
    return Dentist.model_validate(data) if data else None


async def update_dentist(client: ApiClient, dentist: Dentist) -> Dentist | None:
    data = await client.put(f"/dentists/{path_param(dentist.id)}", dentist.to_wire())
    return Dentist.model_validate(data) if data else None


async def delete_dentist(client: ApiClient, dentist_id: str) -> None:
    await client.delete(f"/dentists/{path_param(dentist_id)}")
