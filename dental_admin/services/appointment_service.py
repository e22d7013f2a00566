"""
Servicio de citas: recurso `/appointments` de la API remota.

La cancelación es un endpoint dedicado (POST /appointments/{id}/cancel);
el cliente nunca escribe CANCELLED por sí mismo.
"""

from datetime import date

from dental_admin.schemas.appointment import Appointment, AppointmentDraft
from dental_admin.services.api_client import ApiClient, path_param

COLLECTION = "appointments"


def _to_list(data) -> list[Appointment]:
    return [Appointment.model_validate(item) for item in data or []]


async def list_appointments(client: ApiClient) -> list[Appointment]:
    return _to_list(await client.get("/appointments"))


async def get_appointment(client: ApiClient, appointment_id: str) -> Appointment:
    data = await client.get(f"/appointments/{path_param(appointment_id)}")
    return Appointment.model_validate(data)


async def list_appointments_by_patient(client: ApiClient, patient_id: str) -> list[Appointment]:
    return _to_list(await client.get(f"/appointments/patient/{path_param(patient_id)}"))


async def list_appointments_by_dentist(client: ApiClient, dentist_id: str) -> list[Appointment]:
    return _to_list(await client.get(f"/appointments/dentist/{path_param(dentist_id)}"))


async def list_appointments_by_dentist_and_date(
    client: ApiClient, dentist_id: str, day: date | str
) -> list[Appointment]:
    """Citas de un odontólogo en un día (`YYYY-MM-DD`)."""
    day_str = day.isoformat() if isinstance(day, date) else day
    data = await client.get(
        f"/appointments/dentist/{path_param(dentist_id)}/date",
        params={"date": day_str},
    )
    return _to_list(data)


async def create_appointment(client: ApiClient, draft: AppointmentDraft) -> Appointment | None:
    data = await client.post("/appointments", draft.create_payload())
    return Appointment.model_validate(data) if data else None


async def update_appointment(client: ApiClient, appointment: Appointment) -> Appointment | None:
    data = await client.put(
        f"/appointments/{path_param(appointment.id)}", appointment.to_wire()
    )
    return Appointment.model_validate(data) if data else None


async def cancel_appointment(client: ApiClient, appointment_id: str) -> None:
    """Transición SCHEDULED → CANCELLED del lado del servidor."""
    await client.post(f"/appointments/{path_param(appointment_id)}/cancel")


async def delete_appointment(client: ApiClient, appointment_id: str) -> None:
    await client.delete(f"/appointments/{path_param(appointment_id)}")
