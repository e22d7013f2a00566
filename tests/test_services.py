"""
Tests de los servicios de recursos contra la API remota simulada:
rutas, payloads camelCase y traducción de errores.
"""

import json
from datetime import date, datetime

import httpx
import pytest

from dental_admin.core.exceptions import RemoteApiError, RemoteConnectionError, RemoteNotFoundError
from dental_admin.schemas import (
    AppointmentDraft,
    AppointmentStatus,
    DentalRecordDraft,
    DentalVisit,
    DentistDraft,
    PatientDraft,
    TreatmentDraft,
    WorkingHours,
)
from dental_admin.services import (
    appointment_service,
    dental_record_service,
    dentist_service,
    patient_service,
    treatment_service,
)
from dental_admin.services.api_client import ApiClient, path_param


def _last_body(backend) -> dict:
    return json.loads(backend.requests[-1].content)


# ── Pacientes ────────────────────────────────────────


async def test_create_patient_sends_camel_case_without_record_number(api_client, backend):
    draft = PatientDraft(dni="12345678", first_name="Ana", last_name="Quispe",
                         email="a@b.com", record_number="EXP-9999")

    patient = await patient_service.create_patient(api_client, draft)

    body = _last_body(backend)
    assert backend.requests[-1].url.path == "/api/patients"
    assert body["firstName"] == "Ana"
    assert body["lastName"] == "Quispe"
    assert "recordNumber" not in body
    assert "first_name" not in body
    assert patient.id.startswith("pat-")
    assert patient.record_number.startswith("EXP-")


async def test_patient_lookups(api_client, backend):
    seeded = backend.seed("patients", dni="87654321", firstName="Luis", lastName="Rojas")

    by_dni = await patient_service.get_patient_by_dni(api_client, "87654321")
    by_record = await patient_service.get_patient_by_record_number(api_client, seeded["recordNumber"])
    by_id = await patient_service.get_patient(api_client, seeded["id"])

    assert by_dni.id == by_record.id == by_id.id == seeded["id"]
    assert by_id.full_name == "Luis Rojas"


async def test_update_patient_puts_full_entity(api_client, backend):
    seeded = backend.seed("patients", dni="87654321", firstName="Luis", lastName="Rojas")
    patient = await patient_service.get_patient(api_client, seeded["id"])

    updated = await patient_service.update_patient(
        api_client, patient.model_copy(update={"phone": "999111222"})
    )

    assert backend.requests[-1].method == "PUT"
    assert backend.requests[-1].url.path == f"/api/patients/{seeded['id']}"
    assert _last_body(backend)["phone"] == "999111222"
    assert updated.phone == "999111222"


async def test_nulls_from_api_fall_back_to_defaults(api_client, backend):
    backend.seed("patients", dni="11112222", firstName="Eva", lastName="Soto", email=None, phone=None)

    [patient] = await patient_service.list_patients(api_client)

    assert patient.email == ""
    assert patient.phone == ""


async def test_delete_patient_returns_none(api_client, backend):
    seeded = backend.seed("patients", dni="11112222")
    assert await patient_service.delete_patient(api_client, seeded["id"]) is None
    assert backend.collections["patients"] == {}


# ── Odontólogos ──────────────────────────────────────


async def test_dentist_payload_includes_working_hours(api_client, backend):
    draft = DentistDraft(
        license_number="LIC12345", first_name="Carlos", last_name="Ramírez",
        email="c@clinica.pe", specialty="Endodoncista",
        working_hours=[WorkingHours(day_of_week="Lunes", start_time="08:30", end_time="17:30")],
    )

    await dentist_service.create_dentist(api_client, draft)

    body = _last_body(backend)
    assert body["licenseNumber"] == "LIC12345"
    assert body["workingHours"] == [
        {"dayOfWeek": "Lunes", "startTime": "08:30", "endTime": "17:30"}
    ]
    assert body["active"] is True


async def test_dentist_lookups(api_client, backend):
    backend.seed("dentists", licenseNumber="LIC12345", specialty="Ortodoncista")
    backend.seed("dentists", licenseNumber="LIC99999", specialty="Periodoncista")

    by_license = await dentist_service.get_dentist_by_license_number(api_client, "LIC12345")
    orthodontists = await dentist_service.list_dentists_by_specialty(api_client, "Ortodoncista")

    assert by_license.specialty == "Ortodoncista"
    assert [d.license_number for d in orthodontists] == ["LIC12345"]


# ── Citas ────────────────────────────────────────────


async def test_cancel_uses_dedicated_endpoint(api_client, backend):
    seeded = backend.seed("appointments", patientId="pat-1", dentistId="den-1")

    await appointment_service.cancel_appointment(api_client, seeded["id"])

    request = backend.requests[-1]
    assert request.method == "POST"
    assert request.url.path == f"/api/appointments/{seeded['id']}/cancel"
    appointment = await appointment_service.get_appointment(api_client, seeded["id"])
    assert appointment.status is AppointmentStatus.CANCELLED


async def test_appointments_by_dentist_and_date(api_client, backend):
    backend.seed("appointments", dentistId="den-1", dateTime="2026-03-10T09:00:00")
    backend.seed("appointments", dentistId="den-1", dateTime="2026-03-11T09:00:00")
    backend.seed("appointments", dentistId="den-2", dateTime="2026-03-10T10:00:00")

    found = await appointment_service.list_appointments_by_dentist_and_date(
        api_client, "den-1", date(2026, 3, 10)
    )

    assert backend.requests[-1].url.params["date"] == "2026-03-10"
    assert len(found) == 1
    assert found[0].date_time == datetime(2026, 3, 10, 9, 0)


async def test_appointments_by_patient_and_dentist(api_client, backend):
    backend.seed("appointments", patientId="pat-1", dentistId="den-1")
    backend.seed("appointments", patientId="pat-2", dentistId="den-1")

    assert len(await appointment_service.list_appointments_by_patient(api_client, "pat-1")) == 1
    assert len(await appointment_service.list_appointments_by_dentist(api_client, "den-1")) == 2


async def test_create_appointment_serializes_status_and_datetime(api_client, backend):
    draft = AppointmentDraft(patient_id="pat-1", dentist_id="den-1",
                             date_time=datetime(2026, 3, 10, 9, 30))

    created = await appointment_service.create_appointment(api_client, draft)

    body = _last_body(backend)
    assert body["status"] == "SCHEDULED"
    assert body["dateTime"] == "2026-03-10T09:30:00"
    assert created.status is AppointmentStatus.SCHEDULED


# ── Expedientes ──────────────────────────────────────


async def test_dental_record_update_omits_server_timestamps(api_client, backend):
    seeded = backend.seed(
        "dental-records", patientId="pat-1",
        createdAt="2026-01-01T10:00:00", updatedAt="2026-01-02T10:00:00",
        visits=[{"id": "v1", "date": "2026-01-01", "diagnosis": "Caries", "tooth": "14"}],
    )
    record = await dental_record_service.get_dental_record_by_patient(api_client, "pat-1")
    assert record.id == seeded["id"]
    assert record.created_at is not None

    await dental_record_service.update_dental_record(api_client, record)

    body = _last_body(backend)
    assert "createdAt" not in body
    assert "updatedAt" not in body
    # los campos extra de un sub-registro viajan intactos
    assert body["visits"][0]["tooth"] == "14"


async def test_dental_record_sets_are_deduplicated(api_client, backend):
    draft = DentalRecordDraft(
        patient_id="pat-1",
        visits=[DentalVisit(id="v1", date="2026-01-01")],
        allergies=["Penicilina", "Látex", "Penicilina"],
    )

    await dental_record_service.create_dental_record(api_client, draft)

    assert _last_body(backend)["allergies"] == ["Penicilina", "Látex"]


# ── Tratamientos ─────────────────────────────────────


async def test_treatment_crud(api_client, backend):
    created = await treatment_service.create_treatment(
        api_client, TreatmentDraft(name="Limpieza", category="Preventivo", price=80.0, duration=30)
    )
    assert _last_body(backend)["price"] == 80.0

    fetched = await treatment_service.get_treatment(api_client, created.id)
    assert fetched.name == "Limpieza"

    await treatment_service.delete_treatment(api_client, created.id)
    assert await treatment_service.list_treatments(api_client) == []


# ── Errores ──────────────────────────────────────────


async def test_missing_record_raises_not_found(api_client):
    with pytest.raises(RemoteNotFoundError) as exc_info:
        await patient_service.get_patient(api_client, "nope")
    assert exc_info.value.status_code == 404


async def test_server_error_raises_api_error(api_client, backend):
    backend.fail("GET", "dentists")
    with pytest.raises(RemoteApiError) as exc_info:
        await dentist_service.list_dentists(api_client)
    assert exc_info.value.status_code == 500


async def test_network_failure_raises_connection_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with ApiClient(base_url="http://remote.test/api", transport=httpx.MockTransport(refuse)) as client:
        with pytest.raises(RemoteConnectionError):
            await patient_service.list_patients(client)


async def test_timeout_raises_connection_error():
    calls = 0

    def slow(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise httpx.ReadTimeout("timed out", request=request)

    async with ApiClient(base_url="http://remote.test/api", transport=httpx.MockTransport(slow)) as client:
        with pytest.raises(RemoteConnectionError):
            await patient_service.list_patients(client)
    # un solo intento, sin reintentos
    assert calls == 1


def test_path_param_escapes_separators():
    assert path_param("a/b c") == "a%2Fb%20c"


async def test_mutation_acknowledged_without_body_returns_none(api_client, backend):
    seeded = backend.seed("patients", dni="87654321", firstName="Luis", lastName="Rojas")
    backend.acknowledge_without_body("PUT", "patients")
    backend.acknowledge_without_body("POST", "dentists")
    patient = await patient_service.get_patient(api_client, seeded["id"])

    assert await patient_service.update_patient(
        api_client, patient.model_copy(update={"first_name": "Beatriz"})
    ) is None
    assert backend.collections["patients"][seeded["id"]]["firstName"] == "Beatriz"

    assert await dentist_service.create_dentist(api_client, DentistDraft(license_number="LIC12345")) is None
    assert len(backend.collections["dentists"]) == 1
