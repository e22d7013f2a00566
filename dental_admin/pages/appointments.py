"""
Página de citas.

Además del CRUD, permite cancelar una cita SCHEDULED sin confirmación
(transición del lado del servidor). Una cita CANCELLED no se puede editar;
el borrado siempre está disponible.
"""

import logging
from typing import Any

from dental_admin.core.exceptions import PageStateError, RemoteError
from dental_admin.forms.appointment_form import AppointmentForm
from dental_admin.pages.base import EntityPage, PageMessages
from dental_admin.schemas.appointment import Appointment, AppointmentDraft, AppointmentStatus
from dental_admin.schemas.page import PageState
from dental_admin.services import appointment_service, dentist_service, patient_service

logger = logging.getLogger(__name__)

DATE_TIME_FORMAT = "%d/%m/%Y %H:%M"


class AppointmentsPage(EntityPage[Appointment, AppointmentDraft]):
    collection = appointment_service.COLLECTION
    entity_model = Appointment
    form_class = AppointmentForm
    messages = PageMessages(
        title="Citas",
        new_title="Nueva Cita",
        edit_title="Editar Cita",
        created="Cita creada exitosamente",
        updated="Cita actualizada exitosamente",
        deleted="Cita eliminada exitosamente",
        create_error="Error al crear la cita",
        update_error="Error al actualizar la cita",
        delete_error="Error al eliminar la cita",
        load_error="Error al cargar las citas",
        delete_prompt=(
            "¿Está seguro que desea eliminar esta cita? "
            "Esta acción no se puede deshacer."
        ),
    )
    cancelled_message = "Cita cancelada exitosamente"
    cancel_error = "Error al cancelar la cita"

    async def fetch_all(self) -> list[Appointment]:
        return await appointment_service.list_appointments(self.client)

    async def remote_create(self, draft: AppointmentDraft) -> Appointment | None:
        return await appointment_service.create_appointment(self.client, draft)

    async def remote_update(self, entity: Appointment) -> Appointment | None:
        return await appointment_service.update_appointment(self.client, entity)

    async def remote_delete(self, entity_id: str) -> None:
        await appointment_service.delete_appointment(self.client, entity_id)

    # ── Reglas de estado ─────────────────────────────

    def can_edit(self, record: Appointment) -> bool:
        return record.status is not AppointmentStatus.CANCELLED

    def can_cancel(self, record: Appointment) -> bool:
        return record.status is AppointmentStatus.SCHEDULED

    async def cancel_appointment(self, record: Appointment) -> bool:
        """
        Cancela una cita SCHEDULED. No hay paso de confirmación ni cambio de
        estado de la página: la fila se actualiza al recargar la colección.
        """
        self._require(PageState.IDLE)
        if not self.can_cancel(record):
            raise PageStateError(f"La cita {record.id} no está programada")

        try:
            await self.store.mutate(
                self.collection,
                lambda: appointment_service.cancel_appointment(self.client, record.id),
            )
        except RemoteError as exc:
            logger.warning(f"{self.cancel_error}: {exc}")
            if self.mounted:
                self.notifier.error(self.cancel_error)
            return False

        if self.mounted:
            self.notifier.success(self.cancelled_message)
        return True

    # ── Vista ────────────────────────────────────────

    async def _people(self) -> tuple[dict[str, str], dict[str, str]]:
        """Nombres de pacientes y odontólogos por id (vacío si fallan)."""
        try:
            patients = await self.store.read(
                patient_service.COLLECTION,
                lambda: patient_service.list_patients(self.client),
            )
            dentists = await self.store.read(
                dentist_service.COLLECTION,
                lambda: dentist_service.list_dentists(self.client),
            )
        except RemoteError as exc:
            logger.warning(f"No se pudieron cargar pacientes/odontólogos: {exc}")
            return {}, {}
        return (
            {p.id: p.full_name for p in patients},
            {d.id: d.full_name for d in dentists},
        )

    async def row_context(self) -> dict[str, Any]:
        patients, dentists = await self._people()
        return {"patients": patients, "dentists": dentists}

    def row_view(self, record: Appointment, context: dict[str, Any]) -> dict[str, Any]:
        row = super().row_view(record, context)
        row["statusLabel"] = record.status.label
        row["patientName"] = context.get("patients", {}).get(record.patient_id, "")
        row["dentistName"] = context.get("dentists", {}).get(record.dentist_id, "")
        row["dateTimeLabel"] = (
            record.date_time.strftime(DATE_TIME_FORMAT) if record.date_time else ""
        )
        row["actions"]["cancel"] = self.can_cancel(record)
        return row

    async def form_options(self) -> dict[str, Any]:
        patients, dentists = await self._people()
        return {
            "patients": [{"id": k, "name": v} for k, v in patients.items()],
            "dentists": [{"id": k, "name": v} for k, v in dentists.items()],
        }
