"""
Página de expedientes dentales, con búsqueda local y edición de visitas.
"""

from typing import Any

from dental_admin.forms.dental_record_form import DentalRecordForm
from dental_admin.pages.base import EntityPage, PageMessages
from dental_admin.schemas.dental_record import DentalRecord, DentalRecordDraft
from dental_admin.schemas.page import PageState
from dental_admin.services import dental_record_service

NOT_AVAILABLE = "N/A"


def matches_search(record: DentalRecord, term: str) -> bool:
    """Coincidencia por paciente, diagnóstico/tratamiento de visitas o procedimiento."""
    needle = term.lower()
    if needle in record.patient_id.lower():
        return True
    if any(
        needle in visit.diagnosis.lower() or needle in visit.treatment.lower()
        for visit in record.visits
    ):
        return True
    return any(needle in procedure.name.lower() for procedure in record.procedures)


class DentalRecordsPage(EntityPage[DentalRecord, DentalRecordDraft]):
    collection = dental_record_service.COLLECTION
    entity_model = DentalRecord
    form_class = DentalRecordForm
    messages = PageMessages(
        title="Expedientes Dentales",
        new_title="Nuevo Expediente",
        edit_title="Editar Expediente",
        created="Expediente creado exitosamente",
        updated="Expediente actualizado exitosamente",
        deleted="Expediente eliminado exitosamente",
        create_error="Error al crear el expediente",
        update_error="Error al actualizar el expediente",
        delete_error="Error al eliminar el expediente",
        load_error="Error al cargar los expedientes",
        delete_prompt=(
            "¿Está seguro que desea eliminar este expediente? "
            "Esta acción no se puede deshacer."
        ),
    )

    form: DentalRecordForm

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.search_term = ""

    async def fetch_all(self) -> list[DentalRecord]:
        return await dental_record_service.list_dental_records(self.client)

    async def remote_create(self, draft: DentalRecordDraft) -> DentalRecord | None:
        return await dental_record_service.create_dental_record(self.client, draft)

    async def remote_update(self, entity: DentalRecord) -> DentalRecord | None:
        return await dental_record_service.update_dental_record(self.client, entity)

    async def remote_delete(self, entity_id: str) -> None:
        await dental_record_service.delete_dental_record(self.client, entity_id)

    # ── Búsqueda ─────────────────────────────────────

    def search(self, term: str) -> None:
        self.search_term = term.strip()

    async def visible_rows(self) -> list[DentalRecord]:
        rows = await self.rows()
        if not self.search_term:
            return rows
        return [r for r in rows if matches_search(r, self.search_term)]

    # ── Visitas ──────────────────────────────────────

    def add_visit(self) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.add_visit()

    def update_visit(self, index: int, field: str, value: Any) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.update_visit(index, field, value)

    def remove_visit(self, index: int) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.remove_visit(index)

    # ── Vista ────────────────────────────────────────

    def row_view(self, record: DentalRecord, context: dict[str, Any]) -> dict[str, Any]:
        row = super().row_view(record, context)
        last = record.last_visit
        row["lastVisitDate"] = (last and last.date) or NOT_AVAILABLE
        row["lastDiagnosis"] = (last and last.diagnosis) or NOT_AVAILABLE
        row["lastTreatment"] = (last and last.treatment) or NOT_AVAILABLE
        row["statusLabel"] = "Activo" if record.active else "Inactivo"
        return row
