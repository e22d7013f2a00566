"""
Página de odontólogos, con edición de horarios de trabajo en el formulario.
"""

from typing import Any

from dental_admin.forms.dentist_form import DentistForm
from dental_admin.pages.base import EntityPage, PageMessages
from dental_admin.schemas.dentist import DAYS_OF_WEEK, SPECIALTIES, Dentist, DentistDraft
from dental_admin.schemas.page import PageState
from dental_admin.services import dentist_service


class DentistsPage(EntityPage[Dentist, DentistDraft]):
    collection = dentist_service.COLLECTION
    entity_model = Dentist
    form_class = DentistForm
    messages = PageMessages(
        title="Odontólogos",
        new_title="Nuevo Odontólogo",
        edit_title="Editar Odontólogo",
        created="Odontólogo creado exitosamente",
        updated="Odontólogo actualizado exitosamente",
        deleted="Odontólogo eliminado exitosamente",
        create_error="Error al crear el odontólogo",
        update_error="Error al actualizar el odontólogo",
        delete_error="Error al eliminar el odontólogo",
        load_error="Error al cargar los odontólogos",
        delete_prompt=(
            "¿Está seguro que desea eliminar este odontólogo? "
            "Esta acción no se puede deshacer."
        ),
    )

    form: DentistForm

    async def fetch_all(self) -> list[Dentist]:
        return await dentist_service.list_dentists(self.client)

    async def remote_create(self, draft: DentistDraft) -> Dentist | None:
        return await dentist_service.create_dentist(self.client, draft)

    async def remote_update(self, entity: Dentist) -> Dentist | None:
        return await dentist_service.update_dentist(self.client, entity)

    async def remote_delete(self, entity_id: str) -> None:
        await dentist_service.delete_dentist(self.client, entity_id)

    # ── Horarios ─────────────────────────────────────

    def add_working_hours(self) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.add_working_hours()

    def update_working_hours(self, index: int, field: str, value: str) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.update_working_hours(index, field, value)

    def remove_working_hours(self, index: int) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.remove_working_hours(index)

    # ── Vista ────────────────────────────────────────

    def row_view(self, record: Dentist, context: dict[str, Any]) -> dict[str, Any]:
        row = super().row_view(record, context)
        row["statusLabel"] = "Activo" if record.active else "Inactivo"
        return row

    async def form_options(self) -> dict[str, Any]:
        return {
            "specialties": list(SPECIALTIES),
            "daysOfWeek": list(DAYS_OF_WEEK),
        }
