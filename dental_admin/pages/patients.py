"""
Página de pacientes.
"""

from dental_admin.forms.patient_form import PatientForm
from dental_admin.pages.base import EntityPage, PageMessages
from dental_admin.schemas.patient import Patient, PatientDraft
from dental_admin.services import patient_service


class PatientsPage(EntityPage[Patient, PatientDraft]):
    collection = patient_service.COLLECTION
    entity_model = Patient
    form_class = PatientForm
    messages = PageMessages(
        title="Pacientes",
        new_title="Nuevo Paciente",
        edit_title="Editar Paciente",
        created="Paciente creado exitosamente",
        updated="Paciente actualizado exitosamente",
        deleted="Paciente eliminado exitosamente",
        create_error="Error al crear el paciente",
        update_error="Error al actualizar el paciente",
        delete_error="Error al eliminar el paciente",
        load_error="Error al cargar los pacientes",
        delete_prompt=(
            "¿Está seguro que desea eliminar este paciente? "
            "Esta acción no se puede deshacer."
        ),
    )

    async def fetch_all(self) -> list[Patient]:
        return await patient_service.list_patients(self.client)

    async def remote_create(self, draft: PatientDraft) -> Patient | None:
        return await patient_service.create_patient(self.client, draft)

    async def remote_update(self, entity: Patient) -> Patient | None:
        return await patient_service.update_patient(self.client, entity)

    async def remote_delete(self, entity_id: str) -> None:
        await patient_service.delete_patient(self.client, entity_id)
