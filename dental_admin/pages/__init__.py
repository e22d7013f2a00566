"""
Páginas de entidad — registro por nombre de ruta.
"""

from dental_admin.core.notifications import ToastNotifier
from dental_admin.pages.appointments import AppointmentsPage
from dental_admin.pages.base import EntityPage
from dental_admin.pages.dental_records import DentalRecordsPage
from dental_admin.pages.dentists import DentistsPage
from dental_admin.pages.patients import PatientsPage
from dental_admin.services.api_client import ApiClient
from dental_admin.services.entity_store import EntityStore

PAGE_CLASSES: dict[str, type[EntityPage]] = {
    "patients": PatientsPage,
    "dentists": DentistsPage,
    "appointments": AppointmentsPage,
    "dental-records": DentalRecordsPage,
}


def build_pages(
    client: ApiClient,
    store: EntityStore,
    notifier: ToastNotifier | None = None,
) -> dict[str, EntityPage]:
    """Crea una instancia de cada página compartiendo cliente, store y toasts."""
    notifier = notifier or ToastNotifier()
    return {
        name: page_class(client, store, notifier)
        for name, page_class in PAGE_CLASSES.items()
    }
