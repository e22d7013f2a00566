"""
Página genérica de entidad: compone Store + Formulario + confirmación de
borrado y expone la máquina de estados de la pantalla.

Estados:
    IDLE ──open_create/open_edit──▶ FORM_OPEN ──close_form / submit OK──▶ IDLE
    IDLE ──request_delete──▶ CONFIRMING_DELETE ──cancel_delete / confirm OK──▶ IDLE

Solo un formulario o confirmación abiertos a la vez. Los toasts son efectos
laterales, no estados.
"""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from dental_admin.core.exceptions import PageStateError, RemoteError
from dental_admin.core.notifications import ToastNotifier
from dental_admin.forms.base import EntityForm
from dental_admin.schemas.page import FormMode, FormView, PageState, PageView, ToastView
from dental_admin.services.api_client import ApiClient
from dental_admin.services.entity_store import EntityStore

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)
DraftT = TypeVar("DraftT", bound=BaseModel)


@dataclass(frozen=True)
class PageMessages:
    """Textos visibles de una página."""
    title: str
    new_title: str
    edit_title: str
    created: str
    updated: str
    deleted: str
    create_error: str
    update_error: str
    delete_error: str
    load_error: str
    delete_prompt: str


class EntityPage(Generic[EntityT, DraftT]):
    collection: str
    entity_model: type[EntityT]
    form_class: type[EntityForm]
    messages: PageMessages

    def __init__(
        self,
        client: ApiClient,
        store: EntityStore,
        notifier: ToastNotifier | None = None,
    ):
        self.client = client
        self.store = store
        self.notifier = notifier or ToastNotifier()
        self.form: EntityForm = self.form_class()
        self.state = PageState.IDLE
        self.delete_target: EntityT | None = None
        self.mounted = True

    # ── Operaciones remotas (por entidad) ────────────

    async def fetch_all(self) -> list[EntityT]:
        raise NotImplementedError

    async def remote_create(self, draft: DraftT) -> EntityT | None:
        raise NotImplementedError

    async def remote_update(self, entity: EntityT) -> EntityT | None:
        raise NotImplementedError

    async def remote_delete(self, entity_id: str) -> None:
        raise NotImplementedError

    async def _acknowledged(self, call: Awaitable[EntityT | None]) -> EntityT | None:
        """
        Un 2xx ya aplicó el cambio en el servidor: si el cuerpo de la
        respuesta no se puede leer, la mutación igual cuenta como exitosa.
        """
        try:
            return await call
        except ValidationError as exc:
            logger.warning(f"Respuesta ilegible de {self.collection}: {exc}")
            return None

    # ── Lecturas ─────────────────────────────────────

    async def rows(self) -> list[EntityT]:
        return await self.store.read(self.collection, self.fetch_all)

    async def visible_rows(self) -> list[EntityT]:
        return await self.rows()

    async def get_row(self, record_id: str) -> EntityT | None:
        for row in await self.rows():
            if row.id == record_id:
                return row
        return None

    # ── Máquina de estados ───────────────────────────

    def _require(self, *states: PageState) -> None:
        if self.state not in states:
            raise PageStateError(
                f"Acción no permitida en estado '{self.state.value}' de {self.collection}"
            )

    @property
    def form_mode(self) -> FormMode | None:
        if self.state is not PageState.FORM_OPEN:
            return None
        return FormMode.EDIT if self.form.is_edit else FormMode.CREATE

    def can_edit(self, record: EntityT) -> bool:
        return True

    def open_create(self) -> None:
        self._require(PageState.IDLE)
        self.form.open()
        self.state = PageState.FORM_OPEN

    def open_edit(self, record: EntityT) -> None:
        self._require(PageState.IDLE)
        if not self.can_edit(record):
            raise PageStateError(f"El registro {record.id} no se puede editar")
        self.form.open(record)
        self.state = PageState.FORM_OPEN

    def close_form(self) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.close()
        self.state = PageState.IDLE

    def edit_field(self, name: str, value: Any) -> None:
        self._require(PageState.FORM_OPEN)
        self.form.set_field(name, value)

    async def submit(self) -> bool:
        """
        Envía el formulario abierto. Crea o actualiza según haya registro
        de origen. Si el borrador es inválido no hay llamada de red ni toast.
        Ante un error remoto el formulario sigue abierto con el borrador.
        """
        self._require(PageState.FORM_OPEN)
        draft = self.form.submit()
        if draft is None:
            return False

        target = self.form.record
        if target is None:
            op = lambda: self._acknowledged(self.remote_create(draft))
            success, failure = self.messages.created, self.messages.create_error
        else:
            entity = self.entity_model.model_validate(
                {**target.model_dump(), **draft.model_dump(), "id": target.id}
            )
            op = lambda: self._acknowledged(self.remote_update(entity))
            success, failure = self.messages.updated, self.messages.update_error

        try:
            await self.store.mutate(self.collection, op)
        except RemoteError as exc:
            logger.warning(f"{failure}: {exc}")
            if self.mounted:
                self.notifier.error(failure)
            return False

        if not self.mounted:
            logger.debug(f"Respuesta de {self.collection} descartada: página desmontada")
            return True

        self.form.close()
        self.state = PageState.IDLE
        self.notifier.success(success)
        return True

    def request_delete(self, record: EntityT) -> None:
        self._require(PageState.IDLE)
        self.delete_target = record
        self.state = PageState.CONFIRMING_DELETE

    def cancel_delete(self) -> None:
        self._require(PageState.CONFIRMING_DELETE)
        self.delete_target = None
        self.state = PageState.IDLE

    async def confirm_delete(self) -> bool:
        """Borra el registro en confirmación; ante error el diálogo sigue abierto."""
        self._require(PageState.CONFIRMING_DELETE)
        target_id = self.delete_target.id

        try:
            await self.store.mutate(
                self.collection, lambda: self.remote_delete(target_id)
            )
        except RemoteError as exc:
            logger.warning(f"{self.messages.delete_error}: {exc}")
            if self.mounted:
                self.notifier.error(self.messages.delete_error)
            return False

        if not self.mounted:
            return True

        self.delete_target = None
        self.state = PageState.IDLE
        self.notifier.success(self.messages.deleted)
        return True

    def mount(self) -> None:
        self.mounted = True

    def unmount(self) -> None:
        """Las respuestas que lleguen después se descartan."""
        self.mounted = False
        self.form.close()
        self.delete_target = None
        self.state = PageState.IDLE

    # ── Vista ────────────────────────────────────────

    async def row_context(self) -> dict[str, Any]:
        return {}

    def row_view(self, record: EntityT, context: dict[str, Any]) -> dict[str, Any]:
        return {
            **record.to_wire(),
            "actions": {"edit": self.can_edit(record), "delete": True},
        }

    async def form_options(self) -> dict[str, Any]:
        return {}

    async def view(self) -> PageView:
        view = PageView(title=self.messages.title, state=self.state)

        try:
            context = await self.row_context()
            rows = await self.visible_rows()
        except RemoteError as exc:
            logger.warning(f"{self.messages.load_error}: {exc}")
            view.load_error = self.messages.load_error
        else:
            view.rows = [self.row_view(row, context) for row in rows]

        if self.state is PageState.FORM_OPEN:
            edit = self.form.is_edit
            view.form = FormView(
                mode=self.form_mode,
                title=self.messages.edit_title if edit else self.messages.new_title,
                submit_label="Actualizar" if edit else "Crear",
                draft=self.form.draft.to_wire(),
                errors={to_camel(k): v for k, v in self.form.errors.items()},
                options=await self.form_options(),
            )
        elif self.state is PageState.CONFIRMING_DELETE:
            view.delete_target_id = self.delete_target.id
            view.delete_prompt = self.messages.delete_prompt

        view.toasts = [
            ToastView(message=t.message, severity=t.severity.value)
            for t in self.notifier.drain()
        ]
        return view
