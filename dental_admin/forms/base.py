"""
Formulario genérico de entidad.

El formulario es dueño de un borrador efímero: se inicializa vacío (modo
creación) o desde un registro (modo edición), valida localmente con
expresiones regulares y entrega el borrador terminado al llamador. Nunca
habla con la red.
"""

import re
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

DraftT = TypeVar("DraftT", bound=BaseModel)

# ── Patrones compartidos ─────────────────────────────
NAME_PATTERN = re.compile(r"^[A-Za-zÁáÉéÍíÓóÚúÑñ\s]{2,50}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FIRST_NAME_ERROR = "El nombre solo debe contener letras y espacios"
LAST_NAME_ERROR = "El apellido solo debe contener letras y espacios"
EMAIL_ERROR = "Ingrese un email válido"


def check_person(draft: Any, errors: dict[str, str]) -> None:
    """Validaciones de nombre, apellido y email comunes a personas."""
    if not NAME_PATTERN.match(draft.first_name):
        errors["first_name"] = FIRST_NAME_ERROR
    if not NAME_PATTERN.match(draft.last_name):
        errors["last_name"] = LAST_NAME_ERROR
    if not EMAIL_PATTERN.match(draft.email):
        errors["email"] = EMAIL_ERROR


class EntityForm(Generic[DraftT]):
    """
    Base de los formularios de entidad.

    Subclases definen `draft_model`, `editable_fields` y `check()`.
    """

    draft_model: type[DraftT]
    editable_fields: frozenset[str] = frozenset()

    def __init__(self) -> None:
        self.record: BaseModel | None = None
        self.draft: DraftT = self.empty_draft()
        self.errors: dict[str, str] = {}
        self.is_open = False

    # ── Ciclo de vida ────────────────────────────────

    @property
    def is_edit(self) -> bool:
        return self.record is not None

    def open(self, record: BaseModel | None = None) -> None:
        """Abre en modo creación (sin registro) o edición; limpia errores."""
        self.record = record
        self.draft = self.empty_draft() if record is None else self.draft_from(record)
        self.errors = {}
        self.is_open = True

    def close(self) -> None:
        self.record = None
        self.draft = self.empty_draft()
        self.errors = {}
        self.is_open = False

    def empty_draft(self) -> DraftT:
        return self.draft_model()

    def draft_from(self, record: BaseModel) -> DraftT:
        return self.draft_model.model_validate(record.model_dump())

    # ── Edición ──────────────────────────────────────

    def field_name(self, name: str) -> str:
        """Acepta el nombre Python o el alias camelCase del campo."""
        if name in self.editable_fields:
            return name
        for field, info in self.draft_model.model_fields.items():
            if info.alias == name and field in self.editable_fields:
                return field
        raise KeyError(f"Campo no editable: {name}")

    def set_field(self, name: str, value: Any) -> None:
        """Actualiza un campo del borrador y limpia solo el error de ese campo."""
        field = self.field_name(name)
        self._replace(**{field: value})
        self.errors.pop(field, None)

    def _replace(self, **changes: Any) -> None:
        data = self.draft.model_dump()
        data.update(changes)
        self.draft = self.draft_model.model_validate(data)

    # ── Validación y envío ───────────────────────────

    def check(self, draft: DraftT) -> dict[str, str]:
        raise NotImplementedError

    def validate(self) -> bool:
        self.errors = self.check(self.draft)
        return not self.errors

    def submit(self) -> DraftT | None:
        """Borrador terminado si es válido; None si hay errores."""
        if not self.validate():
            return None
        return self.draft.model_copy(deep=True)
