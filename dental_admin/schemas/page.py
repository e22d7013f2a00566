"""
Schemas de la vista de página que consume la capa de renderizado.
"""

import enum
from typing import Any

from pydantic import BaseModel, Field


class PageState(str, enum.Enum):
    """Estados de una página de entidad."""
    IDLE = "idle"
    FORM_OPEN = "form_open"
    CONFIRMING_DELETE = "confirming_delete"


class FormMode(str, enum.Enum):
    CREATE = "create"
    EDIT = "edit"


class ToastView(BaseModel):
    message: str
    severity: str


class FormView(BaseModel):
    mode: FormMode
    title: str
    submit_label: str
    draft: dict[str, Any]
    errors: dict[str, str] = Field(default_factory=dict)
    options: dict[str, Any] = Field(default_factory=dict)


class PageView(BaseModel):
    """Snapshot completo de una página para renderizar."""
    title: str
    state: PageState
    load_error: str | None = None
    rows: list[dict[str, Any]] = Field(default_factory=list)
    form: FormView | None = None
    delete_target_id: str | None = None
    delete_prompt: str | None = None
    toasts: list[ToastView] = Field(default_factory=list)
