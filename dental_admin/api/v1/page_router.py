"""
Endpoints comunes de una página de entidad.

Cada endpoint ejecuta una acción de la máquina de estados de la página y
devuelve la vista resultante para que el navegador la renderice.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from dental_admin.core.exceptions import NotFoundException, ValidationException
from dental_admin.pages.base import EntityPage
from dental_admin.schemas.page import PageView


@contextmanager
def form_edit_errors() -> Iterator[None]:
    """Traduce errores de edición del borrador a 422."""
    try:
        yield
    except (KeyError, IndexError, ValidationError) as exc:
        raise ValidationException(str(exc))


async def get_row_or_404(page: EntityPage, record_id: str, resource: str):
    record = await page.get_row(record_id)
    if record is None:
        raise NotFoundException(resource)
    return record


def build_page_router(get_page: Callable[..., EntityPage], resource: str) -> APIRouter:
    """
    Router con listado, formulario (crear/editar/enviar/cerrar) y
    confirmación de borrado para la página que provee `get_page`.
    """
    router = APIRouter()

    @router.get("", response_model=PageView)
    async def get_page_view(page: EntityPage = Depends(get_page)):
        """Vista actual: filas, formulario o confirmación abiertos y toasts."""
        return await page.view()

    # ── Formulario ───────────────────────────────────

    @router.post("/form", response_model=PageView)
    async def open_create_form(page: EntityPage = Depends(get_page)):
        """Abre el formulario vacío (modo creación)."""
        page.open_create()
        return await page.view()

    @router.post("/{record_id}/form", response_model=PageView)
    async def open_edit_form(record_id: str, page: EntityPage = Depends(get_page)):
        """Abre el formulario con los datos de una fila (modo edición)."""
        record = await get_row_or_404(page, record_id, resource)
        page.open_edit(record)
        return await page.view()

    @router.patch("/form", response_model=PageView)
    async def edit_form_fields(
        fields: dict[str, Any] = Body(..., description="Campos a modificar"),
        page: EntityPage = Depends(get_page),
    ):
        """Modifica campos del borrador; limpia el error de cada campo tocado."""
        with form_edit_errors():
            for name, value in fields.items():
                page.edit_field(name, value)
        return await page.view()

    @router.post("/form/submit", response_model=PageView)
    async def submit_form(page: EntityPage = Depends(get_page)):
        """
        Valida y envía el formulario.
        Con errores locales la vista trae `form.errors` y no hay llamada remota.
        """
        await page.submit()
        return await page.view()

    @router.delete("/form", response_model=PageView)
    async def close_form(page: EntityPage = Depends(get_page)):
        page.close_form()
        return await page.view()

    # ── Borrado con confirmación ─────────────────────

    @router.post("/{record_id}/delete", response_model=PageView)
    async def request_delete(record_id: str, page: EntityPage = Depends(get_page)):
        """Pide confirmación para borrar una fila."""
        record = await get_row_or_404(page, record_id, resource)
        page.request_delete(record)
        return await page.view()

    @router.post("/delete/confirm", response_model=PageView)
    async def confirm_delete(page: EntityPage = Depends(get_page)):
        await page.confirm_delete()
        return await page.view()

    @router.delete("/delete", response_model=PageView)
    async def cancel_delete(page: EntityPage = Depends(get_page)):
        page.cancel_delete()
        return await page.view()

    # ── Navegación ───────────────────────────────────

    @router.post("/mount", response_model=PageView)
    async def mount_page(page: EntityPage = Depends(get_page)):
        """El usuario entra a la página: vuelve a aplicar respuestas remotas."""
        page.mount()
        return await page.view()

    @router.post("/unmount", response_model=PageView)
    async def unmount_page(page: EntityPage = Depends(get_page)):
        """
        El usuario sale de la página: se cierra lo abierto y las respuestas
        que lleguen después no cambian el estado ni emiten toasts.
        """
        page.unmount()
        return await page.view()

    return router
