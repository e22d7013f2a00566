"""
Excepciones del front de administración.

Dos familias:
- HTTP (FastAPI) para la API de vistas que consume el navegador.
- Remotas, lanzadas por el cliente de la API del sistema de registro.
"""

from fastapi import HTTPException, status


# ── HTTP ─────────────────────────────────────────────

class NotFoundException(HTTPException):
    """Recurso no encontrado (404)."""

    def __init__(self, resource: str = "Recurso", detail: str | None = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail or f"{resource} no encontrado",
        )


class ConflictException(HTTPException):
    """Conflicto de estado (409), ej: ya hay un formulario abierto."""

    def __init__(self, detail: str = "La acción no es válida en el estado actual"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


class ValidationException(HTTPException):
    """Error de validación (422)."""

    def __init__(self, detail: str = "Error de validación"):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
        )


# ── Página ───────────────────────────────────────────

class PageStateError(Exception):
    """Transición no permitida en la máquina de estados de una página."""


# ── API remota ───────────────────────────────────────

class RemoteError(Exception):
    """Cualquier falla de una llamada a la API remota."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RemoteConnectionError(RemoteError):
    """Timeout o error de red al contactar la API remota."""


class RemoteApiError(RemoteError):
    """La API remota respondió con un status no exitoso."""

    def __init__(self, status_code: int, detail: str = ""):
        super().__init__(f"API remota respondió {status_code}: {detail}".rstrip(": "))
        self.status_code = status_code
        self.detail = detail


class RemoteNotFoundError(RemoteApiError):
    """La API remota respondió 404."""

    def __init__(self, detail: str = ""):
        super().__init__(404, detail)
