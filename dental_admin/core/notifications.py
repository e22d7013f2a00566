"""
Notificaciones tipo toast (snackbar) para el usuario.

Son efectos laterales "fire-and-forget": la página los emite y la capa de
renderizado los muestra una sola vez.
"""

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class ToastSeverity(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Toast:
    message: str
    severity: ToastSeverity


class ToastNotifier:
    """Cola de toasts pendientes de mostrar."""

    def __init__(self) -> None:
        self._pending: list[Toast] = []

    def success(self, message: str) -> None:
        self._push(Toast(message, ToastSeverity.SUCCESS))

    def error(self, message: str) -> None:
        self._push(Toast(message, ToastSeverity.ERROR))

    def _push(self, toast: Toast) -> None:
        logger.info(f"Toast [{toast.severity.value}]: {toast.message}")
        self._pending.append(toast)

    @property
    def pending(self) -> list[Toast]:
        return list(self._pending)

    def drain(self) -> list[Toast]:
        """Devuelve y descarta los toasts pendientes."""
        toasts, self._pending = self._pending, []
        return toasts
