"""
Cliente HTTP de la API remota del sistema de registro.

Un único `httpx.AsyncClient` compartido. Un intento por llamada: sin
reintentos ni backoff, el timeout lo define la configuración.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from dental_admin.config import get_settings
from dental_admin.core.exceptions import (
    RemoteApiError,
    RemoteConnectionError,
    RemoteNotFoundError,
)

logger = logging.getLogger(__name__)


def path_param(value: str) -> str:
    """Escapa un valor para usarlo como segmento de ruta."""
    return quote(str(value), safe="")


class ApiClient:
    """Wrapper JSON sobre httpx para la API remota."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = base_url or settings.API_BASE_URL
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── Verbos ───────────────────────────────────────

    async def get(self, path: str, params: dict | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: dict | None = None) -> Any:
        return await self._request("POST", path, body=body)

    async def put(self, path: str, body: dict) -> Any:
        return await self._request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    # ── Núcleo ───────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        body: dict | None = None,
        params: dict | None = None,
    ) -> Any:
        """
        Ejecuta una petición y retorna el JSON de la respuesta
        (None si la respuesta no tiene cuerpo).
        """
        logger.debug(f"{method} {self.base_url}{path}")

        try:
            response = await self._client.request(
                method, path, json=body, params=params
            )
        except httpx.TimeoutException:
            raise RemoteConnectionError(f"Timeout en {method} {path}")
        except httpx.RequestError as exc:
            raise RemoteConnectionError(
                f"Error de conexión en {method} {path}: {str(exc)}"
            )

        if response.status_code == 404:
            raise RemoteNotFoundError(response.text)

        if response.is_error:
            raise RemoteApiError(response.status_code, response.text)

        if not response.content:
            return None
        return response.json()
