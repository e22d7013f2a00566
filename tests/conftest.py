"""
Fixtures compartidas para Pytest.
Simula la API remota con httpx.MockTransport y expone la API de vistas
con un cliente HTTP de test.
"""

import json
from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dental_admin.core.notifications import ToastNotifier
from dental_admin.main import app
from dental_admin.pages import build_pages
from dental_admin.services.api_client import ApiClient
from dental_admin.services.entity_store import EntityStore

REMOTE_BASE_URL = "http://remote.test/api"

_ID_PREFIXES = {
    "patients": "pat",
    "dentists": "den",
    "appointments": "apt",
    "dental-records": "rec",
    "treatments": "trt",
}


class FakeClinicBackend:
    """API remota en memoria con el mismo contrato de rutas que la real."""

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict]] = {name: {} for name in _ID_PREFIXES}
        self.requests: list[httpx.Request] = []
        # (método, colección) que deben responder 500
        self.failures: set[tuple[str, str]] = set()
        # (método, colección) que aplican el cambio pero responden 204 sin cuerpo
        self.empty_bodies: set[tuple[str, str]] = set()
        self._seq = 0

    # ── Helpers de test ──────────────────────────────

    def seed(self, collection: str, **fields) -> dict:
        self._seq += 1
        item = {"id": f"{_ID_PREFIXES[collection]}-{self._seq}", **fields}
        if collection == "patients":
            item.setdefault("recordNumber", f"EXP-{self._seq:04d}")
        if collection == "appointments":
            item.setdefault("status", "SCHEDULED")
        self.collections[collection][item["id"]] = item
        return item

    def fail(self, method: str, collection: str) -> None:
        self.failures.add((method, collection))

    def acknowledge_without_body(self, method: str, collection: str) -> None:
        self.empty_bodies.add((method, collection))

    def count(self, method: str, path: str | None = None) -> int:
        return sum(
            1 for r in self.requests
            if r.method == method and (path is None or r.url.path == f"/api{path}")
        )

    # ── Transporte ───────────────────────────────────

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.removeprefix("/api/").strip("/").split("/")
        collection, rest = parts[0], parts[1:]
        method = request.method

        if collection not in self.collections:
            return httpx.Response(404)
        if (method, collection) in self.failures:
            return httpx.Response(500, json={"detail": "boom"})

        response = self._dispatch(collection, rest, request)
        if (method, collection) in self.empty_bodies and response.is_success:
            return httpx.Response(204)
        return response

    def _dispatch(self, collection: str, rest: list[str], request: httpx.Request) -> httpx.Response:
        method = request.method
        items = self.collections[collection]

        if method == "GET" and not rest:
            return httpx.Response(200, json=list(items.values()))
        if method == "GET" and len(rest) == 1:
            item = items.get(rest[0])
            return httpx.Response(200, json=item) if item else httpx.Response(404)
        if method == "GET":
            return self._lookup(collection, rest, request)

        if method == "POST" and not rest:
            return httpx.Response(201, json=self.seed(collection, **_json(request)))
        if method == "POST" and len(rest) == 2 and rest[1] == "cancel":
            item = items.get(rest[0])
            if item is None:
                return httpx.Response(404)
            item["status"] = "CANCELLED"
            return httpx.Response(200, json=item)
        if method == "PUT" and len(rest) == 1:
            if rest[0] not in items:
                return httpx.Response(404)
            items[rest[0]] = {**_json(request), "id": rest[0]}
            return httpx.Response(200, json=items[rest[0]])
        if method == "DELETE" and len(rest) == 1:
            if items.pop(rest[0], None) is None:
                return httpx.Response(404)
            return httpx.Response(204)

        return httpx.Response(405)

    def _lookup(self, collection: str, rest: list[str], request: httpx.Request) -> httpx.Response:
        items = list(self.collections[collection].values())
        fields = {
            ("patients", "dni"): ("dni", False),
            ("patients", "record"): ("recordNumber", False),
            ("dentists", "license"): ("licenseNumber", False),
            ("dentists", "specialty"): ("specialty", True),
            ("appointments", "patient"): ("patientId", True),
            ("appointments", "dentist"): ("dentistId", True),
            ("dental-records", "patient"): ("patientId", False),
        }
        key = (collection, rest[0])
        if key not in fields:
            return httpx.Response(404)
        field, many = fields[key]
        found = [i for i in items if i.get(field) == rest[1]]

        if collection == "appointments" and len(rest) == 3 and rest[2] == "date":
            day = request.url.params["date"]
            found = [i for i in found if str(i.get("dateTime", "")).startswith(day)]

        if many:
            return httpx.Response(200, json=found)
        return httpx.Response(200, json=found[0]) if found else httpx.Response(404)


def _json(request: httpx.Request) -> dict:
    return json.loads(request.content or b"{}")


# ── Fixtures ─────────────────────────────────────────


@pytest.fixture
def backend() -> FakeClinicBackend:
    return FakeClinicBackend()


@pytest_asyncio.fixture
async def api_client(backend: FakeClinicBackend) -> AsyncGenerator[ApiClient, None]:
    """Cliente de la API remota conectado al backend en memoria."""
    client = ApiClient(
        base_url=REMOTE_BASE_URL,
        transport=httpx.MockTransport(backend.handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def notifier() -> ToastNotifier:
    return ToastNotifier()


@pytest.fixture
def pages(api_client: ApiClient, store: EntityStore, notifier: ToastNotifier) -> dict:
    return build_pages(api_client, store, notifier)


@pytest_asyncio.fixture
async def client(pages: dict, api_client: ApiClient, store: EntityStore) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP de test para la API de vistas."""
    app.state.api_client = api_client
    app.state.store = store
    app.state.pages = pages

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
