"""
Store sincronizado de entidades: cache de lecturas por clave de colección
con política "revalidar al mutar".

- `read()` sirve el último snapshot o lo trae de la API remota; lecturas
  concurrentes de la misma clave comparten un único fetch en vuelo.
- `mutate()` ejecuta la operación remota y, solo si tuvo éxito, invalida las
  colecciones listadas en `INVALIDATION_TABLE`. Sin escrituras optimistas:
  ante un error no se invalida ni se revierte nada.
- Un fetch iniciado antes de una invalidación nunca vuelve a poblar el cache.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryKey = tuple[str, ...]

# ── Tabla estática: colección mutada → colecciones a invalidar ──
# Mutar una cita (aunque cambie su odontólogo) no invalida `dentists`
# ni `patients`.
INVALIDATION_TABLE: dict[str, tuple[str, ...]] = {
    "patients": ("patients",),
    "dentists": ("dentists",),
    "appointments": ("appointments",),
    "dental-records": ("dental-records",),
    "treatments": ("treatments",),
}


def as_key(key: str | QueryKey) -> QueryKey:
    """Normaliza una clave: `"patients"` → `("patients",)`."""
    if isinstance(key, str):
        return (key,)
    if not key:
        raise ValueError("La clave de consulta no puede estar vacía")
    return tuple(key)


@dataclass
class _Entry:
    data: Any
    stale: bool = False


class EntityStore:
    """Cache global de colecciones, compartido por todas las páginas."""

    def __init__(self) -> None:
        self._entries: dict[QueryKey, _Entry] = {}
        self._inflight: dict[QueryKey, asyncio.Task] = {}
        # Generación por colección raíz; se incrementa en cada invalidación
        self._generations: dict[str, int] = {}

    # ── Lecturas ─────────────────────────────────────

    async def read(self, key: str | QueryKey, fetcher: Callable[[], Awaitable[T]]) -> T:
        """
        Retorna el snapshot vigente de `key`, o lo trae con `fetcher` si no
        existe o fue invalidado.
        """
        key = as_key(key)
        entry = self._entries.get(key)
        if entry is not None and not entry.stale:
            return entry.data

        task = self._inflight.get(key)
        if task is None:
            generation = self._generations.get(key[0], 0)
            task = asyncio.ensure_future(self._fetch(key, fetcher, generation))
            self._inflight[key] = task
        # Si un lector se cancela, el fetch compartido sigue para los demás
        return await asyncio.shield(task)

    async def _fetch(
        self, key: QueryKey, fetcher: Callable[[], Awaitable[T]], generation: int
    ) -> T:
        """`generation` es la de la colección raíz al momento de pedir el fetch."""
        logger.debug(f"Fetch de {key} (generación {generation})")
        try:
            data = await fetcher()
        finally:
            if self._inflight.get(key) is asyncio.current_task():
                del self._inflight[key]

        if self._generations.get(key[0], 0) == generation:
            self._entries[key] = _Entry(data)
        else:
            logger.debug(f"Respuesta de {key} descartada: invalidada durante el fetch")
        return data

    def peek(self, key: str | QueryKey) -> Any | None:
        """Snapshot actual (aunque esté invalidado) sin disparar fetch."""
        entry = self._entries.get(as_key(key))
        return entry.data if entry is not None else None

    def is_stale(self, key: str | QueryKey) -> bool:
        entry = self._entries.get(as_key(key))
        return entry is None or entry.stale

    def is_loading(self, key: str | QueryKey) -> bool:
        """True mientras la lectura inicial de `key` está en vuelo."""
        key = as_key(key)
        return key in self._inflight and key not in self._entries

    # ── Mutaciones ───────────────────────────────────

    async def mutate(self, collection: str, op: Callable[[], Awaitable[T]]) -> T:
        """
        Ejecuta `op` contra la API remota y, recién cuando responde con
        éxito, invalida las colecciones dependientes de `collection`.
        Las excepciones de `op` se propagan sin tocar el cache.
        """
        targets = INVALIDATION_TABLE[collection]
        result = await op()
        self.invalidate(*targets)
        return result

    def invalidate(self, *collections: str) -> None:
        """Marca como obsoletas todas las claves cuya raíz está en `collections`."""
        roots = set(collections)
        for root in roots:
            self._generations[root] = self._generations.get(root, 0) + 1

        for key, entry in self._entries.items():
            if key[0] in roots:
                entry.stale = True

        for key in [k for k in self._inflight if k[0] in roots]:
            # El fetch sigue para quien ya lo esperaba, pero la próxima
            # lectura arranca uno nuevo.
            del self._inflight[key]

        logger.debug(f"Colecciones invalidadas: {sorted(roots)}")

    def clear(self) -> None:
        self._entries.clear()
        self._inflight.clear()
        self._generations.clear()
