"""
Punto de entrada del front de administración (FastAPI).
Crea el cliente de la API remota, el store compartido y las páginas,
configura CORS, logging y manejo de errores.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dental_admin.api.v1.router import api_v1_router
from dental_admin.config import get_settings
from dental_admin.core.exceptions import ConflictException, PageStateError
from dental_admin.core.notifications import ToastNotifier
from dental_admin.pages import build_pages
from dental_admin.services.api_client import ApiClient
from dental_admin.services.entity_store import EntityStore

settings = get_settings()
logger = logging.getLogger(__name__)


# ── Lifecycle ────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Eventos de inicio y cierre de la aplicación."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    client = ApiClient()
    app.state.api_client = client
    app.state.store = EntityStore()
    app.state.pages = build_pages(client, app.state.store, ToastNotifier())
    logger.info(f"{settings.APP_NAME} iniciando en modo {settings.APP_ENV} (API remota: {client.base_url})")
    yield
    logger.info(f"{settings.APP_NAME} cerrando...")
    await client.aclose()


# ── App ──────────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    description="Administración de clínica dental: pacientes, odontólogos, citas y expedientes",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Exception Handlers ───────────────────────────────
@app.exception_handler(PageStateError)
async def page_state_exception_handler(request: Request, exc: PageStateError):
    """Acción inválida para el estado actual de la página (ej: ya hay un formulario abierto)."""
    return await http_exception_handler(request, ConflictException(str(exc)))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Captura excepciones no manejadas para evitar exponer detalles internos."""
    logger.exception(f"Error no manejado en {request.method} {request.url.path}")
    if settings.DEBUG:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "type": type(exc).__name__},
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error interno del servidor"},
    )


# ── Routers ──────────────────────────────────────────
app.include_router(api_v1_router, prefix=settings.API_V1_PREFIX)


# ── Health Check ─────────────────────────────────────
@app.get("/health", tags=["Health"])
async def health_check():
    """Endpoint de health check para monitoreo."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": "0.1.0",
        "environment": settings.APP_ENV,
        "api_base_url": settings.API_BASE_URL,
    }
