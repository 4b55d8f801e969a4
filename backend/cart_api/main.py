# backend/cart_api/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación completa:
- Configuración del logging
- Conexión a MongoDB al arrancar y cierre del cliente al parar
- Registro del router de carritos
- Arranque con uvicorn, con un periodo de gracia fijo para las peticiones
  en curso durante el apagado
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from cart_api.core.config import settings  # Configuración centralizada de la aplicación
from cart_api.core.errors import StoreError
from cart_api.core.logging_config import configure_logging
from cart_api.api.api_router import api_router
from cart_api.services.cart_service import MongoCartService

logger = logging.getLogger(__name__)


# ========================================
# CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Conecta con MongoDB antes de aceptar peticiones y cierra el cliente al
    terminar. Si la conexión inicial falla, la aplicación no arranca.
    """
    configure_logging(settings)
    try:
        cart_service = MongoCartService.from_settings(settings)
    except StoreError:
        logger.critical("could not connect to mongo", exc_info=True)
        raise
    app.state.cart_service = cart_service
    logger.info(f"{settings.PROJECT_NAME} escuchando en el puerto {settings.PORT}")

    yield

    logger.info("Server shutting down...")
    cart_service.close()
    logger.info("Server stopped")


# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description="API REST para la gestión de carritos de la compra",
    lifespan=lifespan,
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bienvenido a Cart API v0.1.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


def run() -> None:
    """Arranca el servidor HTTP en el puerto configurado."""
    configure_logging(settings)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
        log_config=None,
    )


if __name__ == "__main__":
    run()
