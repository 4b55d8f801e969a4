# backend/cart_api/core/logging_config.py
"""
Configuración del logging de la aplicación a partir de Settings.
"""

import logging

from cart_api.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Aplica LOG_LEVEL y LOG_FORMAT al logger raíz."""
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=True)
    # El driver de Mongo es muy verboso en DEBUG
    logging.getLogger("pymongo").setLevel(max(level, logging.INFO))
