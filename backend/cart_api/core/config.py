# backend/cart_api/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Tuple

# Valores por defecto de la conexión a MongoDB, usados cuando el entorno no
# define una configuración completa.
DEFAULT_DB_NAME = "cart_api"
DEFAULT_CONNECTION_STRING = "mongodb://localhost:27018"


class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Todas las variables se leen con el prefijo CARTAPI_ (p. ej. CARTAPI_DB_NAME).
    """
    # Configuración general del proyecto
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Cart API"
    PROJECT_VERSION: str = "0.1.0"

    # Configuración de la base de datos
    DB_NAME: str = DEFAULT_DB_NAME
    CONNECTION_STRING: str = DEFAULT_CONNECTION_STRING
    CARTS_COLLECTION: str = "carts"
    CONNECT_TIMEOUT_SECONDS: float = 5.0

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 27000
    SHUTDOWN_GRACE_SECONDS: int = 5

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="CARTAPI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def mongo_target(self) -> Tuple[str, str]:
        """
        Devuelve (cadena de conexión, nombre de base de datos).

        Solo se respetan los valores configurados si ambos están presentes;
        si falta alguno se vuelve a la pareja por defecto completa.
        """
        if self.DB_NAME and self.CONNECTION_STRING:
            return self.CONNECTION_STRING, self.DB_NAME
        return DEFAULT_CONNECTION_STRING, DEFAULT_DB_NAME


# Instancia global de la configuración
settings = Settings()
