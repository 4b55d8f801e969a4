# backend/cart_api/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con MongoDB usando pymongo y expone los
componentes básicos que utiliza el resto de la aplicación:
- Cliente de MongoDB (con pool de conexiones propio, seguro entre hilos)
- Colección de carritos

La conexión inicial se verifica con un ping acotado por un tiempo máximo;
si no hay respuesta en ese plazo la aplicación no debe arrancar.
"""

import logging
from dataclasses import dataclass

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from cart_api.core.config import Settings
from cart_api.core.errors import StoreError

logger = logging.getLogger(__name__)


@dataclass
class MongoConnection:
    """Cliente abierto y la colección de carritos que se usa en las consultas."""
    client: MongoClient
    carts: Collection

    def close(self) -> None:
        self.client.close()


def connect(
    connection_string: str,
    db_name: str,
    collection_name: str,
    timeout_seconds: float = 5.0,
) -> MongoConnection:
    """
    Conecta con MongoDB, comprueba la conexión con un ping y devuelve la
    colección de carritos de la base de datos indicada.
    """
    timeout_ms = int(timeout_seconds * 1000)
    try:
        client: MongoClient = MongoClient(
            connection_string,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
    except PyMongoError as e:
        raise StoreError("could not create mongo client", cause=e) from e

    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreError("could not ping mongo client", cause=e) from e

    carts = client[db_name][collection_name]
    logger.info(f"Conectado a MongoDB: base de datos '{db_name}', colección '{collection_name}'")
    return MongoConnection(client=client, carts=carts)


def connect_from_settings(settings: Settings) -> MongoConnection:
    """Abre la conexión usando la configuración de la aplicación."""
    connection_string, db_name = settings.mongo_target()
    return connect(
        connection_string,
        db_name,
        settings.CARTS_COLLECTION,
        timeout_seconds=settings.CONNECT_TIMEOUT_SECONDS,
    )
