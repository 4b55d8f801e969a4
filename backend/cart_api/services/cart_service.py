# backend/cart_api/services/cart_service.py
"""
Servicio de Carrito de Compras para la aplicación.

La capa HTTP depende solo de CartServiceProtocol; MongoCartService es la
implementación real sobre MongoDB y en los tests se sustituye por un doble.
"""
from typing import Optional, Protocol

from pymongo.collection import Collection

from cart_api.core.config import Settings
from cart_api.crud import cart_crud
from cart_api.db.database import MongoConnection, connect_from_settings
from cart_api.schemas.cart_schema import Cart, CartItem


class CartServiceProtocol(Protocol):
    """Operaciones que la API necesita sobre los carritos."""

    def add_cart(self) -> Cart: ...

    def cart(self, cart_id: str) -> Cart: ...

    def add_item_to_cart(self, cart_id: str, product: str, quantity: float) -> CartItem: ...

    def remove_item_from_cart(self, cart_id: str, item_id: str) -> None: ...


class MongoCartService:
    """
    Servicio para gestionar carritos persistidos en una colección de MongoDB.
    """
    def __init__(self, carts: Collection, connection: Optional[MongoConnection] = None):
        self.carts = carts
        self._connection = connection

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoCartService":
        """Conecta con MongoDB según la configuración y construye el servicio."""
        connection = connect_from_settings(settings)
        return cls(connection.carts, connection=connection)

    def add_cart(self) -> Cart:
        return cart_crud.create_cart(self.carts)

    def cart(self, cart_id: str) -> Cart:
        return cart_crud.get_cart(self.carts, cart_id)

    def add_item_to_cart(self, cart_id: str, product: str, quantity: float) -> CartItem:
        return cart_crud.add_item_to_cart(self.carts, cart_id, product, quantity)

    def remove_item_from_cart(self, cart_id: str, item_id: str) -> None:
        cart_crud.remove_item_from_cart(self.carts, cart_id, item_id)

    def item_from_cart(self, cart_id: str, item_id: str) -> CartItem:
        return cart_crud.get_cart_item(self.carts, cart_id, item_id)

    def close(self) -> None:
        """Cierra el cliente de MongoDB si este servicio lo abrió."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
