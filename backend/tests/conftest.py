"""
Fixtures compartidas por los tests del servicio de carritos.

- carts_collection: colección 'carts' en memoria (mongomock)
- cart_service: servicio real sobre esa colección
- fake_service / client: API con un doble del servicio inyectado
- live_client: API completa sobre el servicio real en memoria
"""
from typing import Any, Dict, List, Tuple

import mongomock
import pytest
from fastapi.testclient import TestClient

from cart_api.api import deps
from cart_api.main import app
from cart_api.schemas.cart_schema import Cart, CartItem
from cart_api.services.cart_service import MongoCartService

TEST_DB_NAME = "cart_api_test_db"


class FakeCartService:
    """
    Doble del servicio de carritos.

    Cada operación devuelve el valor configurado en `results` o lanza el error
    configurado en `errors`, y registra los argumentos recibidos en `calls`.
    """

    def __init__(self):
        self.results: Dict[str, Any] = {}
        self.errors: Dict[str, Exception] = {}
        self.calls: List[Tuple[str, tuple]] = []

    def _respond(self, name: str, *args):
        self.calls.append((name, args))
        if name in self.errors:
            raise self.errors[name]
        return self.results.get(name)

    def add_cart(self) -> Cart:
        return self._respond("add_cart")

    def cart(self, cart_id: str) -> Cart:
        return self._respond("cart", cart_id)

    def add_item_to_cart(self, cart_id: str, product: str, quantity: float) -> CartItem:
        return self._respond("add_item_to_cart", cart_id, product, quantity)

    def remove_item_from_cart(self, cart_id: str, item_id: str) -> None:
        return self._respond("remove_item_from_cart", cart_id, item_id)


@pytest.fixture
def carts_collection():
    client = mongomock.MongoClient()
    collection = client[TEST_DB_NAME]["carts"]
    yield collection
    collection.drop()


@pytest.fixture
def cart_service(carts_collection) -> MongoCartService:
    return MongoCartService(carts_collection)


@pytest.fixture
def fake_service() -> FakeCartService:
    return FakeCartService()


@pytest.fixture
def client(fake_service) -> TestClient:
    app.dependency_overrides[deps.get_cart_service] = lambda: fake_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def live_client(cart_service) -> TestClient:
    app.dependency_overrides[deps.get_cart_service] = lambda: cart_service
    yield TestClient(app)
    app.dependency_overrides.clear()
