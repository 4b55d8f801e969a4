"""
Tests del ciclo de vida de la aplicación: arranque con uvicorn, conexión a
MongoDB al iniciar y cierre del cliente al parar.
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from cart_api import main
from cart_api.core.errors import StoreError
from cart_api.schemas.cart_schema import Cart


@pytest.fixture
def quiet_logging():
    with patch.object(main, "configure_logging") as configure:
        yield configure


@pytest.fixture
def reset_app_state():
    yield
    if hasattr(main.app.state, "cart_service"):
        del main.app.state.cart_service


class TestRun:

    def test_uses_configured_port_and_grace_period(self, quiet_logging):
        with patch.object(main.uvicorn, "run") as uvicorn_run:
            main.run()

        uvicorn_run.assert_called_once()
        args, kwargs = uvicorn_run.call_args
        assert args == (main.app,)
        assert kwargs["host"] == main.settings.HOST
        assert kwargs["port"] == main.settings.PORT
        assert kwargs["timeout_graceful_shutdown"] == main.settings.SHUTDOWN_GRACE_SECONDS
        quiet_logging.assert_called_once_with(main.settings)


class TestLifespan:

    def test_connects_on_startup_and_closes_on_shutdown(self, quiet_logging, reset_app_state):
        service = MagicMock()
        service.add_cart.return_value = Cart(id="0" * 24, items=[])

        with patch.object(main.MongoCartService, "from_settings", return_value=service) as from_settings:
            with TestClient(main.app) as client:
                from_settings.assert_called_once_with(main.settings)
                service.close.assert_not_called()

                response = client.post("/carts")
                assert response.status_code == 200
                assert response.json() == {"id": "0" * 24, "items": []}

        service.close.assert_called_once()

    def test_connection_failure_aborts_startup(self, quiet_logging, reset_app_state):
        error = StoreError("could not ping mongo client", cause=RuntimeError("no servers"))

        with patch.object(main.MongoCartService, "from_settings", side_effect=error):
            with pytest.raises(StoreError, match="could not ping mongo client"):
                with TestClient(main.app):
                    pass

        assert not hasattr(main.app.state, "cart_service")
