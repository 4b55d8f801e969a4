# backend/cart_api/api/deps.py
"""
Módulo de dependencias para FastAPI.

Centraliza las dependencias que se inyectan en los endpoints. En los tests se
sustituyen mediante app.dependency_overrides.
"""

from fastapi import Request

from cart_api.services.cart_service import CartServiceProtocol


def get_cart_service(request: Request) -> CartServiceProtocol:
    """
    Dependencia de FastAPI para obtener el servicio de carritos creado al
    arrancar la aplicación.
    """
    return request.app.state.cart_service

