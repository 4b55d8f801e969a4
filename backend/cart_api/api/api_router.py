# backend/cart_api/api/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar y configurar todos los routers de la API.
"""

from fastapi import APIRouter

from cart_api.api.endpoints import carts

# Crear router principal
api_router = APIRouter()

# ROUTER DE CARRITOS
# Maneja la creación de carritos y el alta/baja de sus items
api_router.include_router(
    carts.router,
    prefix="/carts",                # Prefijo: /carts
    tags=["Carts"]                  # Tag para documentación OpenAPI/Swagger
)
