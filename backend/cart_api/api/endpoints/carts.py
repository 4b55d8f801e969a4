# backend/cart_api/api/endpoints/carts.py
"""
Este archivo contiene los endpoints para el carrito de compras.

Se encarga de crear carritos, añadir y eliminar items y obtener el contenido
de un carrito. Las respuestas correctas son JSON; los errores se devuelven
como texto plano con el mensaje del error envuelto.

Todos los errores del almacén (incluidos NotFound e InvalidIdentifier) se
responden con 500.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from cart_api.api import deps
from cart_api.core.errors import CartAPIError, ValidationError
from cart_api.schemas.cart_schema import Cart, CartItem, NewItem
from cart_api.services.cart_service import CartServiceProtocol

logger = logging.getLogger(__name__)

# Router para el carrito de compras
router = APIRouter()


def _text(status_code: int, message: str) -> PlainTextResponse:
    if status_code >= 500:
        logger.error(message)
    else:
        logger.warning(message)
    return PlainTextResponse(message, status_code=status_code)


def _not_provided(name: str) -> PlainTextResponse:
    return _text(status.HTTP_400_BAD_REQUEST, f"{name} is not provided")


def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(error["msg"] for error in exc.errors())


@router.post("", response_model=Cart)
def create_cart(
    cart_service: CartServiceProtocol = Depends(deps.get_cart_service),
):
    """Crea un carrito vacío. El cuerpo de la petición se ignora."""
    try:
        return cart_service.add_cart()
    except CartAPIError as e:
        return _text(status.HTTP_500_INTERNAL_SERVER_ERROR, f"could not add cart: {e}")


@router.post("/{cart_id}/items", response_model=CartItem)
async def add_to_cart(
    cart_id: str,
    request: Request,
    cart_service: CartServiceProtocol = Depends(deps.get_cart_service),
):
    """
    Añade un producto al carrito. El cuerpo es {"product": str, "quantity": float}.
    """
    raw_body = await request.body()
    try:
        item = NewItem.model_validate_json(raw_body)
    except PydanticValidationError as e:
        return _text(status.HTTP_400_BAD_REQUEST, f"could not decode request body: {_describe(e)}")

    if not cart_id:
        return _not_provided("cart_id")
    if not item.is_valid():
        return _text(status.HTTP_400_BAD_REQUEST, str(ValidationError()))

    try:
        return await run_in_threadpool(
            cart_service.add_item_to_cart, cart_id, item.product, item.quantity
        )
    except CartAPIError as e:
        return _text(status.HTTP_500_INTERNAL_SERVER_ERROR, f"could not add item to cart: {e}")


@router.delete("/{cart_id}/items/{item_id}")
def remove_from_cart(
    cart_id: str,
    item_id: str,
    cart_service: CartServiceProtocol = Depends(deps.get_cart_service),
):
    """Elimina un item del carrito. Responde 200 con cuerpo vacío."""
    if not cart_id:
        return _not_provided("cart_id")
    if not item_id:
        return _not_provided("item_id")

    try:
        cart_service.remove_item_from_cart(cart_id, item_id)
    except CartAPIError as e:
        return _text(status.HTTP_500_INTERNAL_SERVER_ERROR, f"could not remove item from cart: {e}")
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{cart_id}", response_model=Cart)
def view_cart(
    cart_id: str,
    cart_service: CartServiceProtocol = Depends(deps.get_cart_service),
):
    """Obtiene el contenido del carrito."""
    if not cart_id:
        return _not_provided("cart_id")

    try:
        return cart_service.cart(cart_id)
    except CartAPIError as e:
        return _text(status.HTTP_500_INTERNAL_SERVER_ERROR, f"could not get cart: {e}")
