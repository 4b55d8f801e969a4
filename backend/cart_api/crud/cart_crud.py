# backend/cart_api/crud/cart_crud.py
"""
Operaciones CRUD para los documentos de carrito.

Este módulo traduce las operaciones del carrito a llamadas a la colección de
MongoDB:
- Crear un carrito vacío (el _id lo asigna MongoDB)
- Leer un carrito completo o un item concreto
- Añadir un item con $addToSet y eliminarlo con $pull

Las actualizaciones distinguen "no existe el carrito" de "el carrito existe
pero el array no cambió" comparando matched_count con modified_count del
resultado de update_one. Ninguna operación reintenta: cada fallo se envuelve
con su contexto y se propaga hacia el servicio.
"""

import logging
from typing import Any, Dict

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from cart_api.core.errors import InvalidIdentifier, NotFound, StoreError
from cart_api.db.models.cart_model import CartItemRecord, CartRecord
from cart_api.schemas.cart_schema import Cart, CartItem

logger = logging.getLogger(__name__)


def parse_object_id(value: str) -> ObjectId:
    """Convierte un identificador hexadecimal de 24 caracteres en ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifier(f"could not convert {value} to ObjectId", cause=e) from e


# ========================================
# OPERACIONES DE CREACIÓN (CREATE)
# ========================================

def create_cart(carts: Collection) -> Cart:
    """
    Inserta un carrito vacío. MongoDB genera el identificador.
    """
    record = CartRecord()
    try:
        result = carts.insert_one(record.to_document())
    except PyMongoError as e:
        logger.error(f"Error insertando carrito: {e}", exc_info=True)
        raise StoreError("could not insert cart", cause=e) from e

    if not isinstance(result.inserted_id, ObjectId):
        raise StoreError("could not convert to ObjectId")

    record.id = result.inserted_id
    logger.debug(f"Carrito {record.id} creado")
    return record.to_schema()


# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

def get_cart(carts: Collection, cart_id: str) -> Cart:
    """Obtiene un carrito con todos sus items."""
    cart_oid = parse_object_id(cart_id)

    try:
        doc = carts.find_one({"_id": cart_oid})
    except PyMongoError as e:
        logger.error(f"Error leyendo el carrito {cart_id}: {e}", exc_info=True)
        raise StoreError("could not decode document", cause=e) from e

    if doc is None:
        logger.warning(f"Carrito {cart_id} no encontrado")
        raise NotFound("no carts")

    try:
        record = CartRecord.from_document(doc)
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError("could not decode document", cause=e) from e
    return record.to_schema()


def get_cart_item(carts: Collection, cart_id: str, item_id: str) -> CartItem:
    """
    Obtiene un item concreto de un carrito.
    Lanza NotFound si no existe el carrito o el item dentro de él.
    """
    cart_oid = parse_object_id(cart_id)
    item_oid = parse_object_id(item_id)

    try:
        doc = carts.find_one({
            "_id": cart_oid,
            "items": {"$elemMatch": {"id": item_oid}},
        })
    except PyMongoError as e:
        logger.error(f"Error leyendo el item {item_id} del carrito {cart_id}: {e}", exc_info=True)
        raise StoreError("could not decode document", cause=e) from e

    if doc is None:
        raise NotFound("no carts or items")

    try:
        record = CartRecord.from_document(doc)
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError("could not decode document", cause=e) from e

    for item in record.items:
        if item.id == item_oid:
            return item.to_schema()
    raise NotFound("no carts or items")


# ========================================
# OPERACIONES DE ACTUALIZACIÓN (UPDATE)
# ========================================

def add_item_to_cart(carts: Collection, cart_id: str, product: str, quantity: float) -> CartItem:
    """
    Añade un item al array del carrito con $addToSet.

    El identificador del item se genera aquí, de modo que el item devuelto se
    construye con los datos de entrada sin releer el documento.
    """
    cart_oid = parse_object_id(cart_id)
    item = CartItemRecord(
        id=ObjectId(),
        cart_id=cart_oid,
        product=product,
        quantity=quantity,
    )

    try:
        result = carts.update_one(
            {"_id": cart_oid},
            {"$addToSet": {"items": item.to_document()}},
        )
    except PyMongoError as e:
        logger.error(f"Error añadiendo item al carrito {cart_id}: {e}", exc_info=True)
        raise StoreError("could not add item to cart", cause=e) from e

    if result.matched_count == 0:
        logger.warning(f"Carrito {cart_id} no encontrado al añadir item")
        raise NotFound("no carts")
    if result.modified_count == 0:
        raise StoreError("could not add item")

    logger.debug(f"Item {item.id} añadido al carrito {cart_id}")
    return item.to_schema()


def remove_item_from_cart(carts: Collection, cart_id: str, item_id: str) -> None:
    """
    Elimina un item del array del carrito con $pull.
    """
    cart_oid = parse_object_id(cart_id)
    item_oid = parse_object_id(item_id)

    pull: Dict[str, Any] = {"$pull": {"items": {"id": item_oid}}}
    try:
        result = carts.update_one({"_id": cart_oid}, pull)
    except PyMongoError as e:
        logger.error(f"Error eliminando el item {item_id} del carrito {cart_id}: {e}", exc_info=True)
        raise StoreError("could not delete item from cart", cause=e) from e

    if result.matched_count == 0:
        logger.warning(f"Carrito {cart_id} no encontrado al eliminar item")
        raise NotFound("no carts")
    if result.modified_count == 0:
        logger.warning(f"Item {item_id} no encontrado en el carrito {cart_id}")
        raise NotFound("no items")

    logger.debug(f"Item {item_id} eliminado del carrito {cart_id}")
