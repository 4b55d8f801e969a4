# backend/cart_api/db/models/cart_model.py
"""
Forma de los documentos de carrito tal y como se guardan en MongoDB.

Cada carrito es un documento de la colección 'carts' y sus items van
embebidos en el array 'items':

    {
        "_id": ObjectId,
        "items": [
            {"id": ObjectId, "cart_id": ObjectId, "product": str, "quantity": float},
            ...
        ]
    }

Estos registros usan los tipos nativos del almacén (ObjectId). La conversión
a los esquemas de la API (identificadores como cadenas hexadecimales) se hace
aquí, en el borde del adaptador, y en ningún otro sitio.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bson import ObjectId

from cart_api.schemas.cart_schema import Cart, CartItem


@dataclass
class CartItemRecord:
    """Item embebido dentro de un documento de carrito."""
    id: ObjectId
    cart_id: ObjectId
    product: str
    quantity: float

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "CartItemRecord":
        return cls(
            id=doc["id"],
            cart_id=doc["cart_id"],
            product=doc["product"],
            quantity=float(doc["quantity"]),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "cart_id": self.cart_id,
            "product": self.product,
            "quantity": self.quantity,
        }

    def to_schema(self) -> CartItem:
        return CartItem(
            id=str(self.id),
            cart_id=str(self.cart_id),
            product=self.product,
            quantity=self.quantity,
        )


@dataclass
class CartRecord:
    """Documento de carrito. '_id' lo asigna MongoDB al insertar."""
    id: Optional[ObjectId] = None
    items: List[CartItemRecord] = field(default_factory=list)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "CartRecord":
        # Un documento sin 'items' (o con null) se trata como carrito vacío
        raw_items = doc.get("items") or []
        return cls(
            id=doc["_id"],
            items=[CartItemRecord.from_document(item) for item in raw_items],
        )

    def to_document(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {"items": [item.to_document() for item in self.items]}
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    def to_schema(self) -> Cart:
        return Cart(
            id=str(self.id),
            items=[item.to_schema() for item in self.items],
        )
