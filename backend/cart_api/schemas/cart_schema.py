# backend/cart_api/schemas/cart_schema.py
"""
Esquemas Pydantic para la gestión del carrito de la compra.

Los esquemas definen la estructura de datos que fluye a través de la API:
- Cart / CartItem: respuestas de la API (identificadores como hex de 24 caracteres)
- NewItem: cuerpo de la petición para añadir un item a un carrito
"""

from typing import Any, List, Union
from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

# ========================================
# ESQUEMAS DE RESPUESTA
# ========================================

class CartItem(BaseModel):
    """Línea de un carrito: producto y cantidad."""
    id: str
    cart_id: str
    product: str
    quantity: float

    @field_serializer("quantity")
    def serialize_quantity(self, quantity: float) -> Union[int, float]:
        # 10.0 se escribe como 10 en el JSON de respuesta
        if quantity.is_integer():
            return int(quantity)
        return quantity


class Cart(BaseModel):
    """Esquema que representa el estado completo del carrito."""
    id: str
    items: List[CartItem] = Field(default_factory=list)


# ========================================
# ESQUEMA DE ENTRADA
# ========================================

class NewItem(BaseModel):
    """
    Cuerpo para añadir un item al carrito.

    Los campos ausentes o null (y un cuerpo null) toman su valor vacío y luego
    no pasan is_valid(); un tipo JSON incorrecto (p. ej. quantity como cadena)
    falla al decodificar.
    """
    product: str = ""
    quantity: float = 0.0

    model_config = ConfigDict(strict=True)

    @model_validator(mode="before")
    @classmethod
    def nulls_as_empty(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def is_valid(self) -> bool:
        """El nombre de producto no puede estar vacío y la cantidad debe ser positiva."""
        return self.product != "" and self.quantity > 0
