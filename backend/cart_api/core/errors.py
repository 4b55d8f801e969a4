# backend/cart_api/core/errors.py
"""
Taxonomía de errores del servicio de carritos.

Cada error se construye con un contexto (qué operación, qué identificador) y,
opcionalmente, la causa original. Su representación en texto encadena ambos,
de modo que la capa HTTP puede devolver el mensaje completo al cliente:

    >>> str(NotFound("no carts"))
    'no carts: not found'
"""

from typing import Optional


class CartAPIError(Exception):
    """Error base de la aplicación."""

    base_message: Optional[str] = None

    def __init__(self, context: str = "", cause: Optional[BaseException] = None):
        self.context = context
        self.cause = cause
        super().__init__(context)

    def __str__(self) -> str:
        parts = [part for part in (self.context, self._tail()) if part]
        return ": ".join(parts)

    def _tail(self) -> Optional[str]:
        if self.cause is not None:
            return str(self.cause)
        return self.base_message


class InvalidIdentifier(CartAPIError):
    """El identificador recibido no es un ObjectId válido (24 caracteres hexadecimales)."""


class NotFound(CartAPIError):
    """El carrito o el item referenciado no existe."""

    base_message = "not found"


class StoreError(CartAPIError):
    """Fallo de infraestructura al operar con MongoDB."""


class ValidationError(CartAPIError):
    """Los datos del cuerpo de la petición no superan las validaciones semánticas."""

    base_message = "data from request body is not valid"
