"""Estados de la vista del listado de usuarios.

``ViewState`` es una unión etiquetada: en todo momento la vista está en
exactamente una de las variantes ``Loading``, ``Success`` o ``Error``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from usuarios_app.models.user import User


@dataclass(frozen=True, slots=True)
class Loading:
    """Hay una carga en curso; no existe nada que mostrar todavía."""


@dataclass(frozen=True, slots=True)
class Success:
    """Usuarios visibles, en el orden del servidor y ya filtrados."""

    users: tuple[User, ...]


@dataclass(frozen=True, slots=True)
class Error:
    """La última carga falló; ``message`` es apto para mostrarse al usuario."""

    message: str


ViewState = Union[Loading, Success, Error]


__all__ = ["Loading", "Success", "Error", "ViewState"]
