"""Filtrado en memoria del listado de usuarios."""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable

from usuarios_app.models.user import User

CAMPOS_DE_BUSQUEDA = (
    attrgetter("name"),
    attrgetter("email"),
    attrgetter("phone"),
    attrgetter("username"),
    attrgetter("website"),
    attrgetter("address.city"),
    attrgetter("company.name"),
)


def coincide(usuario: User, consulta_normalizada: str) -> bool:
    """Indica si algún campo buscable contiene la consulta ya en minúsculas."""

    return any(consulta_normalizada in campo(usuario).lower() for campo in CAMPOS_DE_BUSQUEDA)


def apply_filter(usuarios: Iterable[User], consulta: str) -> tuple[User, ...]:
    """Filtra usuarios por nombre, email, teléfono, usuario, web, ciudad o empresa.

    Una consulta vacía o solo con espacios no filtra. En otro caso la
    comparación es por subcadena sin distinguir mayúsculas, y se conserva el
    orden original.
    """

    if not consulta.strip():
        return tuple(usuarios)

    consulta_normalizada = consulta.lower()
    return tuple(usuario for usuario in usuarios if coincide(usuario, consulta_normalizada))


__all__ = ["CAMPOS_DE_BUSQUEDA", "apply_filter", "coincide"]
