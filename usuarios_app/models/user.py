"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Address:
    """Dirección postal del usuario."""

    street: str
    suite: str
    city: str
    zipcode: str


@dataclass(frozen=True, slots=True)
class Company:
    """Empresa en la que trabaja el usuario."""

    name: str
    catch_phrase: str
    bs: str


@dataclass(frozen=True, slots=True)
class User:
    """Usuario tal como lo devuelve el servicio ``/users``.

    Attributes
    ----------
    id:
        Identificador único asignado por el servidor.
    address, company:
        Datos compuestos; solo ``address.city`` y ``company.name`` participan
        en la búsqueda.
    """

    id: int
    name: str
    email: str
    phone: str
    username: str
    website: str
    address: Address
    company: Company


__all__ = ["Address", "Company", "User"]
