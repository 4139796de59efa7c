"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from typing import Any, Protocol

from usuarios_app.infrastructure.errors import DecodeError
from usuarios_app.logging_config import get_logger
from usuarios_app.models.user import Address, Company, User

logger = get_logger(__name__)


class UserSource(Protocol):
    def obtener_usuarios(self) -> list[Any]: ...


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: UserSource) -> None:
        self._api_client = api_client

    def fetch_users(self) -> list[User]:
        """Devuelve la lista completa de usuarios en el orden del servidor.

        Propaga ``NetworkError`` del cliente y lanza ``DecodeError`` cuando
        algún elemento no tiene la forma de un usuario.
        """

        usuarios_crudos = self._api_client.obtener_usuarios()
        usuarios = [
            _construir_usuario(datos, indice) for indice, datos in enumerate(usuarios_crudos)
        ]
        logger.info("Se decodificaron %d usuarios", len(usuarios))
        return usuarios


def _construir_usuario(datos: Any, indice: int) -> User:
    contexto = f"usuario[{indice}]"
    objeto = _leer_objeto(datos, contexto)
    direccion = _leer_objeto(objeto.get("address"), f"{contexto}.address")
    empresa = _leer_objeto(objeto.get("company"), f"{contexto}.company")

    identificador = objeto.get("id")
    if isinstance(identificador, bool) or not isinstance(identificador, int):
        raise DecodeError(f"Campo inválido {contexto}.id: se esperaba un entero.")

    return User(
        id=identificador,
        name=_leer_texto(objeto, "name", contexto),
        email=_leer_texto(objeto, "email", contexto),
        phone=_leer_texto(objeto, "phone", contexto),
        username=_leer_texto(objeto, "username", contexto),
        website=_leer_texto(objeto, "website", contexto),
        address=Address(
            street=_leer_texto(direccion, "street", f"{contexto}.address"),
            suite=_leer_texto(direccion, "suite", f"{contexto}.address"),
            city=_leer_texto(direccion, "city", f"{contexto}.address"),
            zipcode=_leer_texto(direccion, "zipcode", f"{contexto}.address"),
        ),
        company=Company(
            name=_leer_texto(empresa, "name", f"{contexto}.company"),
            catch_phrase=_leer_texto(empresa, "catchPhrase", f"{contexto}.company"),
            bs=_leer_texto(empresa, "bs", f"{contexto}.company"),
        ),
    )


def _leer_objeto(valor: Any, contexto: str) -> dict:
    if not isinstance(valor, dict):
        raise DecodeError(f"Campo inválido {contexto}: se esperaba un objeto.")
    return valor


def _leer_texto(objeto: dict, clave: str, contexto: str) -> str:
    if clave not in objeto:
        raise DecodeError(f"Falta el campo {contexto}.{clave}.")
    valor = objeto[clave]
    if not isinstance(valor, str):
        raise DecodeError(f"Campo inválido {contexto}.{clave}: se esperaba texto.")
    return valor


__all__ = ["UserRepository", "UserSource"]
