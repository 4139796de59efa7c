"""Errores producidos al obtener usuarios del servicio remoto."""

from __future__ import annotations


class FetchError(Exception):
    """Fallo al recuperar la lista de usuarios."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class NetworkError(FetchError):
    """Fallo de conectividad o de transporte (HTTP, DNS, timeout)."""


class DecodeError(FetchError):
    """La respuesta no es JSON válido o no tiene la forma esperada."""


__all__ = ["FetchError", "NetworkError", "DecodeError"]
