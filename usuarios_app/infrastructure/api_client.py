"""Clientes de acceso al servicio de usuarios.

``APIClient`` realiza la petición HTTP real contra JSONPlaceholder.
``StaticAPIClient`` devuelve datos embebidos con la misma interfaz, de modo
que la aplicación puede funcionar sin red o con datos de prueba.
"""

from __future__ import annotations

import http.client
import json
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from usuarios_app.infrastructure.errors import DecodeError, NetworkError
from usuarios_app.logging_config import get_logger

logger = get_logger(__name__)


class APIClient:
    """Provee acceso a los usuarios publicados por el backend."""

    BASE_URL = "https://jsonplaceholder.typicode.com/"
    USERS_PATH = "users"
    TIMEOUT = 10

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = self.TIMEOUT if timeout is None else timeout

    @property
    def users_url(self) -> str:
        return f"{self.base_url}/{self.USERS_PATH}"

    def obtener_usuarios(self) -> list[Any]:
        """Recupera el arreglo JSON crudo de usuarios.

        Lanza ``NetworkError`` si la petición falla y ``DecodeError`` si la
        respuesta no es un arreglo JSON.
        """

        url = self.users_url
        logger.info("Solicitando usuarios a %s", url)
        try:
            with urlopen(
                Request(url, headers={"Accept": "application/json"}), timeout=self.timeout
            ) as response:
                raw_data = response.read()
        except HTTPError as exc:
            logger.warning("El servicio respondió HTTP %s", exc.code)
            raise NetworkError(f"Error HTTP {exc.code}", cause=exc) from exc
        except URLError as exc:
            logger.warning("No se pudo conectar a %s: %s", url, exc.reason)
            raise NetworkError(str(exc.reason), cause=exc) from exc
        except OSError as exc:
            logger.warning("Fallo de transporte al leer %s: %s", url, exc)
            raise NetworkError(str(exc) or type(exc).__name__, cause=exc) from exc
        except http.client.HTTPException as exc:
            logger.warning("Respuesta HTTP malformada desde %s: %r", url, exc)
            raise NetworkError(str(exc) or type(exc).__name__, cause=exc) from exc

        try:
            payload = json.loads(raw_data)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            logger.warning("Respuesta inválida del servicio de usuarios: %s", exc)
            raise DecodeError(f"Respuesta inválida del servicio de usuarios ({exc}).", cause=exc) from exc

        if not isinstance(payload, list):
            raise DecodeError("Formato inesperado: se esperaba una lista de usuarios.")
        return payload


class StaticAPIClient:
    """Cliente sin red que devuelve un conjunto fijo de usuarios."""

    def __init__(self, payload: list[dict] | None = None) -> None:
        self._payload = list(USUARIOS_DE_EJEMPLO if payload is None else payload)

    def obtener_usuarios(self) -> list[Any]:
        return list(self._payload)


USUARIOS_DE_EJEMPLO: tuple[dict, ...] = (
    {
        "id": 1,
        "name": "Carlos Rodríguez",
        "email": "carlos.rodriguez@email.com",
        "phone": "+51 987 654 321",
        "username": "carlos_r",
        "website": "carlos-rodriguez.com",
        "address": {
            "street": "Av. Arequipa 123",
            "suite": "Departamento 4B",
            "city": "Lima",
            "zipcode": "15001",
        },
        "company": {
            "name": "Tech Solutions Perú",
            "catchPhrase": "Soluciones tecnológicas innovadoras",
            "bs": "desarrollo-software",
        },
    },
    {
        "id": 2,
        "name": "María García",
        "email": "maria.garcia@email.com",
        "phone": "+51 955 123 456",
        "username": "maria_g",
        "website": "maria-garcia.org",
        "address": {
            "street": "Jr. Trujillo 456",
            "suite": "Casa 202",
            "city": "Arequipa",
            "zipcode": "04001",
        },
        "company": {
            "name": "Consultoría Andina",
            "catchPhrase": "Consultoría de alta calidad",
            "bs": "consultoria-empresarial",
        },
    },
)


__all__ = ["APIClient", "StaticAPIClient", "USUARIOS_DE_EJEMPLO"]
