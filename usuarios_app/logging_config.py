"""Configuración de logging de la aplicación.

Usa ``rich`` para mostrar los registros con color en la terminal.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_RAIZ = "usuarios_app"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Configura el logging con un ``RichHandler`` sobre stderr.

    Args:
        verbose: Habilita el nivel DEBUG.
        quiet: Solo muestra errores.
        log_file: Ruta opcional donde también se escriben los registros.

    Returns:
        El logger raíz de la aplicación.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger(LOGGER_RAIZ)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Devuelve un logger bajo el espacio de nombres ``usuarios_app``."""
    if name is None:
        return logging.getLogger(LOGGER_RAIZ)

    if not name.startswith(LOGGER_RAIZ):
        name = f"{LOGGER_RAIZ}.{name}"

    return logging.getLogger(name)


__all__ = ["setup_logging", "get_logger"]
