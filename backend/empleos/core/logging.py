"""Configuración mínima del logging de la aplicación."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Instala un handler de consola en el logger raíz si aún no hay ninguno.

    Si el servidor (uvicorn, pytest...) ya configuró handlers, sólo se
    ajusta el nivel del logger del paquete.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("empleos").setLevel(level)
