"""Configuración de logging para la CLI.

La librería solo usa `logging.getLogger(__name__)`; los handlers los instala
la CLI (Rich sobre stderr) para no interferir con aplicaciones anfitrionas.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str | int = logging.WARNING, *, console: Console | None = None) -> None:
    """Instala un `RichHandler` en el logger raíz del paquete."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger("iseven_api")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
