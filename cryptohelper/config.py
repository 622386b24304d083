# --------------------------------------------------------------
# File: config.py
# Description: Configuración por entorno y puesta a punto del logging.
# --------------------------------------------------------------
"""Ajustes leídos del entorno (y de `.env` si existe)."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_KEY: Optional[str] = os.getenv("CRYPTOHELPER_KEY") or None
LOG_LEVEL = os.getenv("CRYPTOHELPER_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: Optional[str] = None) -> int:
    """Aplica el nivel de logging configurado al logger raíz.

    Args:
        level (Optional[str]): Nombre del nivel; si es None se usa `LOG_LEVEL`.

    Returns:
        int: Nivel numérico aplicado. Los nombres desconocidos caen a WARNING.

    """

    numeric = logging.getLevelName((level or LOG_LEVEL).upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("cryptohelper").setLevel(numeric)
    return numeric
