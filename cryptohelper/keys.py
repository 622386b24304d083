# --------------------------------------------------------------
# File: keys.py
# Description: Generación y codificación Base64 de claves secretbox de 256 bits.
# --------------------------------------------------------------
"""Codificación de claves simétricas de 32 bytes en texto Base64 estándar."""

import base64
import logging
import os
from typing import Callable

from cryptohelper.errors import InvalidKey, RandomSourceFailure
from cryptohelper.models import KEY_SIZE

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


def read_random(random_source: RandomSource, size: int) -> bytes:
    """Extrae exactamente `size` bytes de la fuente aleatoria indicada.

    Args:
        random_source (RandomSource): Callable compatible con `os.urandom`.
        size (int): Número de bytes requeridos.

    Returns:
        bytes: Bytes aleatorios de la longitud pedida.

    Raises:
        RandomSourceFailure: Si la fuente falla o devuelve otra longitud.

    """

    try:
        data = random_source(size)
    except (OSError, NotImplementedError) as exc:
        logger.debug("random source raised %s", type(exc).__name__)
        raise RandomSourceFailure() from exc
    if not isinstance(data, (bytes, bytearray)) or len(data) != size:
        logger.debug("random source returned an unexpected value for %d bytes", size)
        raise RandomSourceFailure()
    return bytes(data)


def encode_key(raw: bytes) -> str:
    """Codifica una clave binaria de 32 bytes en Base64 estándar con relleno."""

    if len(raw) != KEY_SIZE:
        raise InvalidKey()
    return base64.b64encode(raw).decode("ascii")


def decode_key(text: str) -> bytes:
    """Decodifica una clave Base64 validando que tenga exactamente 32 bytes.

    Args:
        text (str): Clave en Base64 estándar (alfabeto no URL-safe, con relleno).

    Returns:
        bytes: Clave binaria de 32 bytes.

    Raises:
        InvalidKey: Si el texto no es Base64 válido o la longitud no es 32.

    """

    try:
        raw = base64.b64decode(text, validate=True)
    except (ValueError, TypeError) as exc:
        logger.debug("key rejected: not valid base64")
        raise InvalidKey() from exc
    if len(raw) != KEY_SIZE:
        logger.debug("key rejected: decoded to %d bytes", len(raw))
        raise InvalidKey()
    return raw


def generate_key(random_source: RandomSource = os.urandom) -> str:
    """Genera una clave aleatoria de 256 bits apta para secretbox.

    Args:
        random_source (RandomSource): Fuente de bytes criptográficamente segura.

    Returns:
        str: Clave codificada en Base64.

    """

    return encode_key(read_random(random_source, KEY_SIZE))
