# --------------------------------------------------------------
# File: secretbox.py
# Description: Cifrado y descifrado de texto con NaCl secretbox y nonce embebido.
# --------------------------------------------------------------
"""Envoltorio de `nacl.secret.SecretBox` que lee y escribe blobs Base64.

El blob decodificado tiene el formato fijo::

    [--nonce (24 bytes)--][--tag Poly1305 (16) + ciphertext--]

Con nonces aleatorios de 24 bytes el riesgo de colisión es despreciable.
"""

import base64
import logging
import os
from typing import Union

from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from cryptohelper.errors import AuthenticationFailure, InvalidPlaintext, MalformedCiphertext
from cryptohelper.keys import RandomSource, decode_key, read_random
from cryptohelper.models import MAC_SIZE, NONCE_SIZE, SecretboxBlob

logger = logging.getLogger(__name__)

# El texto de entrada debe ser UTF-8 válido; al descifrar, los bytes no UTF-8
# se conservan como surrogates para no perder información.
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


class SecretboxCodec:
    """Cifra y descifra texto usando una fuente aleatoria inyectada.

    La instancia no guarda más estado que la fuente aleatoria, por lo que puede
    compartirse entre hilos sin bloqueos.
    """

    def __init__(self, random_source: RandomSource = os.urandom) -> None:
        self._random_source = random_source

    def encrypt(self, plaintext: Union[str, bytes], key: str) -> str:
        """Cifra `plaintext` y devuelve `b64(nonce || sellado)`.

        Args:
            plaintext (Union[str, bytes]): Texto o bytes a proteger.
            key (str): Clave de 32 bytes codificada en Base64.

        Returns:
            str: Blob cifrado en Base64 estándar.

        Raises:
            InvalidKey: Si la clave no es válida.
            InvalidPlaintext: Si el texto no se puede codificar como UTF-8.
            RandomSourceFailure: Si no se pudo generar el nonce.

        """

        raw_key = decode_key(key)
        if isinstance(plaintext, str):
            plaintext = _encode_text(plaintext)
        nonce = read_random(self._random_source, NONCE_SIZE)

        sealed = SecretBox(raw_key).encrypt(plaintext, nonce).ciphertext
        blob = SecretboxBlob(nonce=nonce, sealed=sealed)
        return base64.b64encode(blob.to_bytes()).decode("ascii")

    def decrypt_bytes(self, ciphertext: str, key: str) -> bytes:
        """Abre un blob y devuelve los bytes originales.

        Args:
            ciphertext (str): Blob Base64 producido por `encrypt`.
            key (str): Clave de 32 bytes codificada en Base64.

        Returns:
            bytes: Mensaje en claro recuperado byte a byte.

        Raises:
            InvalidKey: Si la clave no es válida.
            MalformedCiphertext: Si el blob no es Base64 o mide menos de 24 bytes.
            AuthenticationFailure: Si la autenticación Poly1305 falla.

        """

        raw_key = decode_key(key)
        blob = _split_blob(ciphertext)
        if len(blob.sealed) < MAC_SIZE:
            logger.debug("ciphertext rejected: sealed region shorter than the tag")
            raise AuthenticationFailure()
        try:
            return SecretBox(raw_key).decrypt(blob.sealed, blob.nonce)
        except CryptoError as exc:
            logger.debug("ciphertext rejected: authentication failed")
            raise AuthenticationFailure() from exc

    def decrypt(self, ciphertext: str, key: str) -> str:
        """Igual que `decrypt_bytes` pero devuelve el mensaje como texto."""

        return self.decrypt_bytes(ciphertext, key).decode(TEXT_ENCODING, TEXT_ERRORS)


def _encode_text(text: str) -> bytes:
    try:
        return text.encode(TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        logger.debug("plaintext rejected: not encodable as utf-8")
        raise InvalidPlaintext() from exc


def _split_blob(ciphertext: str) -> SecretboxBlob:
    try:
        raw = base64.b64decode(ciphertext, validate=True)
    except (ValueError, TypeError) as exc:
        logger.debug("ciphertext rejected: not valid base64")
        raise MalformedCiphertext() from exc
    if len(raw) < NONCE_SIZE:
        logger.debug("ciphertext rejected: %d bytes is shorter than the nonce", len(raw))
        raise MalformedCiphertext()
    return SecretboxBlob.from_bytes(raw)


_default_codec = SecretboxCodec()


def encrypt(plaintext: Union[str, bytes], key: str) -> str:
    """Cifra con el codec por defecto respaldado por `os.urandom`."""

    return _default_codec.encrypt(plaintext, key)


def decrypt(ciphertext: str, key: str) -> str:
    """Descifra con el codec por defecto y devuelve texto."""

    return _default_codec.decrypt(ciphertext, key)


def decrypt_bytes(ciphertext: str, key: str) -> bytes:
    """Descifra con el codec por defecto y devuelve los bytes originales.

    Args:
        ciphertext (str): Blob Base64 producido por `encrypt`.
        key (str): Clave de 32 bytes codificada en Base64.

    Returns:
        bytes: Mensaje en claro sin decodificar.

    """

    return _default_codec.decrypt_bytes(ciphertext, key)
