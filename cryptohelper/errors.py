# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones devueltas por las operaciones de cifrado.
# --------------------------------------------------------------
"""Tipos de error terminales expuestos al código que llama a cryptohelper."""

INVALID_KEY_MESSAGE = "invalid key: must be 32 bytes b64-encoded"
MALFORMED_CIPHERTEXT_MESSAGE = "malformed ciphertext: must be b64-encoded and at least 24 bytes"
AUTHENTICATION_FAILURE_MESSAGE = "ciphertext failed to authenticate HMAC"
RANDOM_SOURCE_FAILURE_MESSAGE = "random source failed to provide the requested bytes"
INVALID_PLAINTEXT_MESSAGE = "invalid plaintext: text must be encodable as utf-8"


class CryptoHelperError(Exception):
    """Clase base de todos los errores del paquete."""


class RandomSourceFailure(CryptoHelperError, RuntimeError):
    """La fuente aleatoria no pudo entregar los bytes solicitados."""

    def __init__(self, message: str = RANDOM_SOURCE_FAILURE_MESSAGE) -> None:
        super().__init__(message)


class InvalidKey(CryptoHelperError, ValueError):
    """La clave no es Base64 válido o no decodifica a exactamente 32 bytes."""

    def __init__(self, message: str = INVALID_KEY_MESSAGE) -> None:
        super().__init__(message)


class InvalidPlaintext(CryptoHelperError, ValueError):
    """El texto contiene surrogates y no se puede codificar como UTF-8.

    Para datos arbitrarios se debe cifrar `bytes` directamente.
    """

    def __init__(self, message: str = INVALID_PLAINTEXT_MESSAGE) -> None:
        super().__init__(message)


class MalformedCiphertext(CryptoHelperError, ValueError):
    """El blob cifrado no es Base64 válido o es más corto que el nonce."""

    def __init__(self, message: str = MALFORMED_CIPHERTEXT_MESSAGE) -> None:
        super().__init__(message)


class AuthenticationFailure(CryptoHelperError):
    """La verificación Poly1305 falló al abrir el blob.

    Cubre manipulación, truncado de la región sellada y uso de otra clave; no
    se distingue entre esos casos.
    """

    def __init__(self, message: str = AUTHENTICATION_FAILURE_MESSAGE) -> None:
        super().__init__(message)
