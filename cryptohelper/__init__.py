# --------------------------------------------------------------
# File: __init__.py
# Description: API pública del paquete cryptohelper.
# --------------------------------------------------------------
"""Envoltorios sencillos sobre NaCl secretbox.

El paquete no implementa criptografía propia: genera claves de 256 bits,
envuelve Seal/Open de secretbox leyendo y escribiendo Base64 y embebe un
nonce aleatorio de 24 bytes delante del ciphertext.
"""

from cryptohelper.errors import (
    AuthenticationFailure,
    CryptoHelperError,
    InvalidKey,
    InvalidPlaintext,
    MalformedCiphertext,
    RandomSourceFailure,
)
from cryptohelper.keys import decode_key, encode_key, generate_key
from cryptohelper.secretbox import SecretboxCodec, decrypt, decrypt_bytes, encrypt

__all__ = [
    "AuthenticationFailure",
    "CryptoHelperError",
    "InvalidKey",
    "InvalidPlaintext",
    "MalformedCiphertext",
    "RandomSourceFailure",
    "SecretboxCodec",
    "decode_key",
    "decrypt",
    "decrypt_bytes",
    "encode_key",
    "encrypt",
    "generate_key",
]
