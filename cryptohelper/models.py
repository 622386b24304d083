# --------------------------------------------------------------
# File: models.py
# Description: Modelo del blob cifrado intercambiado por la capa secretbox.
# --------------------------------------------------------------
"""Modelos Pydantic que describen el formato binario `nonce || sellado`."""

from pydantic import BaseModel, ConfigDict, field_validator

KEY_SIZE = 32
NONCE_SIZE = 24
MAC_SIZE = 16


class SecretboxBlob(BaseModel):
    """Representa un blob secretbox ya decodificado de Base64.

    Attributes:
        nonce (bytes): Nonce aleatorio de 24 bytes, ocupa los offsets 0..24.
        sealed (bytes): Carga sellada (tag Poly1305 + ciphertext) desde el offset 24.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    sealed: bytes

    @field_validator("nonce")
    @classmethod
    def _check_nonce_size(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"nonce must be {NONCE_SIZE} bytes")
        return value

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SecretboxBlob":
        """Separa un buffer en nonce y carga sellada.

        Args:
            raw (bytes): Buffer completo de al menos `NONCE_SIZE` bytes.

        Returns:
            SecretboxBlob: Blob con ambas regiones separadas.

        """

        return cls(nonce=raw[:NONCE_SIZE], sealed=raw[NONCE_SIZE:])

    def to_bytes(self) -> bytes:
        """Devuelve el buffer `nonce || sealed` listo para codificar."""

        return self.nonce + self.sealed
