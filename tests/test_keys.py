# --------------------------------------------------------------
# File: test_keys.py
# Description: Pruebas de generación y decodificación de claves secretbox.
# --------------------------------------------------------------

import base64
import os

import pytest

from cryptohelper.errors import INVALID_KEY_MESSAGE, InvalidKey, RandomSourceFailure
from cryptohelper.keys import decode_key, encode_key, generate_key, read_random


def test_generate_key_decodes_to_32_bytes():
    """Comprueba que la clave generada sea Base64 estándar de 32 bytes.

    Returns:
        None: Las aserciones validan la longitud decodificada.
    """
    key = generate_key()
    assert len(base64.b64decode(key, validate=True)) == 32
    assert decode_key(key) == base64.b64decode(key)


def test_generate_key_never_repeats():
    """Verifica que no se genere dos veces la misma clave en la ejecución.

    Returns:
        None: Las aserciones comprueban la unicidad del muestreo.
    """
    keys = {generate_key() for _ in range(200)}
    assert len(keys) == 200


def test_generate_key_uses_injected_source():
    """Comprueba que generate_key use la fuente aleatoria inyectada.

    Returns:
        None: La clave decodificada debe coincidir con los bytes de la fuente.
    """
    key = generate_key(lambda size: b"\x07" * size)
    assert decode_key(key) == b"\x07" * 32


def _raise_os_error(size):
    raise OSError("no entropy")


def _raise_not_implemented(size):
    raise NotImplementedError()


def _short_source(size):
    return b"\x00" * (size - 1)


@pytest.mark.parametrize("source", [_raise_os_error, _raise_not_implemented, _short_source])
def test_generate_key_random_source_failure(source):
    """Comprueba que los fallos de la fuente aleatoria se propaguen tipados.

    Args:
        source (Callable[[int], bytes]): Fuente aleatoria defectuosa.

    Returns:
        None: Se espera RandomSourceFailure.
    """
    with pytest.raises(RandomSourceFailure):
        generate_key(source)


def test_read_random_chains_original_error():
    """Verifica que el error original de la fuente quede encadenado.

    Returns:
        None: Se espera RandomSourceFailure con `__cause__` OSError.
    """
    def _broken(size):
        raise OSError("getrandom failed")

    with pytest.raises(RandomSourceFailure) as info:
        read_random(_broken, 24)
    assert isinstance(info.value.__cause__, OSError)


@pytest.mark.parametrize(
    "text",
    [
        "",  # cadena vacía: 0 bytes
        "not base64!!",
        base64.b64encode(os.urandom(31)).decode(),
        base64.b64encode(os.urandom(33)).decode(),
        base64.b64encode(os.urandom(32)).decode().rstrip("="),  # sin relleno
        base64.urlsafe_b64encode(b"\xfb\xff" * 16).decode(),  # alfabeto URL-safe
        "ñ" * 44,  # caracteres no ASCII
    ],
)
def test_decode_key_rejects_invalid(text):
    """Garantiza que claves mal formadas o de longitud incorrecta se rechacen.

    Args:
        text (str): Clave candidata inválida.

    Returns:
        None: Se espera InvalidKey con el mensaje documentado.
    """
    with pytest.raises(InvalidKey, match=INVALID_KEY_MESSAGE):
        decode_key(text)


def test_encode_key_roundtrip_and_size_check():
    """Comprueba que encode_key invierta decode_key y valide la longitud.

    Returns:
        None: Se espera InvalidKey para claves de 16 bytes.
    """
    key = generate_key()
    assert encode_key(decode_key(key)) == key
    with pytest.raises(InvalidKey):
        encode_key(b"\x00" * 16)


def test_invalid_key_is_value_error():
    """Comprueba que InvalidKey pueda capturarse como ValueError.

    Returns:
        None: Se espera ValueError.
    """
    with pytest.raises(ValueError):
        decode_key("")


def test_decode_key_rejects_non_text():
    """Comprueba que un valor que no es texto se rechace como clave inválida.

    Returns:
        None: Se espera InvalidKey encadenando el TypeError original.
    """
    with pytest.raises(InvalidKey) as info:
        decode_key(None)
    assert isinstance(info.value.__cause__, TypeError)
