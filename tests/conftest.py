# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: fuentes aleatorias deterministas y entorno aislado.
# --------------------------------------------------------------

import base64
import importlib
from typing import Callable, Iterator

import pytest


@pytest.fixture
def zero_key() -> str:
    """Clave Base64 de 32 bytes a cero usada en escenarios concretos.

    Returns:
        str: Clave codificada en Base64 estándar.
    """
    return base64.b64encode(bytes(32)).decode("ascii")


@pytest.fixture
def counting_random() -> Callable[[int], bytes]:
    """Fuente aleatoria determinista que devuelve bytes crecientes en cada llamada.

    Returns:
        Callable[[int], bytes]: Callable compatible con `os.urandom`.
    """
    state = {"calls": 0}

    def _source(size: int) -> bytes:
        state["calls"] += 1
        return bytes([state["calls"] % 256]) * size

    return _source


@pytest.fixture
def reload_config(monkeypatch) -> Iterator[Callable[..., object]]:
    """Recarga `cryptohelper.config` con las variables de entorno indicadas.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[Callable[..., object]]: Función que aplica el entorno y recarga.
    """
    import cryptohelper.config as config_module

    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)

    def _reload(**env: str):
        for name in ("CRYPTOHELPER_KEY", "CRYPTOHELPER_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config_module)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config_module)
