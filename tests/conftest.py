# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para claves y sobres AES-GCM de prueba.
# --------------------------------------------------------------

import os

import pytest

from gcm_cryptor import CryptoDto, derive_key, encrypt

MASTER_KEY = "MySecretMasterKey"
TIMESTAMP = "1700000000000"
MESSAGE = '{"message":"Hello World"}'


@pytest.fixture
def key() -> bytes:
    """Clave AES-128 derivada del escenario de referencia.

    Returns:
        bytes: Clave de 16 bytes.
    """
    return derive_key(MASTER_KEY, TIMESTAMP)


@pytest.fixture
def random_key() -> bytes:
    """Clave AES-128 aleatoria e independiente de `key`.

    Returns:
        bytes: Clave de 16 bytes.
    """
    return os.urandom(16)


@pytest.fixture
def envelope(key) -> CryptoDto:
    """Sobre cifrado del mensaje de referencia con la clave derivada.

    Args:
        key (bytes): Fixture con la clave derivada.

    Returns:
        CryptoDto: Sobre `payload`/`nonce`/`tag` en Base64.
    """
    return encrypt(MESSAGE, key)
