# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de la derivación de claves AES-128 con SHA-256.
# --------------------------------------------------------------

import base64
import hashlib
from types import SimpleNamespace

import pytest

from gcm_cryptor import (
    DerivationError,
    MalformedEncoding,
    crypto_kdf,
    derive_key,
    derive_key_b64,
)


def test_derivation_is_deterministic():
    """Mismo secreto y misma sal producen la misma clave.

    Returns:
        None: Las aserciones comparan ambas derivaciones.
    """
    assert derive_key("secretA", "1700000000") == derive_key("secretA", "1700000000")


def test_different_salt_changes_key():
    """Un cambio mínimo en la sal produce una clave distinta.

    Returns:
        None: Las claves deben diferir.
    """
    assert derive_key("secretA", "1700000000") != derive_key("secretA", "1700000001")


def test_key_is_sha256_prefix():
    """La clave son los 16 primeros bytes de SHA-256(secreto + sal).

    Returns:
        None: Se compara con hashlib directamente.
    """
    expected = hashlib.sha256("MySecretMasterKey1700000000000".encode("utf-8")).digest()[:16]
    key = derive_key("MySecretMasterKey", "1700000000000")
    assert key == expected
    assert len(key) == 16


def test_unicode_inputs_are_utf8_encoded():
    """Secreto y sal se codifican en UTF-8 antes del hash.

    Returns:
        None: Se compara con la codificación explícita.
    """
    expected = hashlib.sha256("clé€2024".encode("utf-8")).digest()[:16]
    assert derive_key("clé€", "2024") == expected


def test_base64_form_matches_raw_key():
    """La forma Base64 decodifica a la clave binaria de 16 bytes.

    Returns:
        None: Se comprueba longitud y contenido.
    """
    b64_key = derive_key_b64("MySecretMasterKey", "1700000000000")
    assert len(b64_key) == 24
    assert base64.b64decode(b64_key) == derive_key("MySecretMasterKey", "1700000000000")


@pytest.mark.parametrize("secret,salt", [(None, "1"), ("s", None), (None, None)])
def test_missing_inputs_are_rejected(secret, salt):
    """Entradas ausentes no deben producir una clave silenciosamente.

    Args:
        secret (str | None): Secreto maestro.
        salt (str | None): Sal o timestamp.

    Returns:
        None: Se espera DerivationError.
    """
    with pytest.raises(DerivationError):
        derive_key(secret, salt)


def test_short_digest_is_rejected(monkeypatch):
    """Un resumen más corto de 16 bytes se rechaza con DerivationError.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para sustituir el hash.

    Returns:
        None: Se espera DerivationError.
    """

    class _ShortHash:
        def __init__(self, data):
            self.data = data

        def digest(self):
            return b"\x00" * 8

    monkeypatch.setattr(crypto_kdf, "hashlib", SimpleNamespace(sha256=_ShortHash))
    with pytest.raises(DerivationError):
        derive_key("secret", "salt")


def test_unencodable_inputs_raise_typed_error():
    """Un secreto con surrogates sueltos falla con MalformedEncoding.

    Returns:
        None: Se espera MalformedEncoding.
    """
    with pytest.raises(MalformedEncoding):
        derive_key("secret\ud800", "1700000000")
