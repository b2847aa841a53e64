# --------------------------------------------------------------
# File: test_checksum.py
# Description: Pruebas de los checksums SHA-256 independientes del tag GCM.
# --------------------------------------------------------------

import pytest

from gcm_cryptor import checksum, verify_checksum

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_checksum_known_vectors():
    """Comprueba los vectores conocidos de SHA-256.

    Returns:
        None: Las aserciones comparan con los resúmenes publicados.
    """
    assert checksum("abc".encode("utf-8")) == ABC_SHA256
    assert checksum(b"") == EMPTY_SHA256


def test_checksum_accepts_bytes_like():
    """bytearray y memoryview producen el mismo resumen que bytes.

    Returns:
        None: Los tres resultados deben coincidir.
    """
    assert checksum(bytearray(b"abc")) == checksum(memoryview(b"abc")) == ABC_SHA256


def test_checksum_is_lowercase_hex():
    """El resumen tiene 64 caracteres hexadecimales en minúsculas.

    Returns:
        None: Se valida formato y determinismo.
    """
    digest = checksum(b"Hello World")
    assert len(digest) == 64
    assert digest == digest.lower()
    assert digest == checksum(b"Hello World")


def test_checksum_rejects_text():
    """El checksum opera sobre bytes, no sobre texto.

    Returns:
        None: Se espera TypeError.
    """
    with pytest.raises(TypeError):
        checksum("abc")


def test_verify_checksum():
    """verify_checksum acepta el resumen correcto en cualquier caja.

    Returns:
        None: Se prueban casos positivos y negativos.
    """
    assert verify_checksum(b"abc", ABC_SHA256)
    assert verify_checksum(b"abc", ABC_SHA256.upper())
    assert not verify_checksum(b"abd", ABC_SHA256)
    assert not verify_checksum(b"abc", "ñ" * 64)


@pytest.mark.parametrize("expected", [None, 123, ABC_SHA256.encode("ascii")])
def test_verify_checksum_rejects_non_text(expected):
    """El resumen esperado debe ser texto hexadecimal.

    Args:
        expected (object): Valor no textual.

    Returns:
        None: Se espera TypeError en lugar de AttributeError.
    """
    with pytest.raises(TypeError):
        verify_checksum(b"abc", expected)
