# --------------------------------------------------------------
# File: checksum.py
# Description: Resúmenes SHA-256 para verificación de integridad independiente.
# --------------------------------------------------------------
"""Checksums de datos en claro, ajenos al tag de AES-GCM."""

import hashlib
import hmac

from gcm_cryptor.codec import BytesLike

__all__ = ["checksum", "verify_checksum"]


def checksum(data: BytesLike) -> str:
    """Calcula el SHA-256 de `data` y lo devuelve en hexadecimal.

    Args:
        data (BytesLike): Bytes cuyo resumen se calculará.

    Returns:
        str: 64 caracteres hexadecimales en minúsculas.

    """

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("checksum expects a bytes-like object")
    return hashlib.sha256(data).hexdigest()


def verify_checksum(data: BytesLike, expected: str) -> bool:
    """Compara en tiempo constante el checksum de `data` con `expected`."""

    if not isinstance(expected, str):
        raise TypeError("expected checksum must be text")
    candidate = expected.strip().lower()
    # compare_digest solo admite str ASCII.
    if not candidate.isascii():
        return False
    return hmac.compare_digest(checksum(data), candidate)
