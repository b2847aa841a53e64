# --------------------------------------------------------------
# File: codec.py
# Description: Codificación Base64 y hexadecimal para transportar bytes como texto.
# --------------------------------------------------------------
"""Conversión entre bytes y texto seguro para JSON, URLs o ficheros."""

import base64
import binascii
from typing import Union

from gcm_cryptor.errors import MalformedEncoding

__all__ = ["to_base64", "from_base64", "to_hex", "from_hex"]

BytesLike = Union[bytes, bytearray, memoryview]


def to_base64(data: BytesLike) -> str:
    """Codifica bytes en Base64 estándar con relleno.

    Args:
        data (BytesLike): Bloque binario a codificar.

    Returns:
        str: Texto ASCII en alfabeto Base64 estándar.

    """

    return base64.b64encode(bytes(data)).decode("ascii")


def from_base64(value: str) -> bytes:
    """Decodifica Base64 estándar de forma estricta.

    Args:
        value (str): Texto Base64 con relleno.

    Returns:
        bytes: Datos originales.

    Raises:
        MalformedEncoding: Si hay caracteres fuera del alfabeto, el relleno es
            incorrecto o el texto no es ASCII.

    """

    if not isinstance(value, str):
        raise MalformedEncoding("Base64 field must be text")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedEncoding("Invalid Base64 input") from exc


def to_hex(data: BytesLike) -> str:
    """Representa bytes como hexadecimal en minúsculas."""

    return bytes(data).hex()


def from_hex(value: str) -> bytes:
    """Decodifica texto hexadecimal, lanzando MalformedEncoding si no es válido."""

    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError) as exc:
        raise MalformedEncoding("Invalid hexadecimal input") from exc
