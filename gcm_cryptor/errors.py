# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores tipados de la capa criptográfica.
# --------------------------------------------------------------
"""Excepciones que la librería propaga al llamador en cada fallo."""

__all__ = [
    "CryptorError",
    "InvalidKeyLength",
    "EntropyUnavailable",
    "MalformedEncoding",
    "InvalidUtf8",
    "AuthenticationFailed",
    "DerivationError",
]


class CryptorError(Exception):
    """Error base de todas las operaciones de gcm_cryptor."""


class InvalidKeyLength(CryptorError):
    """La longitud de la clave no es 16, 24 ni 32 bytes."""


class EntropyUnavailable(CryptorError):
    """La fuente aleatoria del sistema operativo no está disponible."""


class MalformedEncoding(CryptorError):
    """Un campo Base64, hexadecimal o UTF-8 no se ha podido decodificar."""


class InvalidUtf8(MalformedEncoding):
    """El texto en claro autenticado no es UTF-8 válido."""


class AuthenticationFailed(CryptorError):
    """La verificación del tag GCM ha fallado.

    Cubre ciphertext alterado, clave errónea, nonce erróneo o tag
    manipulado. El mensaje es siempre el mismo para no revelar la causa.
    """

    MESSAGE = "Decryption failed: invalid authentication tag"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class DerivationError(CryptorError):
    """No se ha podido derivar una clave válida."""
