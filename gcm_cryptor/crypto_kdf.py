# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves AES-128 a partir de un secreto y una sal.
# --------------------------------------------------------------
"""Funciones de derivación de claves simétricas mediante SHA-256."""

import hashlib
from typing import Optional

from gcm_cryptor.codec import to_base64
from gcm_cryptor.config import KEY_LENGTH
from gcm_cryptor.errors import DerivationError, MalformedEncoding

__all__ = ["derive_key", "derive_key_b64"]


def derive_key(master_secret: Optional[str], salt: Optional[str]) -> bytes:
    """Deriva una clave de 128 bits concatenando secreto y sal.

    La derivación es determinista: mismas entradas producen la misma clave.
    Es responsabilidad del llamador aportar una sal única (por ejemplo, un
    timestamp) para cada clave.

    Args:
        master_secret (Optional[str]): Secreto maestro, va en primer lugar.
        salt (Optional[str]): Sal o timestamp, concatenada sin separador.

    Returns:
        bytes: Los 16 primeros bytes de SHA-256(secreto + sal) en UTF-8.

    Raises:
        DerivationError: Si falta alguna entrada o el resumen es demasiado
            corto.
        MalformedEncoding: Si las entradas no se pueden codificar en UTF-8.

    """

    if master_secret is None or salt is None:
        raise DerivationError("Master secret and salt are required")

    try:
        material = f"{master_secret}{salt}".encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedEncoding("Master secret or salt is not encodable as UTF-8") from exc

    digest = hashlib.sha256(material).digest()
    if len(digest) < KEY_LENGTH:
        raise DerivationError("SHA-256 hash is unexpectedly short")
    return digest[:KEY_LENGTH]


def derive_key_b64(master_secret: Optional[str], salt: Optional[str]) -> str:
    """Igual que `derive_key`, pero devuelve la clave codificada en Base64."""

    return to_base64(derive_key(master_secret, salt))
