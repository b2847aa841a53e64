# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado autenticado AES-GCM con nonce, tag y clave separados.

Todas las funciones son puras respecto a estado compartido: cada llamada
construye su propia instancia de `AESGCM` y extrae un nonce nuevo, por lo que
pueden usarse desde varios hilos sin bloqueo.
"""

from typing import Optional, Tuple, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from gcm_cryptor import config
from gcm_cryptor.codec import from_base64
from gcm_cryptor.errors import (
    AuthenticationFailed,
    InvalidKeyLength,
    InvalidUtf8,
    MalformedEncoding,
)
from gcm_cryptor.logger import get_logger
from gcm_cryptor.models import CryptoDto
from gcm_cryptor.random_source import random_bytes

__all__ = [
    "aes_gcm_encrypt_with_key",
    "aes_gcm_decrypt_with_key",
    "encrypt",
    "decrypt",
    "decrypt_envelope",
    "resolve_key",
]

KeyInput = Union[str, bytes, bytearray]
AadInput = Optional[Union[str, bytes]]

logger = get_logger(__name__)


def resolve_key(key: KeyInput, key_encoding: Optional[str] = None) -> bytes:
    """Convierte la clave recibida en los bytes que usará AES.

    Las claves binarias se usan tal cual. Para claves de texto:

    - `"raw"`: se toman los bytes UTF-8 del texto. Es el comportamiento
      compatible con los datos ya cifrados; la representación Base64 de una
      clave de 16 bytes ocupa 24 caracteres y funciona como clave AES-192.
    - `"base64"`: el texto se decodifica primero desde Base64.

    Args:
        key (KeyInput): Clave en bytes o en texto.
        key_encoding (Optional[str]): `"raw"` o `"base64"`; por defecto
            `GCM_KEY_ENCODING`.

    Returns:
        bytes: Material de clave sin validar su longitud.

    Raises:
        ValueError: Si `key_encoding` no es un modo conocido.
        MalformedEncoding: Si el modo es `"base64"` y el texto no lo es.

    """

    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    if not isinstance(key, str):
        raise TypeError("key must be str or bytes")

    mode = (key_encoding or config.KEY_ENCODING).lower()
    if mode not in config.KEY_ENCODINGS:
        raise ValueError(f"Unknown key encoding: {mode!r}")
    if mode == "base64":
        return from_base64(key)
    return _utf8(key, "key")


def _aes(key: bytes) -> AESGCM:
    """Inicializa AES-GCM o lanza InvalidKeyLength si la clave no es válida."""

    try:
        return AESGCM(key)
    except ValueError as exc:
        raise InvalidKeyLength(
            f"AES key must be 16, 24 or 32 bytes, got {len(key)}"
        ) from exc


def _utf8(text: str, field: str) -> bytes:
    """Codifica texto en UTF-8, lanzando MalformedEncoding si no es posible."""

    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedEncoding(f"{field} is not encodable as UTF-8") from exc


def _aad(aad: AadInput) -> Optional[bytes]:
    """Normaliza los datos asociados: texto en UTF-8, bytes tal cual, None vacío."""

    if aad is None:
        return None
    if isinstance(aad, str):
        return _utf8(aad, "aad")
    return bytes(aad)


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, aad: AadInput = None
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (AadInput): Datos autenticados adicionales; vacíos por defecto.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, nonce y tag.

    Raises:
        InvalidKeyLength: Si la clave no mide 16, 24 o 32 bytes. Se comprueba
            antes de consumir el nonce.

    """

    aes = _aes(key)
    nonce = random_bytes(config.NONCE_LENGTH)
    ct_full = aes.encrypt(nonce, plaintext, _aad(aad))
    ciphertext = ct_full[: -config.TAG_LENGTH]
    tag = ct_full[-config.TAG_LENGTH :]
    return ciphertext, nonce, tag


def aes_gcm_decrypt_with_key(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: AadInput = None
) -> bytes:
    """Descifra datos con AES-GCM utilizando la clave simétrica proporcionada.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        aad (AadInput): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        InvalidKeyLength: Si la clave no mide 16, 24 o 32 bytes.
        AuthenticationFailed: Si el tag no verifica, sea cual sea la causa.

    """

    aes = _aes(key)
    try:
        return aes.decrypt(nonce, ciphertext + tag, _aad(aad))
    except (InvalidTag, ValueError):
        # Un nonce de longitud no admitida se trata igual que un tag erróneo.
        logger.warning("AES-GCM authentication failed")
        raise AuthenticationFailed() from None


def encrypt(
    plaintext: str,
    key: KeyInput,
    *,
    aad: AadInput = None,
    key_encoding: Optional[str] = None,
) -> CryptoDto:
    """Cifra un texto y devuelve el sobre `payload`/`nonce`/`tag` en Base64.

    Args:
        plaintext (str): Mensaje a proteger, se cifra como UTF-8.
        key (KeyInput): Clave en bytes o texto (ver `resolve_key`).
        aad (AadInput): Contexto autenticado pero no cifrado.
        key_encoding (Optional[str]): Interpretación de claves de texto.

    Returns:
        CryptoDto: Sobre con los tres campos codificados por separado.

    Raises:
        MalformedEncoding: Si el texto, la clave o los datos asociados no se
            pueden codificar en UTF-8 (por ejemplo, surrogates sueltos).
        InvalidKeyLength: Si la clave no mide 16, 24 o 32 bytes.
        EntropyUnavailable: Si no hay fuente aleatoria para el nonce.

    """

    if not isinstance(plaintext, str):
        raise TypeError("plaintext must be str")
    key_bytes = resolve_key(key, key_encoding)
    data = _utf8(plaintext, "plaintext")
    ciphertext, nonce, tag = aes_gcm_encrypt_with_key(key_bytes, data, aad)
    logger.debug(
        "AES-GCM-%d encrypt: %d bytes, nonce=%d bits, tag=%d bits",
        len(key_bytes) * 8,
        len(data),
        len(nonce) * 8,
        len(tag) * 8,
    )
    return CryptoDto.from_bytes(ciphertext, nonce, tag)


def decrypt(
    payload: str,
    key: KeyInput,
    nonce: str,
    tag: str,
    *,
    aad: AadInput = None,
    key_encoding: Optional[str] = None,
) -> str:
    """Autentica y descifra un sobre producido por `encrypt`.

    Args:
        payload (str): Ciphertext en Base64.
        key (KeyInput): Misma clave usada al cifrar.
        nonce (str): Nonce en Base64.
        tag (str): Tag de autenticación en Base64.
        aad (AadInput): Mismo contexto autenticado usado al cifrar.
        key_encoding (Optional[str]): Interpretación de claves de texto.

    Returns:
        str: Texto original, solo si la autenticación ha tenido éxito.

    Raises:
        MalformedEncoding: Si algún campo no es Base64 válido.
        InvalidKeyLength: Si la clave no mide 16, 24 o 32 bytes.
        AuthenticationFailed: Si el sobre, la clave o el nonce no coinciden.
        InvalidUtf8: Si el contenido autenticado no es UTF-8.

    """

    ciphertext = from_base64(payload)
    nonce_bytes = from_base64(nonce)
    tag_bytes = from_base64(tag)
    key_bytes = resolve_key(key, key_encoding)
    data = aes_gcm_decrypt_with_key(key_bytes, nonce_bytes, ciphertext, tag_bytes, aad)
    try:
        plaintext = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8("Decrypted payload is not valid UTF-8") from exc
    logger.debug("AES-GCM-%d decrypt: %d bytes", len(key_bytes) * 8, len(data))
    return plaintext


def decrypt_envelope(
    envelope: CryptoDto,
    key: KeyInput,
    *,
    aad: AadInput = None,
    key_encoding: Optional[str] = None,
) -> str:
    """Atajo de `decrypt` que recibe el sobre completo."""

    return decrypt(
        envelope.payload,
        key,
        envelope.nonce,
        envelope.tag,
        aad=aad,
        key_encoding=key_encoding,
    )
