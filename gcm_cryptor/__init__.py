# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete gcm_cryptor.
# --------------------------------------------------------------
"""Cifrado autenticado AES-GCM con derivación de claves, checksums y Base64."""

from gcm_cryptor.checksum import checksum, verify_checksum
from gcm_cryptor.codec import from_base64, from_hex, to_base64, to_hex
from gcm_cryptor.crypto_kdf import derive_key, derive_key_b64
from gcm_cryptor.crypto_sym import (
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
    decrypt,
    decrypt_envelope,
    encrypt,
    resolve_key,
)
from gcm_cryptor.errors import (
    AuthenticationFailed,
    CryptorError,
    DerivationError,
    EntropyUnavailable,
    InvalidKeyLength,
    InvalidUtf8,
    MalformedEncoding,
)
from gcm_cryptor.logger import configure_logging
from gcm_cryptor.models import CryptoDto
from gcm_cryptor.random_source import random_bytes

__version__ = "0.1.0"

__all__ = [
    "AuthenticationFailed",
    "CryptoDto",
    "CryptorError",
    "DerivationError",
    "EntropyUnavailable",
    "InvalidKeyLength",
    "InvalidUtf8",
    "MalformedEncoding",
    "aes_gcm_decrypt_with_key",
    "aes_gcm_encrypt_with_key",
    "checksum",
    "configure_logging",
    "decrypt",
    "decrypt_envelope",
    "derive_key",
    "derive_key_b64",
    "encrypt",
    "from_base64",
    "from_hex",
    "random_bytes",
    "resolve_key",
    "to_base64",
    "to_hex",
    "verify_checksum",
]
