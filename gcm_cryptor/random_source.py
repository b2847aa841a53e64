# --------------------------------------------------------------
# File: random_source.py
# Description: Generación de bytes aleatorios criptográficamente seguros.
# --------------------------------------------------------------
"""Fuente de nonces respaldada por el CSPRNG del sistema operativo."""

import os

from gcm_cryptor.errors import EntropyUnavailable
from gcm_cryptor.logger import get_logger

__all__ = ["random_bytes"]

logger = get_logger(__name__)


def random_bytes(length: int) -> bytes:
    """Obtiene `length` bytes impredecibles del sistema operativo.

    `os.urandom` se alimenta del generador del kernel, que no requiere
    sembrado explícito y es seguro entre hilos.

    Args:
        length (int): Número de bytes solicitados.

    Returns:
        bytes: Secuencia aleatoria independiente en cada llamada.

    Raises:
        ValueError: Si `length` es negativo.
        EntropyUnavailable: Si el sistema no ofrece una fuente segura.

    """

    if length < 0:
        raise ValueError("length must be non-negative")
    try:
        return os.urandom(length)
    except (NotImplementedError, OSError) as exc:
        logger.critical("Secure random source unavailable: %s", exc)
        raise EntropyUnavailable("Secure random source unavailable") from exc
