# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from pydantic import BaseModel, ConfigDict

from gcm_cryptor.codec import to_base64


class CryptoDto(BaseModel):
    """Sobre resultante de un cifrado AES-GCM, listo para transportar.

    Los tres campos viajan por separado y el llamador debe reunirlos para
    descifrar. No existe un formato combinado.

    Attributes:
        payload (str): Ciphertext sin etiqueta, en Base64.
        nonce (str): Nonce de 96 bits usado en el cifrado, en Base64.
        tag (str): Etiqueta de autenticación de 128 bits, en Base64.

    """

    model_config = ConfigDict(frozen=True)

    payload: str
    nonce: str
    tag: str

    @classmethod
    def from_bytes(cls, ciphertext: bytes, nonce: bytes, tag: bytes) -> "CryptoDto":
        """Construye el sobre codificando cada campo en Base64."""

        return cls(
            payload=to_base64(ciphertext),
            nonce=to_base64(nonce),
            tag=to_base64(tag),
        )
