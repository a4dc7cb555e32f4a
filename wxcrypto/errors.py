# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores del núcleo criptográfico de mini-programas.
# --------------------------------------------------------------
"""Excepciones lanzadas por la verificación y el descifrado de payloads."""


class CryptoError(ValueError):
    """Error base de todas las operaciones de ``wxcrypto``."""


class DecodingError(CryptoError):
    """Alguna de las entradas Base64 está mal formada."""


class InvalidKeySizeError(CryptoError):
    """La clave decodificada no tiene un tamaño válido para AES (16/24/32)."""


class InvalidIvSizeError(CryptoError):
    """El IV decodificado no mide exactamente un bloque AES."""

    def __init__(self, size: int) -> None:
        super().__init__(f"iv length must equal block size, got {size} bytes")
        self.size = size


class InvalidCiphertextLengthError(CryptoError):
    """El ciphertext no es múltiplo del tamaño de bloque."""


class UnpaddingOutOfRangeError(CryptoError):
    """El búfer descifrado está vacío o declara más relleno del que contiene."""


class SignatureMismatchError(CryptoError):
    """La firma SHA-1 del ``rawData`` no coincide."""


class PayloadFormatError(CryptoError):
    """El texto descifrado no es un documento JSON UTF-8 válido."""


class WatermarkMismatchError(CryptoError):
    """El ``watermark.appid`` del payload no pertenece a la aplicación."""
