# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del núcleo criptográfico de mini-programas.
# --------------------------------------------------------------
"""Verificación y descifrado de payloads cifrados de mini-programas."""

from wxcrypto.crypto_sign import verify_signature
from wxcrypto.crypto_sym import decrypt, remove_padding
from wxcrypto.errors import (
    CryptoError,
    DecodingError,
    InvalidCiphertextLengthError,
    InvalidIvSizeError,
    InvalidKeySizeError,
    UnpaddingOutOfRangeError,
)

__all__ = [
    "CryptoError",
    "DecodingError",
    "InvalidCiphertextLengthError",
    "InvalidIvSizeError",
    "InvalidKeySizeError",
    "UnpaddingOutOfRangeError",
    "decrypt",
    "remove_padding",
    "verify_signature",
]
