# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-CBC para los payloads cifrados de mini-programas.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para ``encryptedData`` de mini-programas."""

import base64
import binascii

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from wxcrypto.errors import (
    DecodingError,
    InvalidCiphertextLengthError,
    InvalidIvSizeError,
    InvalidKeySizeError,
    UnpaddingOutOfRangeError,
)

BLOCK_SIZE = algorithms.AES.block_size // 8
KEY_SIZES = (16, 24, 32)


def _b64d(value: str, field: str) -> bytes:
    """Decodifica Base64 estándar con relleno obligatorio; ignora los saltos de línea."""

    try:
        return base64.b64decode(value.replace("\r", "").replace("\n", ""), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError(f"{field}: invalid base64 input") from exc


def _aes(key: bytes) -> algorithms.AES:
    if len(key) not in KEY_SIZES:
        raise InvalidKeySizeError(f"invalid AES key size: {len(key)} bytes")
    return algorithms.AES(key)


def remove_padding(data: bytes) -> bytes:
    """Elimina el relleno indicado por el último byte del búfer.

    Solo se comprueba que la longitud declarada quepa en el búfer; el valor de
    los bytes de relleno no se valida. Un último byte ``0`` no elimina nada.

    Args:
        data (bytes): Texto descifrado con relleno.

    Returns:
        bytes: Datos sin los ``data[-1]`` bytes finales.

    Raises:
        UnpaddingOutOfRangeError: Si ``data`` está vacío o el relleno excede su longitud.

    """

    length = len(data)
    if length == 0:
        raise UnpaddingOutOfRangeError("unpadding out of range: empty buffer")
    pad = data[-1]
    if pad > length:
        raise UnpaddingOutOfRangeError(
            f"unpadding out of range: pad {pad} exceeds {length} bytes"
        )
    return bytes(data[: length - pad])


def add_padding(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Aplica relleno PKCS#7 completando hasta un múltiplo de ``block_size``."""

    padder = padding.PKCS7(block_size * 8).padder()
    return padder.update(data) + padder.finalize()


def aes_cbc_encrypt_with_key(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """Rellena y cifra datos con AES-CBC usando la clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        iv (bytes): Vector de inicialización de 16 bytes.
        plaintext (bytes): Datos en claro a cifrar.

    Returns:
        bytes: Ciphertext sin codificar.

    """

    aes = _aes(key)
    if len(iv) != BLOCK_SIZE:
        raise InvalidIvSizeError(len(iv))
    encryptor = Cipher(aes, modes.CBC(iv)).encryptor()
    return encryptor.update(add_padding(plaintext)) + encryptor.finalize()


def aes_cbc_decrypt_with_key(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra con AES-CBC y elimina el relleno con :func:`remove_padding`.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        iv (bytes): Vector de inicialización de 16 bytes.
        ciphertext (bytes): Datos cifrados, múltiplo del tamaño de bloque.

    Returns:
        bytes: Mensaje original en claro.

    """

    aes = _aes(key)
    if len(iv) != BLOCK_SIZE:
        raise InvalidIvSizeError(len(iv))
    if len(ciphertext) % BLOCK_SIZE:
        raise InvalidCiphertextLengthError(
            f"ciphertext length {len(ciphertext)} is not a multiple of {BLOCK_SIZE}"
        )
    decryptor = Cipher(aes, modes.CBC(iv)).decryptor()
    return remove_padding(decryptor.update(ciphertext) + decryptor.finalize())


def decrypt(session_key: str, encrypted_data: str, iv: str) -> bytes:
    """Descifra un ``encryptedData`` de mini-programa.

    Las tres entradas son Base64 estándar (RFC 4648, con relleno) tal como las
    entrega el SDK del cliente. Se decodifican todas antes de construir el cifrador.

    Args:
        session_key (str): Clave de sesión en Base64.
        encrypted_data (str): Ciphertext en Base64.
        iv (str): Vector de inicialización en Base64.

    Returns:
        bytes: Texto en claro, normalmente un documento JSON.

    Raises:
        DecodingError: Si alguna entrada no es Base64 válido.
        InvalidKeySizeError: Si la clave no mide 16, 24 o 32 bytes.
        InvalidIvSizeError: Si el IV no mide 16 bytes.
        InvalidCiphertextLengthError: Si el ciphertext no ocupa bloques completos.
        UnpaddingOutOfRangeError: Si el relleno descifrado es imposible.

    """

    key = _b64d(session_key, "session_key")
    ciphertext = _b64d(encrypted_data, "encrypted_data")
    iv_bytes = _b64d(iv, "iv")
    return aes_cbc_decrypt_with_key(key, iv_bytes, ciphertext)


def encrypt(session_key: str, plaintext: bytes, iv: str) -> str:
    """Operación inversa de :func:`decrypt`; devuelve el ciphertext en Base64."""

    key = _b64d(session_key, "session_key")
    iv_bytes = _b64d(iv, "iv")
    ciphertext = aes_cbc_encrypt_with_key(key, iv_bytes, plaintext)
    return base64.b64encode(ciphertext).decode("ascii")
