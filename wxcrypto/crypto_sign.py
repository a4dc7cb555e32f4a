# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Verificación de la firma SHA-1 de los datos de usuario.
# --------------------------------------------------------------
"""Comprobación de integridad del ``rawData`` enviado por el mini-programa."""

import hashlib


def sign_raw_data(session_key: str, raw_data: str) -> str:
    """Calcula la firma hexadecimal de ``raw_data`` con la clave de sesión.

    La clave de sesión se concatena tal cual, sin decodificar su Base64.

    Args:
        session_key (str): Clave de sesión entregada por ``jscode2session``.
        raw_data (str): Cadena JSON sin procesar recibida del cliente.

    Returns:
        str: Digest SHA-1 en hexadecimal en minúsculas.

    """

    return hashlib.sha1((raw_data + session_key).encode("utf-8")).hexdigest()


def verify_signature(session_key: str, raw_data: str, signature: str) -> bool:
    """Verifica que ``signature`` corresponda a ``raw_data`` + ``session_key``.

    Args:
        session_key (str): Clave de sesión en texto, tal como llega del proveedor.
        raw_data (str): Datos sin procesar cuya integridad se comprueba.
        signature (str): Firma hexadecimal en minúsculas enviada por el cliente.

    Returns:
        bool: ``True`` si la firma coincide; ``False`` en caso contrario.

    """

    return signature == sign_raw_data(session_key, raw_data)
