# --------------------------------------------------------------
# File: services.py
# Description: Servicios de validación y descifrado de datos de mini-programas.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que combinan firma, descifrado y JSON."""

import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from wxcrypto.crypto_sign import verify_signature
from wxcrypto.crypto_sym import decrypt
from wxcrypto.errors import (
    CryptoError,
    PayloadFormatError,
    SignatureMismatchError,
    WatermarkMismatchError,
)
from wxcrypto.models import PhoneNumberData, UserData

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def decrypt_user_data(
    session_key: str,
    encrypted_data: str,
    iv: str,
    *,
    raw_data: Optional[str] = None,
    signature: Optional[str] = None,
    appid: Optional[str] = None,
) -> Dict[str, Any]:
    """Verifica y descifra un ``encryptedData`` devolviendo el JSON resultante.

    Args:
        session_key (str): Clave de sesión Base64 obtenida con ``jscode2session``.
        encrypted_data (str): Datos cifrados en Base64.
        iv (str): Vector de inicialización en Base64.
        raw_data (Optional[str]): ``rawData`` a verificar antes de descifrar.
        signature (Optional[str]): Firma SHA-1 de ``raw_data``.
        appid (Optional[str]): AppID esperado en ``watermark.appid``.

    Returns:
        Dict[str, Any]: Documento descifrado.

    Raises:
        SignatureMismatchError: Si la firma no coincide.
        PayloadFormatError: Si el texto descifrado no es JSON UTF-8.
        WatermarkMismatchError: Si la marca de agua pertenece a otra aplicación.
        CryptoError: Cualquier otro fallo de decodificación o descifrado.

    """

    if raw_data is not None or signature is not None:
        if not verify_signature(session_key, raw_data or "", signature or ""):
            logger.warning("Firma de rawData no válida")
            raise SignatureMismatchError("rawData signature mismatch")

    try:
        plaintext = decrypt(session_key, encrypted_data, iv)
    except CryptoError as exc:
        logger.warning("No se pudo descifrar encryptedData: %s", exc)
        raise

    try:
        payload = json.loads(plaintext.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("encryptedData descifrado no es JSON válido")
        raise PayloadFormatError("decrypted payload is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise PayloadFormatError("decrypted payload is not a JSON object")

    if appid is not None:
        watermark = payload.get("watermark") or {}
        if not isinstance(watermark, dict) or watermark.get("appid") != appid:
            logger.warning("watermark.appid no coincide con %s", appid)
            raise WatermarkMismatchError("watermark appid mismatch")
    return payload


def _to_model(model: Type[M], payload: Dict[str, Any]) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("encryptedData descifrado no encaja con %s", model.__name__)
        raise PayloadFormatError(f"decrypted payload is not a valid {model.__name__}") from exc


def decrypt_user_info(session_key: str, encrypted_data: str, iv: str, **kwargs: Any) -> UserData:
    """Descifra los datos de ``getUserInfo`` como ``UserData``."""

    return _to_model(UserData, decrypt_user_data(session_key, encrypted_data, iv, **kwargs))


def decrypt_phone_number(session_key: str, encrypted_data: str, iv: str, **kwargs: Any) -> PhoneNumberData:
    """Descifra los datos de ``getPhoneNumber`` como ``PhoneNumberData``."""

    return _to_model(PhoneNumberData, decrypt_user_data(session_key, encrypted_data, iv, **kwargs))
