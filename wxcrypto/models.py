# --------------------------------------------------------------
# File: models.py
# Description: Modelos de los documentos JSON descifrados de mini-programas.
# --------------------------------------------------------------
"""Modelos Pydantic para ``encryptedData`` de usuario y de teléfono."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Watermark(BaseModel):
    """Marca de agua que identifica la aplicación y el instante de cifrado.

    Attributes:
        appid (str): AppID del mini-programa que solicitó los datos.
        timestamp (int): Marca temporal Unix de la generación del payload.

    """

    model_config = ConfigDict(extra="allow")

    appid: str
    timestamp: int = 0


class UserData(BaseModel):
    """Perfil de usuario devuelto por ``getUserInfo``."""

    model_config = ConfigDict(extra="allow")

    openId: Optional[str] = None
    nickName: Optional[str] = None
    gender: Optional[int] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    avatarUrl: Optional[str] = None
    unionId: Optional[str] = None
    watermark: Watermark


class PhoneNumberData(BaseModel):
    """Número de teléfono devuelto por ``getPhoneNumber``."""

    model_config = ConfigDict(extra="allow")

    phoneNumber: str
    purePhoneNumber: str
    countryCode: str
    watermark: Watermark
