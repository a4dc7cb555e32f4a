# --------------------------------------------------------------
# File: models.py
# Description: Modelos de respuesta de la API de WeChat Open Platform.
# --------------------------------------------------------------
"""Modelos Pydantic para las respuestas JSON de los endpoints ``/sns``."""

from typing import List

from pydantic import BaseModel, ConfigDict, field_validator


class _Response(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Token(_Response):
    """Credenciales OAuth devueltas por ``access_token`` y ``refresh_token``.

    Attributes:
        access_token (str): Credencial de llamada a la API.
        expires_in (int): Vigencia en segundos.
        refresh_token (str): Token para renovar ``access_token``.
        openid (str): Identificador del usuario autorizado.
        scope (str): Ámbitos autorizados separados por comas.

    """

    access_token: str = ""
    expires_in: int = 0
    refresh_token: str = ""
    openid: str = ""
    scope: str = ""


class UserInfo(_Response):
    """Perfil público del usuario (``/sns/userinfo``).

    ``sex`` vale 1 para hombre y 2 para mujer; ``headimgurl`` queda vacío si el
    usuario no tiene avatar.
    """

    unionid: str = ""
    openid: str = ""
    nickname: str = ""
    sex: int = 0
    province: str = ""
    city: str = ""
    country: str = ""
    headimgurl: str = ""
    privilege: List[str] = []

    @field_validator("privilege", mode="before")
    @classmethod
    def _null_privilege(cls, value):
        return [] if value is None else value


class Code2Session(_Response):
    """Resultado de ``jscode2session`` para mini-programas."""

    openid: str = ""
    session_key: str = ""
    unionid: str = ""


class ErrResponse(_Response):
    errcode: int = 0
    errmsg: str = ""
