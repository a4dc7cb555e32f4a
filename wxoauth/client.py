# --------------------------------------------------------------
# File: client.py
# Description: Cliente HTTP para los endpoints OAuth y de mini-programas de WeChat.
# --------------------------------------------------------------
"""Operaciones remotas contra ``api.weixin.qq.com``."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from wxoauth.config import Config
from wxoauth.errcode import ErrCode
from wxoauth.models import Code2Session, ErrResponse, Token, UserInfo

logger = logging.getLogger(__name__)

HOST = "https://api.weixin.qq.com"
URL_SNS_ACCESS_TOKEN = HOST + "/sns/oauth2/access_token"
URL_SNS_REFRESH_TOKEN = HOST + "/sns/oauth2/refresh_token"
URL_SNS_AUTH = HOST + "/sns/auth"
URL_SNS_USER_INFO = HOST + "/sns/userinfo"
URL_MINI_PROGRAM_CODE2SESSION = HOST + "/sns/jscode2session"

M = TypeVar("M", bound=BaseModel)


class Client:
    """Cliente sin estado compartido para una aplicación de WeChat.

    Cada instancia posee su propio ``httpx.Client`` salvo que se inyecte uno;
    en ese caso el llamante conserva la responsabilidad de cerrarlo.
    """

    def __init__(self, config: Config, http_client: Optional[httpx.Client] = None) -> None:
        self.config = config
        self._owns_http = http_client is None
        self.http = http_client or httpx.Client(timeout=config.timeout)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get(self, url: str, params: Dict[str, str]) -> Dict[str, Any]:
        """Ejecuta un GET y devuelve el cuerpo JSON validando estado y ``errcode``.

        Args:
            url (str): Endpoint absoluto.
            params (Dict[str, str]): Parámetros de la query.

        Returns:
            Dict[str, Any]: Cuerpo de la respuesta decodificado.

        Raises:
            httpx.HTTPError: Si falla el transporte.
            ErrCode: Si el estado no es 2xx o la API devuelve un ``errcode`` distinto de cero.

        """

        logger.debug("GET %s", url)
        resp = self.http.get(url, params=params)
        if not 200 <= resp.status_code <= 299:
            logger.warning("WeChat %s respondió HTTP %d", url, resp.status_code)
            raise ErrCode(status=resp.status_code)
        data = resp.json()
        if isinstance(data, dict) and "errcode" in data:
            err = ErrResponse.model_validate(data)
            if err.errcode != 0:
                logger.warning("WeChat %s errcode=%d errmsg=%s", url, err.errcode, err.errmsg)
                raise ErrCode(status=resp.status_code, code=err.errcode, msg=err.errmsg)
        return data

    def _get_model(self, model: Type[M], url: str, params: Dict[str, str]) -> M:
        return model.model_validate(self._get(url, params))

    def exchange(self, code: str) -> Token:
        """Canjea el ``code`` de autorización por un ``Token``."""

        return self._get_model(
            Token,
            URL_SNS_ACCESS_TOKEN,
            {
                "appid": self.config.client_id,
                "secret": self.config.client_secret,
                "grant_type": "authorization_code",
                "code": code,
            },
        )

    def refresh_token(self, refresh_token: str) -> Token:
        """Renueva ``access_token`` a partir de un ``refresh_token`` vigente."""

        return self._get_model(
            Token,
            URL_SNS_REFRESH_TOKEN,
            {
                "appid": self.config.client_id,
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            },
        )

    def verify_auth_token(self, access_token: str) -> None:
        """Comprueba que ``access_token`` siga siendo válido.

        Raises:
            ErrCode: Si la API lo rechaza.

        """

        self._get(
            URL_SNS_AUTH,
            {"appid": self.config.client_id, "access_token": access_token},
        )

    def get_user_info(self, access_token: str, openid: str) -> UserInfo:
        # lang por defecto: zh_CN
        return self._get_model(
            UserInfo,
            URL_SNS_USER_INFO,
            {"access_token": access_token, "openid": openid},
        )

    def mini_program_code2session(self, code: str) -> Code2Session:
        """Canjea el ``code`` de ``wx.login`` por ``openid`` y ``session_key``.

        Args:
            code (str): Código temporal obtenido en el mini-programa.

        Returns:
            Code2Session: Identificadores del usuario y clave de sesión.

        """

        return self._get_model(
            Code2Session,
            URL_MINI_PROGRAM_CODE2SESSION,
            {
                "appid": self.config.client_id,
                "secret": self.config.client_secret,
                "js_code": code,
                "grant_type": "authorization_code",
            },
        )
