# --------------------------------------------------------------
# File: config.py
# Description: Configuración de la aplicación WeChat y URL de autorización.
# --------------------------------------------------------------
"""Credenciales de la aplicación cargadas explícitamente o desde el entorno."""

import os
from typing import Optional
from urllib.parse import urlencode

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

URL_SNS_AUTH_CODE = "https://open.weixin.qq.com/connect/qrconnect"


class Config(BaseModel):
    """Credenciales OAuth de una aplicación de WeChat Open Platform.

    Attributes:
        client_id (str): AppID de la aplicación.
        client_secret (str): AppSecret de la aplicación.
        redirect_url (str): URL a la que WeChat redirige tras autorizar.
        timeout (float): Timeout en segundos de cada petición HTTP.

    """

    client_id: str
    client_secret: str
    redirect_url: str = ""
    timeout: float = 10.0

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """Construye la configuración a partir de variables de entorno.

        Lee ``WECHAT_APP_ID``, ``WECHAT_APP_SECRET``, ``WECHAT_REDIRECT_URL`` y
        ``WECHAT_HTTP_TIMEOUT``, cargando antes el fichero ``.env`` si existe
        (por defecto se busca desde el directorio de trabajo actual hacia arriba).

        Args:
            dotenv_path (Optional[str]): Ruta alternativa del fichero ``.env``.

        Returns:
            Config: Configuración lista para construir un ``Client``.

        Raises:
            ValueError: Si faltan el AppID o el AppSecret.

        """

        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        client_id = os.getenv("WECHAT_APP_ID", "")
        client_secret = os.getenv("WECHAT_APP_SECRET", "")
        if not client_id or not client_secret:
            raise ValueError("WECHAT_APP_ID y WECHAT_APP_SECRET son obligatorios.")
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            redirect_url=os.getenv("WECHAT_REDIRECT_URL", ""),
            timeout=float(os.getenv("WECHAT_HTTP_TIMEOUT", "10")),
        )

    def auth_code_url(self, state: str) -> str:
        """Genera la URL de inicio de sesión por código QR.

        Args:
            state (str): Valor opaco devuelto tal cual en la redirección; se omite si está vacío.

        Returns:
            str: URL de ``qrconnect`` con la query ordenada por clave.

        """

        params = {
            "appid": self.client_id,
            "response_type": "code",
            "scope": "snsapi_login",
        }
        if self.redirect_url:
            params["redirect_uri"] = self.redirect_url
        if state:
            params["state"] = state
        sep = "&" if "?" in URL_SNS_AUTH_CODE else "?"
        return URL_SNS_AUTH_CODE + sep + urlencode(sorted(params.items()))
