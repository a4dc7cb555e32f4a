# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el entorno y simular la API remota.
# --------------------------------------------------------------

import base64
import json
import os
from typing import Callable, Iterator, List

import httpx
import pytest

from wxoauth.client import Client
from wxoauth.config import Config


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables ``WECHAT_*`` heredadas del entorno del desarrollador.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ("WECHAT_APP_ID", "WECHAT_APP_SECRET", "WECHAT_REDIRECT_URL", "WECHAT_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def session_key() -> str:
    """Clave de sesión Base64 de 16 bytes aleatorios."""
    return base64.b64encode(os.urandom(16)).decode()


@pytest.fixture
def iv() -> str:
    """IV Base64 de 16 bytes aleatorios."""
    return base64.b64encode(os.urandom(16)).decode()


@pytest.fixture
def config() -> Config:
    return Config(client_id="wx-app", client_secret="s3cret", redirect_url="https://example.com/cb")


@pytest.fixture
def make_client(config) -> Callable[..., Client]:
    """Fabrica clientes cuyo transporte responde con un cuerpo fijo.

    Returns:
        Callable[..., Client]: Función ``(body, status=200) -> Client``; las
        peticiones recibidas quedan en ``client.requests``.
    """

    def _factory(body, status: int = 200) -> Client:
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            content = body if isinstance(body, (str, bytes)) else json.dumps(body)
            return httpx.Response(status, content=content)

        client = Client(config, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
        client.requests = requests
        return client

    return _factory
