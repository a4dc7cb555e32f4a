# --------------------------------------------------------------
# File: test_client.py
# Description: Pruebas del cliente HTTP con un transporte simulado.
# --------------------------------------------------------------

import json

import httpx
import pytest

from wxoauth.client import Client
from wxoauth.errcode import ErrCode
from wxoauth.models import Code2Session, Token, UserInfo

TOKEN_BODY = {
    "access_token": "ACCESS",
    "expires_in": 7200,
    "refresh_token": "REFRESH",
    "openid": "OPENID",
    "scope": "snsapi_login",
}


def test_exchange_ok(make_client):
    """Comprueba el canje del código y los parámetros enviados.

    Returns:
        None: Las aserciones validan el token y la query.
    """
    client = make_client(TOKEN_BODY)
    token = client.exchange("CODE")
    assert isinstance(token, Token)
    assert token.access_token == "ACCESS"
    assert token.expires_in == 7200

    request = client.requests[0]
    assert request.url.path == "/sns/oauth2/access_token"
    assert dict(request.url.params) == {
        "appid": "wx-app",
        "secret": "s3cret",
        "grant_type": "authorization_code",
        "code": "CODE",
    }


def test_refresh_token_does_not_send_secret(make_client):
    client = make_client(TOKEN_BODY)
    token = client.refresh_token("REFRESH")
    assert token.refresh_token == "REFRESH"
    params = dict(client.requests[0].url.params)
    assert params == {"appid": "wx-app", "grant_type": "refresh_token", "refresh_token": "REFRESH"}
    assert client.requests[0].url.path == "/sns/oauth2/refresh_token"


def test_verify_auth_token_ok(make_client):
    client = make_client({"errcode": 0, "errmsg": "ok"})
    assert client.verify_auth_token("ACCESS") is None
    assert client.requests[0].url.path == "/sns/auth"


def test_verify_auth_token_rejected(make_client):
    client = make_client({"errcode": 40003, "errmsg": "invalid openid"})
    with pytest.raises(ErrCode) as info:
        client.verify_auth_token("ACCESS")
    assert info.value.status == 200
    assert info.value.code == 40003
    assert info.value.msg == "invalid openid"


def test_get_user_info(make_client):
    body = {
        "openid": "OPENID",
        "nickname": "NICK",
        "sex": 1,
        "province": "P",
        "city": "C",
        "country": "CN",
        "headimgurl": "https://thirdwx.qlogo.cn/x/0",
        "privilege": ["PRIVILEGE1", "PRIVILEGE2"],
        "unionid": "UNION",
    }
    client = make_client(body)
    info = client.get_user_info("ACCESS", "OPENID")
    assert isinstance(info, UserInfo)
    assert info.nickname == "NICK"
    assert info.privilege == ["PRIVILEGE1", "PRIVILEGE2"]
    assert dict(client.requests[0].url.params) == {"access_token": "ACCESS", "openid": "OPENID"}


def test_mini_program_code2session(make_client):
    client = make_client({"openid": "OPENID", "session_key": "S0tFWQ==", "unionid": "UNION"})
    session = client.mini_program_code2session("JSCODE")
    assert isinstance(session, Code2Session)
    assert session.session_key == "S0tFWQ=="
    params = dict(client.requests[0].url.params)
    assert params["js_code"] == "JSCODE"
    assert params["grant_type"] == "authorization_code"
    assert client.requests[0].url.path == "/sns/jscode2session"


def test_code2session_without_unionid(make_client):
    session = make_client({"openid": "O", "session_key": "K"}).mini_program_code2session("c")
    assert session.unionid == ""


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.exchange("CODE"),
        lambda c: c.refresh_token("R"),
        lambda c: c.get_user_info("A", "O"),
        lambda c: c.mini_program_code2session("J"),
    ],
)
def test_provider_errcode_raises(make_client, call):
    """Garantiza que un ``errcode`` distinto de cero se convierta en ErrCode.

    Returns:
        None: Se espera la excepción con el código del proveedor.
    """
    client = make_client({"errcode": 40029, "errmsg": "invalid code"})
    with pytest.raises(ErrCode) as info:
        call(client)
    assert info.value.code == 40029
    assert str(info.value) == "status: 200, code: 40029, msg: invalid code"


def test_non_2xx_status_raises(make_client):
    client = make_client("upstream down", status=503)
    with pytest.raises(ErrCode) as info:
        client.exchange("CODE")
    assert info.value.status == 503
    assert info.value.code == 0
    assert str(info.value) == "status: 503, msg: Service Unavailable"


def test_invalid_json_raises_value_error(make_client):
    client = make_client("<html>not json</html>")
    with pytest.raises(ValueError):
        client.exchange("CODE")


def test_transport_error_propagates(config):
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    client = Client(config, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(httpx.ConnectError):
        client.exchange("CODE")


def test_close_leaves_injected_client_open(config):
    http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, content=json.dumps(TOKEN_BODY))))
    with Client(config, http_client=http) as client:
        client.exchange("CODE")
    assert not http.is_closed
    http.close()


def test_owned_client_is_closed(config):
    client = Client(config)
    client.close()
    assert client.http.is_closed


def test_user_info_null_privilege(make_client):
    info = make_client({"openid": "OPENID", "privilege": None}).get_user_info("A", "OPENID")
    assert info.privilege == []
