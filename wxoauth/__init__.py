# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del cliente OAuth de WeChat.
# --------------------------------------------------------------
"""Cliente para WeChat Open Platform y mini-programas."""

from wxoauth.client import Client
from wxoauth.config import Config
from wxoauth.errcode import ErrCode
from wxoauth.models import Code2Session, Token, UserInfo

__all__ = [
    "Client",
    "Code2Session",
    "Config",
    "ErrCode",
    "Token",
    "UserInfo",
]
