# --------------------------------------------------------------
# File: errcode.py
# Description: Error que envuelve estados HTTP y códigos de error del proveedor.
# --------------------------------------------------------------
"""Tipo ``ErrCode`` para fallos HTTP y respuestas ``errcode`` de WeChat."""

from http import HTTPStatus


def _status_text(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


class ErrCode(Exception):
    """Error remoto con estado HTTP y, opcionalmente, ``errcode``/``errmsg``.

    Attributes:
        status (int): Código de estado HTTP de la respuesta.
        code (int): ``errcode`` devuelto por la API; ``0`` si no hubo.
        msg (str): ``errmsg`` devuelto por la API.

    """

    def __init__(self, status: int, code: int = 0, msg: str = "") -> None:
        self.status = status
        self.code = code
        self.msg = msg
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.code == 0:
            return f"status: {self.status}, msg: {self.msg or _status_text(self.status)}"
        return f"status: {self.status}, code: {self.code}, msg: {self.msg}"

    def __repr__(self) -> str:
        return f"ErrCode(status={self.status!r}, code={self.code!r}, msg={self.msg!r})"
