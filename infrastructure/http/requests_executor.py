# infrastructure/http/requests_executor.py
from __future__ import annotations

import sys
from typing import List, Optional, TextIO, Tuple

import requests

from application.ports.api_executor import ApiExecutorPort
from domain.credentials import Credentials
from domain.exceptions import AuthError, RemoteAPIError, TransportError
from domain.request import RequestDescriptor
from infrastructure.url.base_url_resolver import BaseUrlResolver

VERSION_HEADER = "Stripe-Version"

# methods whose params travel in the query string
_QUERY_METHODS = {"GET", "DELETE"}


def split_param(param: str) -> Tuple[str, str]:
    key, _sep, value = param.partition("=")
    return key, value


class RequestsApiExecutor(ApiExecutorPort):
    def __init__(
        self,
        timeout_sec: int = 30,
        session: Optional[requests.Session] = None,
        out: Optional[TextIO] = None,
    ):
        self._session = session or requests.Session()
        self._timeout = timeout_sec
        self._out = out

    def execute(
        self,
        credentials: Credentials,
        path: str,
        descriptor: RequestDescriptor,
        suppress_output: bool = False,
    ) -> bytes:
        url = BaseUrlResolver(credentials.api_base_url).resolve_url(path)
        method = descriptor.method.upper()

        headers = {"Authorization": f"Bearer {credentials.api_key}"}
        if descriptor.version:
            headers[VERSION_HEADER] = descriptor.version

        # list[tuple] keeps order and repeated keys like "line_items[][name]"
        pairs: List[Tuple[str, str]] = [split_param(p) for p in descriptor.params]
        if method in _QUERY_METHODS:
            payload = {"params": pairs or None}
        else:
            payload = {"data": pairs or None}

        try:
            resp = self._session.request(
                method=method,
                url=url,
                headers=headers,
                timeout=self._timeout,
                **payload,
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if resp.status_code == 401:
            raise AuthError(
                f"Authorization failed, status={resp.status_code}, body={resp.text}"
            )
        if not 200 <= resp.status_code < 300:
            raise RemoteAPIError(status=resp.status_code, body=resp.text)

        if not suppress_output:
            print(resp.text, file=self._out or sys.stdout)

        return resp.content
