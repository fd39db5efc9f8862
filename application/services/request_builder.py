# application/services/request_builder.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from domain.request import RequestDescriptor


@dataclass(frozen=True)
class RequestBuilder:
    api_version: str = ""

    def build(self, method: str, params: Iterable[str] = ()) -> RequestDescriptor:
        # params must already be "key=value" strings; nothing is escaped here
        return RequestDescriptor(
            method=method.upper(),
            version=self.api_version,
            params=tuple(params),
        )
