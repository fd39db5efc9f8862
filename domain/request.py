# domain/request.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    version: str
    params: Tuple[str, ...] = ()
