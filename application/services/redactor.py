# application/services/redactor.py
from __future__ import annotations

from typing import Any, Iterable, List

SENSITIVE_KEYS = {
    "authorization",
    "api_key",
    "card[number]",
    "card[cvc]",
}


def mask_value(key: str, value: Any) -> Any:
    if key.lower() in SENSITIVE_KEYS and value is not None:
        return "********"
    return value


def mask_params(params: Iterable[str]) -> List[str]:
    out: List[str] = []
    for p in params:
        key, sep, value = p.partition("=")
        out.append(f"{key}{sep}{mask_value(key, value)}" if sep else p)
    return out
