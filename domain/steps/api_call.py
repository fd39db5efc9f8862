# domain/steps/api_call.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from domain.steps.base import Step


@dataclass(frozen=True)
class ApiRequestSpec:
    method: str
    path: str  # e.g. "/v1/charges/${ids.charge}/capture"
    params: Tuple[str, ...] = ()  # "key=value" templates, sent in order


@dataclass(frozen=True)
class IdentifierCapture:
    save_as: str
    object_name: str  # used in "Unable to retrieve <object_name> ID"
    field: str = "id"


@dataclass(frozen=True)
class ApiCallStep(Step):
    request: ApiRequestSpec
    capture: Optional[IdentifierCapture] = None
