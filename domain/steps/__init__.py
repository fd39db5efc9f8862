from domain.steps.base import Step
from domain.steps.api_call import ApiCallStep, ApiRequestSpec, IdentifierCapture

__all__ = [
    "Step",
    "ApiCallStep",
    "ApiRequestSpec",
    "IdentifierCapture",
]
