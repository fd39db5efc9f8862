# tests/application/executor/test_handler_registry.py
import pytest

from application.executor.handler_registry import HandlerRegistry
from application.handlers.api_call_handler import ApiCallStepHandler
from domain.steps import ApiCallStep, ApiRequestSpec
from domain.steps.base import Step


class OtherStep(Step):
    pass


def test_default_registry_handles_api_calls() -> None:
    registry = HandlerRegistry.default()
    step = ApiCallStep(id="s1", name="s1", request=ApiRequestSpec(method="GET", path="/v1/customers"))

    assert isinstance(registry.get_handler(step), ApiCallStepHandler)


def test_first_supporting_handler_wins() -> None:
    first, second = ApiCallStepHandler(), ApiCallStepHandler()
    registry = HandlerRegistry([first, second])
    step = ApiCallStep(id="s1", name="s1", request=ApiRequestSpec(method="GET", path="/v1/customers"))

    assert registry.get_handler(step) is first


def test_unsupported_step_raises() -> None:
    registry = HandlerRegistry.default()

    with pytest.raises(RuntimeError, match="No handler found for step: OtherStep"):
        registry.get_handler(OtherStep(id="x", name="x"))
