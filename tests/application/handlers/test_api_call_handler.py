# tests/application/handlers/test_api_call_handler.py
import pytest

from application.handlers.api_call_handler import ApiCallStepHandler
from application.services.execution_deps import ExecutionDeps
from application.services.template_renderer import TemplateRenderError
from domain.exceptions import DecodeError, MissingFieldError, RemoteAPIError, TransportError
from domain.run import RunContext
from domain.steps import ApiCallStep, ApiRequestSpec, IdentifierCapture
from tests.doubles import RecordingExecutor, RecordingLogger


def _deps(credentials, executor, logger=None):
    return ExecutionDeps.create(credentials=credentials, executor=executor, logger=logger or RecordingLogger())


def _step(path="/v1/charges", params=(), capture=None, method="POST"):
    return ApiCallStep(
        id="create_charge",
        name="create_charge",
        request=ApiRequestSpec(method=method, path=path, params=tuple(params)),
        capture=capture,
    )


class TestApiCallStepHandler:
    def test_supports_only_api_call_steps(self):
        handler = ApiCallStepHandler()
        assert handler.supports(_step()) is True
        assert handler.supports(object()) is False

    def test_sends_rendered_request(self, credentials):
        executor = RecordingExecutor()
        ctx = RunContext(ids={"charge": "ch_1"})
        step = _step(path="/v1/charges/${ids.charge}/refunds", params=["amount=${ids.charge}", "source=${sources.valid}"])

        outcome = ApiCallStepHandler().handle(step, ctx, _deps(credentials, executor))

        assert outcome.ok is True
        call = executor.calls[0]
        assert call.method == "POST"
        assert call.path == "/v1/charges/ch_1/refunds"
        assert call.params == ("amount=ch_1", "source=tok_visa")
        assert call.version == "2019-03-14"
        assert call.suppress_output is True

    def test_captures_identifier(self, credentials):
        executor = RecordingExecutor(replies=[{"id": "ch_9", "object": "charge"}])
        ctx = RunContext()
        step = _step(capture=IdentifierCapture(save_as="charge", object_name="Charge"))

        outcome = ApiCallStepHandler().handle(step, ctx, _deps(credentials, executor))

        assert outcome.ok is True
        assert ctx.ids == {"charge": "ch_9"}
        assert ctx.last == {"id": "ch_9", "object": "charge"}

    def test_missing_identifier_fails(self, credentials):
        executor = RecordingExecutor(replies=[{"object": "checkout.session"}])
        ctx = RunContext()
        step = _step(capture=IdentifierCapture(save_as="session", object_name="CheckoutSession"))

        outcome = ApiCallStepHandler().handle(step, ctx, _deps(credentials, executor))

        assert outcome.ok is False
        assert isinstance(outcome.error, MissingFieldError)
        assert outcome.error_message == "Unable to retrieve CheckoutSession ID"
        assert ctx.ids == {}

    def test_response_without_capture_is_still_decoded(self, credentials):
        executor = RecordingExecutor(replies=[b"not json"])

        outcome = ApiCallStepHandler().handle(_step(), RunContext(), _deps(credentials, executor))

        assert outcome.ok is False
        assert isinstance(outcome.error, DecodeError)

    @pytest.mark.parametrize(
        "error",
        [
            TransportError("connection refused"),
            RemoteAPIError(status=402, body='{"error": {}}'),
        ],
    )
    def test_executor_error_is_returned_unchanged(self, credentials, error):
        logger = RecordingLogger()
        executor = RecordingExecutor(replies=[error])

        outcome = ApiCallStepHandler().handle(_step(), RunContext(), _deps(credentials, executor, logger))

        assert outcome.ok is False
        assert outcome.error is error
        failed = [e for e in logger.events if e["event"] == "api.step_failed"]
        assert failed[0]["level"] == "error"
        assert failed[0]["error_type"] == type(error).__name__

    def test_unresolved_reference_raises(self, credentials):
        executor = RecordingExecutor()
        step = _step(path="/v1/charges/${ids.charge}/capture")

        with pytest.raises(TemplateRenderError):
            ApiCallStepHandler().handle(step, RunContext(), _deps(credentials, executor))
        assert executor.calls == []

    def test_request_log_masks_card_number(self, credentials):
        logger = RecordingLogger()
        step = _step(path="/v1/payment_methods", params=["type=card", "card[number]=${cards.visa}"])

        ApiCallStepHandler().handle(step, RunContext(), _deps(credentials, RecordingExecutor(), logger))

        request = [e for e in logger.events if e["event"] == "api.request"][0]
        assert request["params"] == ["type=card", "card[number]=********"]
        assert "4242424242424242" not in str(logger.events)
