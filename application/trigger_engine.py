# application/trigger_engine.py
"""
Runs named trigger scenarios against the remote API.

Each trigger is a fixed chain of API calls; identifiers captured from one
response feed the next call. The first failing call ends the trigger and its
error is raised unchanged. Objects created by earlier calls are left in place.
"""
from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Optional, Protocol

from pydantic import ValidationError as PayloadValidationError

from application.executor.handler_registry import HandlerRegistry
from application.executor.step_executor import StepExecutor
from application.ports.api_executor import ApiExecutorPort
from application.ports.logger import LoggerPort
from application.services.execution_deps import ExecutionDeps
from application.services.response_decoder import ResponseDecoder
from domain.credentials import Credentials
from domain.exceptions import TriggerError, UnknownTriggerError
from domain.ids import EventId
from domain.run import RunContext
from domain.scenario import Scenario, ScenarioMeta
from domain.steps.api_call import ApiCallStep, ApiRequestSpec
from domain.webhook_endpoint import WebhookEndpointList

WEBHOOK_ENDPOINTS_PAGE_SIZE = 30


class ScenarioSource(Protocol):
    """Anything that can look scenarios up by trigger name (see ScenarioCatalog)."""

    def names(self) -> List[str]: ...

    def get(self, name: str) -> Optional[Scenario]: ...


class TriggerEngine:
    def __init__(
        self,
        credentials: Credentials,
        executor: ApiExecutorPort,
        catalog: ScenarioSource,
        logger: LoggerPort,
        step_executor: Optional[StepExecutor] = None,
    ):
        self._catalog = catalog
        self._steps = step_executor or StepExecutor(HandlerRegistry.default())
        self._deps = ExecutionDeps.create(
            credentials=credentials,
            executor=executor,
            logger=logger.bind(profile=credentials.profile),
        )

    def available(self) -> List[str]:
        return sorted(self._catalog.names())

    @property
    def triggers(self) -> Dict[str, Callable[[], None]]:
        """One zero-argument callable per trigger name."""
        return {name: partial(self.trigger, name) for name in self.available()}

    def trigger(self, name: str) -> None:
        scenario = self._catalog.get(name)
        if scenario is None:
            raise UnknownTriggerError(name)
        self.run(scenario)

    def run(self, scenario: Scenario, ctx: Optional[RunContext] = None) -> RunContext:
        ctx = ctx or RunContext()
        deps = self._deps.with_logger(self._deps.logger.bind(trigger=scenario.name))

        deps.logger.info("trigger.start", steps=len(scenario.steps))
        result = self._steps.execute(scenario.steps, ctx, deps)
        deps.logger.info(
            "trigger.end",
            run_id=ctx.run_id,
            ok=result.ok,
            failed_step_id=result.failed_step_id,
        )

        if not result.ok:
            if result.error is not None:
                raise result.error
            raise TriggerError(f"Step {result.failed_step_id} failed")
        return ctx

    def resend_event(self, event_id: str) -> None:
        """Ask the API to deliver an event again. The id is checked before any call."""
        event = EventId(event_id)
        self._deps.logger.info("event.resend", event_id=event.value)

        scenario = Scenario(
            meta=ScenarioMeta(name="event.resend", description=f"Resend {event.value}"),
            steps=[
                ApiCallStep(
                    id="retry_event",
                    name="retry_event",
                    request=ApiRequestSpec(method="POST", path=f"/v1/events/{event.value}/retry"),
                )
            ],
        )
        self.run(scenario)

    def webhook_endpoints_list(self) -> WebhookEndpointList:
        """
        Best effort: any failure is logged and an empty list is returned, so an
        empty result does not prove the account has no endpoints.
        """
        deps = self._deps
        descriptor = deps.request_builder.build("GET", [f"limit={WEBHOOK_ENDPOINTS_PAGE_SIZE}"])
        try:
            raw = deps.executor.execute(deps.credentials, "/v1/webhook_endpoints", descriptor, suppress_output=True)
            return WebhookEndpointList.model_validate(ResponseDecoder().decode(raw))
        except (TriggerError, PayloadValidationError) as e:
            deps.logger.warning(
                "webhook_endpoints.list_failed",
                error_type=type(e).__name__,
                error=str(e),
            )
            return WebhookEndpointList()
