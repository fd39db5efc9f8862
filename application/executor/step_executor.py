# application/executor/step_executor.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
import time
import uuid

from application.executor.handler_registry import HandlerRegistry
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.exceptions import TriggerError
from domain.run import RunContext
from domain.steps.base import Step


@dataclass(frozen=True)
class ExecutionResult:
    ok: bool
    failed_step_id: Optional[str] = None
    error: Optional[TriggerError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class StepExecutor:
    """
    Runs steps strictly in order and stops at the first failure.

    No retries and no compensation: steps that already succeeded stay done.
    """

    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    def execute(self, steps: List[Step], ctx: RunContext, deps: ExecutionDeps) -> ExecutionResult:
        if not getattr(ctx, "run_id", ""):
            ctx.run_id = uuid.uuid4().hex

        deps = deps.with_logger(deps.logger.bind(run_id=ctx.run_id))

        for index, step in enumerate(steps):
            if getattr(step, "enabled", True) is False:
                continue

            handler = self._registry.get_handler(step)

            deps.logger.info(
                "step.start",
                step_id=step.id,
                step_type=type(step).__name__,
                index=index,
            )
            t0 = time.perf_counter()

            outcome: StepOutcome = handler.handle(step, ctx, deps)

            if outcome is None:
                raise RuntimeError(
                    f"Handler returned None: handler={type(handler).__name__}, step={step.id} ({type(step).__name__})"
                )

            deps.logger.info(
                "step.end",
                step_id=step.id,
                ok=outcome.ok,
                elapsed_ms=int((time.perf_counter() - t0) * 1000),
            )

            if not outcome.ok:
                return ExecutionResult(ok=False, failed_step_id=step.id, error=outcome.error)

        return ExecutionResult(ok=True)
