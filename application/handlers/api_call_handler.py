# application/handlers/api_call_handler.py
from __future__ import annotations

from typing import Optional

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from application.services.identifier_extractor import IdentifierExtractor
from application.services.redactor import mask_params
from application.services.response_decoder import ResponseDecoder
from application.services.template_renderer import RenderSources, TemplateRenderer
from domain.exceptions import TriggerError
from domain.run import RunContext
from domain.steps.api_call import ApiCallStep


class ApiCallStepHandler(StepHandler):
    def __init__(
        self,
        renderer: Optional[TemplateRenderer] = None,
        decoder: Optional[ResponseDecoder] = None,
        extractor: Optional[IdentifierExtractor] = None,
    ):
        self._renderer = renderer or TemplateRenderer()
        self._decoder = decoder or ResponseDecoder()
        self._extractor = extractor or IdentifierExtractor()

    def supports(self, step) -> bool:
        return isinstance(step, ApiCallStep)

    def handle(self, step: ApiCallStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        # TemplateRenderError is a broken scenario definition, not a failed call: let it raise
        src = RenderSources(ids=dict(ctx.ids))
        path = self._renderer.render_str(step.request.path, src)
        params = self._renderer.render_params(step.request.params, src)

        descriptor = deps.request_builder.build(step.request.method, params)

        deps.logger.debug(
            "api.request",
            step_id=step.id,
            method=descriptor.method,
            path=path,
            params=mask_params(descriptor.params),
            version=descriptor.version,
        )

        try:
            raw = deps.executor.execute(deps.credentials, path, descriptor, suppress_output=True)
            response = self._decoder.decode(raw)

            if step.capture is not None:
                ctx.ids[step.capture.save_as] = self._extractor.extract(
                    response,
                    step.capture.field,
                    object_name=step.capture.object_name,
                    operation=step.id,
                )
        except TriggerError as e:
            deps.logger.error(
                "api.step_failed",
                step_id=step.id,
                method=descriptor.method,
                path=path,
                error_type=type(e).__name__,
                error=str(e),
            )
            return StepOutcome(ok=False, error=e)

        ctx.last = response
        deps.logger.info(
            "api.response",
            step_id=step.id,
            object=response.get("object"),
            captured=step.capture.save_as if step.capture else None,
        )
        return StepOutcome(ok=True)
