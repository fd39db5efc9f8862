# infrastructure/scenario/yaml_loader.py
"""
Build Scenario domain objects from YAML scenario files.

One file describes one trigger:

    meta:
      name: charge.captured
      description: ...
    steps:
      - id: create_charge
        method: POST
        path: /v1/charges
        params:
          - amount=2000
          - source=${sources.valid}
        capture: {save_as: charge, object: Charge}
      - id: capture_charge
        method: POST
        path: /v1/charges/${ids.charge}/capture
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Set, Union

import yaml

from application.services.template_renderer import RenderSources, TemplateRenderError, TemplateRenderer
from domain.scenario import Scenario, ScenarioMeta
from domain.steps.api_call import ApiCallStep, ApiRequestSpec, IdentifierCapture

ALLOWED_METHODS = {"GET", "POST", "DELETE"}


class ScenarioLoadError(Exception):
    pass


class YamlScenarioLoader:
    def __init__(self, renderer: TemplateRenderer | None = None):
        self._renderer = renderer or TemplateRenderer()

    def load_from_file(self, path: Union[str, Path]) -> Scenario:
        p = Path(path)
        if not p.exists():
            raise ScenarioLoadError(f"Scenario file not found: {path}")

        with p.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ScenarioLoadError(f"Scenario file is not valid YAML: {path}: {e}") from e

        if data is None:
            raise ScenarioLoadError(f"Scenario file is empty: {path}")

        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Scenario file is invalid: {path}")

        try:
            return self.load_from_dict(data)
        except ScenarioLoadError as e:
            raise ScenarioLoadError(f"{path}: {e}") from e

    def load_from_dict(self, data: Dict[str, Any]) -> Scenario:
        meta = self._load_meta(data.get("meta") or {})
        steps = self._load_steps(data.get("steps") or [])
        if not steps:
            raise ScenarioLoadError(f"Scenario has no steps: {meta.name}")

        self._check_references(steps)
        return Scenario(meta=meta, steps=steps)

    def _load_meta(self, data: Dict[str, Any]) -> ScenarioMeta:
        name = str(data.get("name") or "").strip()
        if not name:
            raise ScenarioLoadError("meta.name is required")
        return ScenarioMeta(
            name=name,
            description=str(data.get("description") or "").strip(),
        )

    def _load_steps(self, steps_data: List[Dict[str, Any]]) -> List[ApiCallStep]:
        steps: List[ApiCallStep] = []
        seen: Set[str] = set()
        for step_data in steps_data:
            step = self._load_step(step_data)
            if step.id in seen:
                raise ScenarioLoadError(f"Duplicate step id: {step.id}")
            seen.add(step.id)
            steps.append(step)
        return steps

    def _load_step(self, data: Dict[str, Any]) -> ApiCallStep:
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Step must be a mapping, got: {type(data).__name__}")

        step_id = str(data.get("id") or "").strip()
        if not step_id:
            raise ScenarioLoadError("Step id is required")

        method = str(data.get("method", "GET")).upper()
        if method not in ALLOWED_METHODS:
            raise ScenarioLoadError(f"Unsupported method for step {step_id}: {method}")

        path = str(data.get("path") or "")
        if not path.startswith("/"):
            raise ScenarioLoadError(f"Step {step_id} path must start with '/': {path!r}")

        params = []
        for item in data.get("params") or []:
            if not isinstance(item, str) or "=" not in item:
                raise ScenarioLoadError(f"Step {step_id} param must be a 'key=value' string: {item!r}")
            params.append(item)

        return ApiCallStep(
            id=step_id,
            name=str(data.get("name") or step_id),
            enabled=bool(data.get("enabled", True)),
            request=ApiRequestSpec(method=method, path=path, params=tuple(params)),
            capture=self._load_capture(step_id, data.get("capture")),
        )

    def _load_capture(self, step_id: str, data: Any) -> IdentifierCapture | None:
        if data is None:
            return None
        if not isinstance(data, dict) or not data.get("save_as") or not data.get("object"):
            raise ScenarioLoadError(f"Step {step_id} capture needs 'save_as' and 'object'")
        return IdentifierCapture(
            save_as=str(data["save_as"]),
            object_name=str(data["object"]),
            field=str(data.get("field", "id")),
        )

    def _check_references(self, steps: List[ApiCallStep]) -> None:
        # every ${ids.x} must be captured by an earlier enabled step
        captured: Set[str] = set()
        for step in steps:
            templates = [step.request.path, *step.request.params]
            for template in templates:
                try:
                    refs = self._renderer.references(template)
                    self._renderer.render_str(template, _probe_sources(refs))
                except TemplateRenderError as e:
                    raise ScenarioLoadError(f"Step {step.id}: {e}") from e
                for root, name in refs:
                    if root == "ids" and name not in captured:
                        raise ScenarioLoadError(
                            f"Step {step.id} references ${{ids.{name}}} before it is captured"
                        )
            if step.capture is not None and step.enabled:
                captured.add(step.capture.save_as)


def _probe_sources(refs) -> RenderSources:
    return RenderSources(ids={name: "probe" for root, name in refs if root == "ids"})
