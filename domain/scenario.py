# domain/scenario.py
"""
Scenario domain model
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from domain.steps.base import Step


@dataclass(frozen=True)
class ScenarioMeta:
    name: str  # webhook event the scenario triggers, e.g. "charge.captured"
    description: str = ""


@dataclass(frozen=True)
class Scenario:
    """
    Scenario aggregate root
    """
    meta: ScenarioMeta
    steps: List[Step]

    @property
    def name(self) -> str:
        return self.meta.name
