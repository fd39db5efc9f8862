# application/outcome.py
from dataclasses import dataclass
from typing import Optional

from domain.exceptions import TriggerError


@dataclass(frozen=True)
class StepOutcome:
    ok: bool
    error: Optional[TriggerError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None
