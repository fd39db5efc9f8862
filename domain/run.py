# domain/run.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class RunContext:
    run_id: str = ""

    # identifiers captured from earlier responses, keyed by IdentifierCapture.save_as
    ids: Dict[str, str] = field(default_factory=dict)
    last: Optional[Dict[str, Any]] = None
