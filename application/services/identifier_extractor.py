# application/services/identifier_extractor.py
from __future__ import annotations

from typing import Any, Dict

from domain.exceptions import MissingFieldError


class IdentifierExtractor:
    """
    Reads one identifier out of a decoded response.

    A missing, non-string or empty value raises MissingFieldError; an empty
    string is never handed to the next step.
    """

    def extract(
        self,
        response: Dict[str, Any],
        key: str,
        object_name: str,
        operation: str = "",
    ) -> str:
        value = response.get(key) if isinstance(response, dict) else None
        if not isinstance(value, str) or not value:
            raise MissingFieldError(key=key, object_name=object_name, operation=operation)
        return value
