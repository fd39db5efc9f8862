# application/services/response_decoder.py
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from domain.exceptions import DecodeError


class ResponseDecoder:
    def decode(self, raw: Optional[bytes]) -> Dict[str, Any]:
        if not raw:
            raise DecodeError("Unable to decode response: empty body")

        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Unable to decode response: {e}") from e

        if not isinstance(parsed, dict):
            raise DecodeError(
                f"Unable to decode response: expected a JSON object, got {type(parsed).__name__}"
            )
        return parsed
