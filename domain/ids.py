# domain/ids.py
import re
from dataclasses import dataclass

from domain.exceptions import ValidationError

EVENT_ID_PATTERN = r"^evt_[A-Za-z0-9]{3,255}$"


@dataclass(frozen=True)
class EventId:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or re.fullmatch(EVENT_ID_PATTERN, self.value) is None:
            raise ValidationError(
                f"Invalid event-id provided, should be of the form '{EVENT_ID_PATTERN}'"
            )
