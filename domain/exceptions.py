# domain/exceptions.py
"""
Error taxonomy for trigger execution.

Every error raised while running a trigger derives from TriggerError and is
surfaced unchanged to the caller of the trigger.
"""
from __future__ import annotations

from typing import Optional


class TriggerError(Exception):
    pass


class TransportError(TriggerError):
    """Network-level failure reported by the request executor."""


class AuthError(TriggerError):
    """The remote API rejected the configured credentials."""


class RemoteAPIError(TriggerError):
    def __init__(self, status: int, body: str, message: Optional[str] = None):
        self.status = status
        self.body = body
        super().__init__(message or f"Request failed, status={status}, body={body}")


class DecodeError(TriggerError):
    pass


class MissingFieldError(TriggerError):
    def __init__(self, key: str, object_name: str, operation: str = ""):
        self.key = key
        self.object_name = object_name
        self.operation = operation
        if key == "id":
            message = f"Unable to retrieve {object_name} ID"
        else:
            message = f"Unable to retrieve {object_name} {key}"
        super().__init__(message)


class ValidationError(TriggerError):
    pass


class UnknownTriggerError(TriggerError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"event {name} is not supported")
