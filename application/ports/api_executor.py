# application/ports/api_executor.py
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.credentials import Credentials
from domain.request import RequestDescriptor


class ApiExecutorPort(ABC):
    @abstractmethod
    def execute(
        self,
        credentials: Credentials,
        path: str,
        descriptor: RequestDescriptor,
        suppress_output: bool = False,
    ) -> bytes:
        """
        Perform one call against the remote API and return the raw body.

        Raises TransportError, AuthError or RemoteAPIError. Never retries.
        """
        ...
