# application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace

from application.ports.api_executor import ApiExecutorPort
from application.ports.logger import LoggerPort
from application.services.request_builder import RequestBuilder
from domain.credentials import Credentials


@dataclass(frozen=True)
class ExecutionDeps:
    credentials: Credentials
    executor: ApiExecutorPort
    request_builder: RequestBuilder
    logger: LoggerPort

    @classmethod
    def create(cls, credentials: Credentials, executor: ApiExecutorPort, logger: LoggerPort) -> "ExecutionDeps":
        return cls(
            credentials=credentials,
            executor=executor,
            request_builder=RequestBuilder(api_version=credentials.api_version),
            logger=logger,
        )

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
