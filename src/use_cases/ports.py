from typing import Protocol

from src.entities.service_health import HealthCheckResult


class ManifestSource(Protocol):
    def exists(self, name: str) -> bool: ...

    def read(self, name: str) -> str: ...


class HealthCheck(Protocol):
    name: str

    def check(self) -> HealthCheckResult: ...
