from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class HealthStatus(Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass(frozen=True)
class HealthCheckResult:
    name: str
    status: HealthStatus
    message: str | None = None
    details: Mapping[str, str] = field(default_factory=dict)

    @property
    def healthy(self) -> bool:
        return self.status is HealthStatus.HEALTHY


@dataclass(frozen=True)
class ServiceHealth:
    """Health snapshot taken at one point in time.

    `timestamp` is a naive datetime holding a UTC instant.
    """

    id: UUID
    timestamp: datetime
    status: HealthStatus
    executed_checks: tuple[HealthCheckResult, ...] = ()
