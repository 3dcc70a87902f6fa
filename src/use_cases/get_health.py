import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from uuid import uuid4

from src.entities.service_health import HealthCheckResult, HealthStatus, ServiceHealth
from src.use_cases.ports import HealthCheck


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class GetServiceHealthUseCase:
    def __init__(
        self,
        health_checks: Sequence[HealthCheck],
        logger: logging.Logger,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._health_checks = tuple(health_checks)
        self._logger = logger
        self._clock = clock

    def _run_check(self, health_check: HealthCheck) -> HealthCheckResult:
        try:
            return health_check.check()
        except Exception as error:
            self._logger.exception("Health check failed name=%s", health_check.name)
            return HealthCheckResult(
                name=health_check.name,
                status=HealthStatus.UNHEALTHY,
                message=str(error),
            )

    def execute(self) -> ServiceHealth:
        executed_checks = tuple(self._run_check(health_check) for health_check in self._health_checks)
        status = (
            HealthStatus.HEALTHY
            if all(result.healthy for result in executed_checks)
            else HealthStatus.UNHEALTHY
        )
        self._logger.debug(
            "Health snapshot computed status=%s checks=%s",
            status.name,
            len(executed_checks),
        )
        return ServiceHealth(
            id=uuid4(),
            timestamp=self._clock(),
            status=status,
            executed_checks=executed_checks,
        )
