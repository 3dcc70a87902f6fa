import logging
from datetime import datetime

from src.entities.service_health import HealthCheckResult, HealthStatus
from src.use_cases.get_health import GetServiceHealthUseCase

FIXED_NOW = datetime(2026, 10, 19, 8, 0, 0)


class StaticHealthCheck:
    def __init__(self, name: str, status: HealthStatus) -> None:
        self.name = name
        self._status = status

    def check(self) -> HealthCheckResult:
        return HealthCheckResult(name=self.name, status=self._status)


class ExplodingHealthCheck:
    name = "broken"

    def check(self) -> HealthCheckResult:
        raise ConnectionError("connection refused")


def _use_case(*checks: object) -> GetServiceHealthUseCase:
    return GetServiceHealthUseCase(
        health_checks=checks,  # type: ignore[arg-type]
        logger=logging.getLogger("test"),
        clock=lambda: FIXED_NOW,
    )


def test_get_service_health_without_checks_is_healthy() -> None:
    health = _use_case().execute()

    assert health.status is HealthStatus.HEALTHY
    assert health.executed_checks == ()
    assert health.timestamp == FIXED_NOW
    assert health.timestamp.tzinfo is None


def test_get_service_health_keeps_check_order_and_reports_unhealthy() -> None:
    health = _use_case(
        StaticHealthCheck("db", HealthStatus.HEALTHY),
        StaticHealthCheck("queue", HealthStatus.UNHEALTHY),
        StaticHealthCheck("cache", HealthStatus.HEALTHY),
    ).execute()

    assert health.status is HealthStatus.UNHEALTHY
    assert [result.name for result in health.executed_checks] == ["db", "queue", "cache"]


def test_get_service_health_records_failing_check_as_unhealthy() -> None:
    health = _use_case(StaticHealthCheck("db", HealthStatus.HEALTHY), ExplodingHealthCheck()).execute()

    assert health.status is HealthStatus.UNHEALTHY
    failed = health.executed_checks[1]
    assert failed.name == "broken"
    assert failed.status is HealthStatus.UNHEALTHY
    assert failed.message == "connection refused"


def test_get_service_health_generates_unique_ids() -> None:
    use_case = _use_case()

    assert use_case.execute().id != use_case.execute().id
