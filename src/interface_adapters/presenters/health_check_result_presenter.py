from src.entities.service_health import HealthCheckResult
from src.interface_adapters.dto.health import HealthCheckResultDto


def translate_health_check_result(result: HealthCheckResult) -> HealthCheckResultDto:
    return HealthCheckResultDto(
        name=result.name,
        status=result.status.name,
        message=result.message or "",
        details=tuple(result.details.items()),
    )
