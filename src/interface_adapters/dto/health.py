from src.shared.transfer_object import transfer_object


@transfer_object
class HealthCheckResultDto:
    name: str
    status: str
    message: str
    details: tuple[tuple[str, str], ...]


@transfer_object
class ServiceInstanceHealthDto:
    status: str
    checks: tuple[HealthCheckResultDto, ...]
