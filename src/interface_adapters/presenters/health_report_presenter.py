"""Translation of service metadata and health snapshots into report DTOs."""

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from src.entities.service_health import HealthCheckResult, ServiceHealth
from src.entities.service_metadata import ServiceMetadata
from src.interface_adapters.dto.health import HealthCheckResultDto, ServiceInstanceHealthDto
from src.interface_adapters.dto.metadata import InstanceMetadataDto, MetadataDto, ServiceMetadataDto
from src.interface_adapters.dto.reporting import ServiceHealthReportDto
from src.interface_adapters.presenters.health_check_result_presenter import translate_health_check_result

CheckResultTranslator = Callable[[HealthCheckResult], HealthCheckResultDto]


def _at_utc(value: datetime) -> datetime:
    # Naive timestamps already hold a UTC instant.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def translate_metadata(service_metadata: ServiceMetadata) -> MetadataDto:
    return MetadataDto(
        service=ServiceMetadataDto(
            service_name=service_metadata.service_name.name,
            service_version=service_metadata.service_version.version,
        ),
        instance=InstanceMetadataDto(
            instance_id=service_metadata.instance_metadata.instance_id.id,
            host_address=service_metadata.instance_metadata.host_address,
        ),
    )


def translate_checks(
    checks: Iterable[HealthCheckResult],
    translate_check: CheckResultTranslator = translate_health_check_result,
) -> tuple[HealthCheckResultDto, ...]:
    return tuple(translate_check(check) for check in checks)


def translate_health(
    service_health: ServiceHealth,
    translate_check: CheckResultTranslator = translate_health_check_result,
) -> ServiceInstanceHealthDto:
    return ServiceInstanceHealthDto(
        status=service_health.status.name,
        checks=translate_checks(service_health.executed_checks, translate_check),
    )


def create_report(
    service_metadata: ServiceMetadata,
    service_health: ServiceHealth,
    translate_check: CheckResultTranslator = translate_health_check_result,
) -> ServiceHealthReportDto:
    """Build the health report for one service instance.

    Fields are copied as they are; missing inputs (for example a ``None``
    metadata) raise from attribute access and reach the caller unchanged.
    """
    metadata_dto = translate_metadata(service_metadata)
    health_dto = translate_health(service_health, translate_check)

    return ServiceHealthReportDto(
        id=str(service_health.id),
        timestamp=_at_utc(service_health.timestamp),
        metadata=metadata_dto,
        health=health_dto,
    )
