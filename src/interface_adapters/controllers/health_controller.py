import logging

from src.entities.service_metadata import ServiceMetadata
from src.interface_adapters.dto.reporting import ServiceHealthReportDto
from src.interface_adapters.presenters.health_check_result_presenter import translate_health_check_result
from src.interface_adapters.presenters.health_report_presenter import CheckResultTranslator, create_report
from src.use_cases.get_health import GetServiceHealthUseCase


class HealthController:
    def __init__(
        self,
        service_metadata: ServiceMetadata,
        get_service_health_use_case: GetServiceHealthUseCase,
        logger: logging.Logger,
        translate_check: CheckResultTranslator = translate_health_check_result,
    ) -> None:
        self._service_metadata = service_metadata
        self._get_service_health_use_case = get_service_health_use_case
        self._logger = logger
        self._translate_check = translate_check

    def handle_get_health_report(self) -> ServiceHealthReportDto:
        service_health = self._get_service_health_use_case.execute()
        report = create_report(self._service_metadata, service_health, self._translate_check)
        self._logger.debug("Health report generated: %s", report)
        return report
