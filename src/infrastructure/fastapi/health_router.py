from fastapi import APIRouter, Response, status

from src.entities.service_health import HealthStatus
from src.interface_adapters.controllers.health_controller import HealthController
from src.infrastructure.fastapi.schemas import ServiceHealthReportResponseModel


def create_health_router(health_controller: HealthController) -> APIRouter:
    router = APIRouter(tags=["health"])

    def _report(response: Response) -> ServiceHealthReportResponseModel:
        report = health_controller.handle_get_health_report()
        if report.health.status != HealthStatus.HEALTHY.name:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ServiceHealthReportResponseModel.model_validate(report)

    @router.get("/", response_model=ServiceHealthReportResponseModel)
    def root(response: Response) -> ServiceHealthReportResponseModel:
        return _report(response)

    @router.get("/health", response_model=ServiceHealthReportResponseModel)
    def health(response: Response) -> ServiceHealthReportResponseModel:
        return _report(response)

    return router
