import time
from collections.abc import Sequence
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.entities.service_metadata import ServiceMetadata
from src.infrastructure.fastapi.health_router import create_health_router
from src.interface_adapters.controllers.health_controller import HealthController
from src.interface_adapters.gateways.manifest_sources import FileManifestSource
from src.shared.config import Settings, load_settings, validate_startup_settings
from src.shared.log_safety import safe_identifier
from src.shared.logger import configure_logging, get_logger
from src.use_cases.get_health import GetServiceHealthUseCase
from src.use_cases.ports import HealthCheck
from src.use_cases.service_manifest import ServiceManifestEntries, resolve_service_metadata

configure_logging()
logger = get_logger("service-health-report")

_HEALTH_PATHS = {"/", "/health"}


def _is_health_path(path: str) -> bool:
    return path in _HEALTH_PATHS


def _log_environment_configuration(app_settings: Settings) -> None:
    if not app_settings.env_path.exists():
        logger.info("No .env found at %s", app_settings.env_path)
    elif app_settings.loaded_env_keys:
        logger.info(".env loaded. Injected variables: %s", ", ".join(app_settings.loaded_env_keys))
    else:
        logger.info(".env found, but no new variable was injected.")

    logger.info(
        "Runtime config app_env=%s log_level=%s manifest_path=%s",
        app_settings.app_env,
        app_settings.log_level,
        app_settings.manifest_path,
    )


def _log_service_metadata(service_metadata: ServiceMetadata, app_settings: Settings) -> None:
    logger.info(
        "Service identity service=%s version=%s instance_id=%s host=%s",
        service_metadata.service_name.name,
        service_metadata.service_version.version,
        safe_identifier(service_metadata.instance_metadata.instance_id.id, app_settings.mask_sensitive_ids),
        service_metadata.instance_metadata.host_address,
    )


def _build_dependencies(effective_settings: Settings, health_checks: Sequence[HealthCheck]) -> dict[str, Any]:
    manifest_source = FileManifestSource(effective_settings.manifest_path, logger)
    manifest_entries = ServiceManifestEntries(manifest_source)
    service_metadata = resolve_service_metadata(
        manifest_entries,
        default_service_id=effective_settings.service_name,
        instance_id=effective_settings.instance_id,
        host_address=effective_settings.host_address,
    )
    get_service_health_use_case = GetServiceHealthUseCase(health_checks=health_checks, logger=logger)
    return {
        "service_metadata": service_metadata,
        "health_controller": HealthController(
            service_metadata=service_metadata,
            get_service_health_use_case=get_service_health_use_case,
            logger=logger,
        ),
    }


def _register_middlewares(fastapi_app: FastAPI, effective_settings: Settings) -> None:
    @fastapi_app.middleware("http")
    async def request_logging_middleware(request: Request, call_next: Any) -> JSONResponse:
        started_at = time.perf_counter()
        request_id = request.headers.get("X-Request-Id", "").strip() or str(uuid4())
        request.state.request_id = request_id
        logged_request_id = safe_identifier(request_id, effective_settings.mask_sensitive_ids)
        request_path = request.url.path
        is_health_path = _is_health_path(request_path)

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.perf_counter() - started_at) * 1000, 2)
            logger.exception(
                "request_error",
                extra={
                    "event": "http_request",
                    "request_id": logged_request_id,
                    "method": request.method,
                    "path": request_path,
                    "status_code": 500,
                    "duration_ms": duration_ms,
                },
            )
            raise

        response.headers["X-Request-Id"] = request_id
        if is_health_path and not effective_settings.http_log_healthchecks:
            return response

        duration_ms = round((time.perf_counter() - started_at) * 1000, 2)
        log_level = logger.debug if is_health_path else logger.info
        log_level(
            "request_completed",
            extra={
                "event": "http_request",
                "request_id": logged_request_id,
                "method": request.method,
                "path": request_path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


def create_app(custom_settings: Settings | None = None, health_checks: Sequence[HealthCheck] = ()) -> FastAPI:
    effective_settings = custom_settings or load_settings()
    configure_logging(effective_settings.log_level)
    validate_startup_settings(effective_settings)
    _log_environment_configuration(effective_settings)

    dependencies = _build_dependencies(effective_settings, health_checks)
    _log_service_metadata(dependencies["service_metadata"], effective_settings)

    fastapi_app = FastAPI(title="Service Health Report API")
    fastapi_app.state.service_metadata = dependencies["service_metadata"]
    fastapi_app.include_router(create_health_router(dependencies["health_controller"]))
    _register_middlewares(fastapi_app, effective_settings)

    return fastapi_app


default_settings = load_settings()
settings = default_settings
app = create_app(default_settings)
