from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)


class HealthCheckResultResponseModel(_ResponseModel):
    name: str
    status: str
    message: str
    details: dict[str, str] = Field(default_factory=dict)

    @field_validator("details", mode="before")
    @classmethod
    def _details_from_pairs(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return value
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return dict(value)
        return value


class ServiceInstanceHealthResponseModel(_ResponseModel):
    status: str
    checks: list[HealthCheckResultResponseModel]


class ServiceMetadataResponseModel(_ResponseModel):
    service_name: str
    service_version: str


class InstanceMetadataResponseModel(_ResponseModel):
    instance_id: str
    host_address: str


class MetadataResponseModel(_ResponseModel):
    service: ServiceMetadataResponseModel
    instance: InstanceMetadataResponseModel


class ServiceHealthReportResponseModel(_ResponseModel):
    id: str
    timestamp: datetime
    metadata: MetadataResponseModel
    health: ServiceInstanceHealthResponseModel
