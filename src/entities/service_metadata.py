from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceName:
    name: str


@dataclass(frozen=True)
class ServiceVersion:
    version: str


@dataclass(frozen=True)
class InstanceId:
    id: str


@dataclass(frozen=True)
class InstanceMetadata:
    instance_id: InstanceId
    host_address: str


@dataclass(frozen=True)
class ServiceMetadata:
    service_name: ServiceName
    service_version: ServiceVersion
    instance_metadata: InstanceMetadata
