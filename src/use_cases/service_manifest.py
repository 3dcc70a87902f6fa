from src.entities.service_metadata import (
    InstanceId,
    InstanceMetadata,
    ServiceMetadata,
    ServiceName,
    ServiceVersion,
)
from src.use_cases.ports import ManifestSource


class ServiceManifestEntries:
    SERVICE_ID = "Service-Id"
    SERVICE_VERSION = "Service-Version"
    NOT_AVAILABLE = "N/A"

    def __init__(self, manifest_source: ManifestSource) -> None:
        self._manifest_source = manifest_source

    def _value(self, name: str, default_value: str) -> str:
        if self._manifest_source.exists(name):
            return self._manifest_source.read(name)
        return default_value

    def service_id(self, default_id: str) -> str:
        return self._value(self.SERVICE_ID, default_id)

    def service_version(self) -> str:
        return self._value(self.SERVICE_VERSION, self.NOT_AVAILABLE)


def resolve_service_metadata(
    manifest_entries: ServiceManifestEntries,
    default_service_id: str,
    instance_id: str,
    host_address: str,
) -> ServiceMetadata:
    return ServiceMetadata(
        service_name=ServiceName(manifest_entries.service_id(default_service_id)),
        service_version=ServiceVersion(manifest_entries.service_version()),
        instance_metadata=InstanceMetadata(
            instance_id=InstanceId(instance_id),
            host_address=host_address,
        ),
    )
