from src.shared.transfer_object import transfer_object


@transfer_object
class ServiceMetadataDto:
    service_name: str
    service_version: str


@transfer_object
class InstanceMetadataDto:
    instance_id: str
    host_address: str


@transfer_object
class MetadataDto:
    service: ServiceMetadataDto
    instance: InstanceMetadataDto
