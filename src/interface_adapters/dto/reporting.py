from datetime import datetime

from src.interface_adapters.dto.health import ServiceInstanceHealthDto
from src.interface_adapters.dto.metadata import MetadataDto
from src.shared.transfer_object import transfer_object


@transfer_object
class ServiceHealthReportDto:
    id: str
    timestamp: datetime
    metadata: MetadataDto
    health: ServiceInstanceHealthDto
