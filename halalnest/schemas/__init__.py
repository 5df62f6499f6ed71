from halalnest.schemas.common import ErrorResponse
from halalnest.schemas.health import HealthStatus
from halalnest.schemas.scholar import ScholarRequest, ScholarResponse

__all__ = ["ErrorResponse", "HealthStatus", "ScholarRequest", "ScholarResponse"]
