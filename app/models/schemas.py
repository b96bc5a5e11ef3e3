from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime, timezone


# ----------------------------
# Health Check
# ----------------------------
class ServiceStatus(BaseModel):
    name: str
    status: str  # "healthy", "unhealthy"
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    services: List[ServiceStatus]
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
