from datetime import datetime

from pydantic import BaseModel

# bool must precede int so True/False are not coerced to 1/0
AttributeValue = bool | datetime | int | float | str | None


# --- Ad ---

class AdRecord(BaseModel):
    title: str
    description: str = ""
    date: datetime
    image: str = ""
    images: list[str] = []
    attributes: dict[str, AttributeValue] = {}


# --- System ---

class ServiceStatus(BaseModel):
    name: str
    status: str  # "ok" / "degraded" / "unavailable"
    detail: str = ""


class HealthResponse(BaseModel):
    status: str = "ok"  # "ok" / "degraded"
    services: list[ServiceStatus] = []
