from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict


class HealthCheckResponse(BaseModel):
    status: str
    app: str
    version: str
    timestamp: datetime
    environment: str
    species: List[str]

    model_config = ConfigDict(from_attributes=True)
