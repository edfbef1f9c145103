from datetime import datetime, timezone
from typing import Optional

from app.core.config import AppConfig
from app.core.species import DEFAULT_SPECIES, SpeciesCatalog
from app.models.response import HealthCheckResponse


class HealthService:
    def __init__(self, config: AppConfig, species: Optional[SpeciesCatalog] = None) -> None:
        self._config = config
        self._species = DEFAULT_SPECIES if species is None else species

    def get_health(self) -> HealthCheckResponse:
        # Degraded when no species are loaded: every calculation would fail.
        return HealthCheckResponse(
            status="ok" if self._species else "degraded",
            app=self._config.app_name,
            version=self._config.version,
            timestamp=datetime.now(timezone.utc),
            environment=self._config.environment,
            species=sorted(self._species),
        )
