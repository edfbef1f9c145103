from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from app.core.errors import (
    DurationOutOfRangeError,
    MissingFieldError,
    TreeCountOutOfRangeError,
    UnknownSpeciesError,
)
from app.core.logging import CalculationLogger, NoOpLogger
from app.core.species import DEFAULT_SPECIES, SpeciesCatalog
from app.models.sequestration import (
    MAX_DURATION_YEARS,
    MAX_TREE_COUNT,
    MIN_DURATION_YEARS,
    MIN_TREE_COUNT,
    CalculationRequest,
    CalculationResult,
    SpeciesInfo,
)
from app.services import growth_model

logger = logging.getLogger(__name__)


def _parse_whole_number(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None when absent or not a whole number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


class SequestrationService:
    """Validates calculator inputs and runs the growth model.

    The species catalog is injected so tests and alternative deployments
    can substitute their own profiles.
    """

    def __init__(
        self,
        species: Optional[SpeciesCatalog] = None,
        audit_logger: Optional[CalculationLogger] = None,
    ) -> None:
        self._species: SpeciesCatalog = DEFAULT_SPECIES if species is None else species
        self._audit_logger: CalculationLogger = audit_logger or NoOpLogger()

    def list_species(self) -> List[SpeciesInfo]:
        return [
            SpeciesInfo(id=species_id, **profile.model_dump())
            for species_id, profile in self._species.items()
        ]

    def build_request(self, species: Any, num_trees: Any, years: Any) -> CalculationRequest:
        species_id = species.strip() if isinstance(species, str) else None
        tree_count = _parse_whole_number(num_trees)
        duration_years = _parse_whole_number(years)

        if not species_id or tree_count is None or duration_years is None:
            raise MissingFieldError()
        if not MIN_TREE_COUNT <= tree_count <= MAX_TREE_COUNT:
            raise TreeCountOutOfRangeError(details={"num_trees": tree_count})
        if not MIN_DURATION_YEARS <= duration_years <= MAX_DURATION_YEARS:
            raise DurationOutOfRangeError(details={"years": duration_years})

        profile = self._species.get(species_id)
        if profile is None:
            raise UnknownSpeciesError(species_id)

        return CalculationRequest(species=profile, tree_count=tree_count, duration_years=duration_years)

    def calculate(self, species: Any, num_trees: Any, years: Any) -> CalculationResult:
        request = self.build_request(species, num_trees, years)
        result = growth_model.aggregate(request)
        logger.debug(
            "Calculated %s t CO2 for %d %s trees over %d years",
            result.final_co2_tons,
            result.tree_count,
            result.species_name,
            result.duration_years,
        )

        log_payload = {
            "species": species.strip(),
            "num_trees": result.tree_count,
            "years": result.duration_years,
            "final_co2": result.final_co2_tons,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        try:
            self._audit_logger.log(log_payload)
        except Exception:
            logger.warning("Audit logger failed for calculation", exc_info=True)

        return result
