from __future__ import annotations

from typing import Any, List, Protocol

from app.core.species import SpeciesCatalog
from app.models.sequestration import CalculationResult
from app.services.sequestration_service import SequestrationService
from streamlit_app.client import RemoteSequestrationClient


class CalculatorBackend(Protocol):
    def calculate(self, species: Any, num_trees: Any, years: Any) -> CalculationResult:
        ...


def build_backend(
    kind: str,
    species: SpeciesCatalog,
    api_url: str = "http://localhost:8000",
    timeout_s: float = 10.0,
) -> CalculatorBackend:
    """Return the in-process service (``local``) or the HTTP client (``remote``)."""
    if kind == "local":
        return SequestrationService(species=species)
    if kind == "remote":
        return RemoteSequestrationClient(base_url=api_url, timeout_s=timeout_s)
    raise ValueError(f"Unsupported calculator backend: {kind!r} (expected 'local' or 'remote')")


def species_options(species: SpeciesCatalog) -> List[tuple[str, str]]:
    """(id, display name) pairs in catalog order for the species select box."""
    return [(species_id, profile.name) for species_id, profile in species.items()]
