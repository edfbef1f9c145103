from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from app.models.sequestration import SpeciesProfile

SpeciesCatalog = Mapping[str, SpeciesProfile]


DEFAULT_SPECIES: SpeciesCatalog = MappingProxyType(
    {
        "teak": SpeciesProfile(
            name="Teak",
            max_age_years=50,
            max_biomass_kg=800,
            growth_rate=0.25,
            wood_density=0.65,
            carbon_fraction=0.47,
        ),
        "pine": SpeciesProfile(
            name="Pine",
            max_age_years=40,
            max_biomass_kg=600,
            growth_rate=0.30,
            wood_density=0.45,
            carbon_fraction=0.50,
        ),
        "oak": SpeciesProfile(
            name="Oak",
            max_age_years=60,
            max_biomass_kg=900,
            growth_rate=0.20,
            wood_density=0.72,
            carbon_fraction=0.48,
        ),
        "eucalyptus": SpeciesProfile(
            name="Eucalyptus",
            max_age_years=30,
            max_biomass_kg=500,
            growth_rate=0.35,
            wood_density=0.55,
            carbon_fraction=0.49,
        ),
    }
)
