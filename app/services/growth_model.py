"""Logistic biomass growth and CO2 sequestration model.

Formulas:
- Biomass: B(t) = K / (1 + A * e^(-r*t)), A = (K - B0) / B0, B0 = 0.1 kg
  clamped to K, multiplied by wood density, floored at 0  [kg / tree]
- CO2 per tree: B(t) * carbon_fraction * 3.67  [kg / tree]
- Yearly total: CO2 per tree * tree count / 1000  [t]

All functions are pure; ``aggregate`` has no failure path and expects a
request whose inputs were already validated.
"""

from __future__ import annotations

import math

from app.models.sequestration import (
    CalculationRequest,
    CalculationResult,
    SpeciesProfile,
    YearRecord,
)

INITIAL_BIOMASS_KG = 0.1
CO2_TO_CARBON_RATIO = 3.67  # 44/12
KG_PER_TONNE = 1000.0


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative values (display rounding)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def biomass_at_age(age_years: int, profile: SpeciesProfile) -> float:
    k = profile.max_biomass_kg
    r = profile.growth_rate
    a = (k - INITIAL_BIOMASS_KG) / INITIAL_BIOMASS_KG

    biomass = k / (1 + a * math.exp(-r * age_years))
    biomass = min(biomass, k)
    biomass *= profile.wood_density
    return max(biomass, 0.0)


def co2_per_tree_at_age(age_years: int, profile: SpeciesProfile) -> float:
    carbon_content_kg = biomass_at_age(age_years, profile) * profile.carbon_fraction
    return carbon_content_kg * CO2_TO_CARBON_RATIO


def aggregate(request: CalculationRequest) -> CalculationResult:
    profile = request.species
    records = []
    total_co2_t = 0.0

    for year in range(1, request.duration_years + 1):
        biomass_kg = biomass_at_age(year, profile)
        co2_kg = co2_per_tree_at_age(year, profile)
        total_co2_t += (co2_kg * request.tree_count) / KG_PER_TONNE

        records.append(
            YearRecord(
                year=year,
                biomass_per_tree_kg=round_half_up(biomass_kg, 1),
                co2_per_tree_kg=round_half_up(co2_kg, 1),
                cumulative_co2_tons=round_half_up(total_co2_t, 1),
            )
        )

    # Rounded from the raw running total, not from the last record.
    return CalculationResult(
        species_name=profile.name,
        tree_count=request.tree_count,
        duration_years=request.duration_years,
        final_co2_tons=int(round_half_up(total_co2_t)),
        year_records=tuple(records),
    )
