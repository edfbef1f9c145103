from __future__ import annotations

import math

import pytest

from app.core.species import DEFAULT_SPECIES
from app.models.sequestration import CalculationRequest, SpeciesProfile
from app.services.growth_model import (
    CO2_TO_CARBON_RATIO,
    INITIAL_BIOMASS_KG,
    aggregate,
    biomass_at_age,
    co2_per_tree_at_age,
    round_half_up,
)


def _expected_biomass(age: int, profile: SpeciesProfile) -> float:
    k = profile.max_biomass_kg
    a = (k - 0.1) / 0.1
    return min(k / (1 + a * math.exp(-profile.growth_rate * age)), k) * profile.wood_density


def _round1(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


@pytest.mark.parametrize("species_id", sorted(DEFAULT_SPECIES))
def test_biomass_non_decreasing_and_bounded(species_id: str) -> None:
    profile = DEFAULT_SPECIES[species_id]
    upper = profile.max_biomass_kg * profile.wood_density
    values = [biomass_at_age(age, profile) for age in range(1, 51)]

    assert all(0 <= v <= upper for v in values)
    assert all(later >= earlier for earlier, later in zip(values, values[1:]))


def test_biomass_matches_logistic_formula() -> None:
    profile = DEFAULT_SPECIES["oak"]
    for age in (1, 7, 25, 50):
        assert math.isclose(biomass_at_age(age, profile), _expected_biomass(age, profile))


def test_biomass_clamped_at_asymptote_for_large_ages() -> None:
    profile = SpeciesProfile(
        name="Fast", max_biomass_kg=10.0, growth_rate=50.0, wood_density=1.0, carbon_fraction=0.5
    )
    assert biomass_at_age(50, profile) == pytest.approx(10.0)
    assert biomass_at_age(50, profile) <= 10.0


def test_co2_per_tree_uses_carbon_fraction_and_ratio() -> None:
    profile = DEFAULT_SPECIES["teak"]
    expected = _expected_biomass(10, profile) * profile.carbon_fraction * 3.67
    assert math.isclose(co2_per_tree_at_age(10, profile), expected)
    assert CO2_TO_CARBON_RATIO == 3.67
    assert INITIAL_BIOMASS_KG == 0.1


def test_round_half_up() -> None:
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(2.5) == 3.0
    assert round_half_up(1.24, 1) == 1.2


def test_pine_scenario_matches_formula() -> None:
    pine = DEFAULT_SPECIES["pine"]
    result = aggregate(CalculationRequest(species=pine, tree_count=1000, duration_years=3))

    assert result.species_name == "Pine"
    assert result.tree_count == 1000
    assert result.duration_years == 3

    running_total = 0.0
    for record, year in zip(result.year_records, (1, 2, 3)):
        biomass = _expected_biomass(year, pine)
        co2 = biomass * pine.carbon_fraction * 3.67
        running_total += co2 * 1000 / 1000

        assert record.year == year
        assert record.biomass_per_tree_kg == _round1(biomass)
        assert record.co2_per_tree_kg == _round1(co2)
        assert record.cumulative_co2_tons == _round1(running_total)

    assert result.final_co2_tons == math.floor(running_total + 0.5)


@pytest.mark.parametrize("years", [1, 13, 50])
def test_aggregate_record_sequence(years: int) -> None:
    request = CalculationRequest(species=DEFAULT_SPECIES["eucalyptus"], tree_count=250, duration_years=years)
    records = aggregate(request).year_records

    assert len(records) == years
    assert [r.year for r in records] == list(range(1, years + 1))
    cumulative = [r.cumulative_co2_tons for r in records]
    assert all(later >= earlier for earlier, later in zip(cumulative, cumulative[1:]))


def test_aggregate_is_idempotent() -> None:
    request = CalculationRequest(species=DEFAULT_SPECIES["teak"], tree_count=100_000, duration_years=50)
    assert aggregate(request) == aggregate(request)
    assert aggregate(request).model_dump_json() == aggregate(request).model_dump_json()


def test_final_total_rounded_independently_of_last_record() -> None:
    # Saturated immediately: 0.82 kg CO2 per tree every year, 1000 trees,
    # so the raw total after 3 years is 2.46 t.
    profile = SpeciesProfile(
        name="Synthetic",
        max_biomass_kg=1.0,
        growth_rate=50.0,
        wood_density=1.0,
        carbon_fraction=0.82 / 3.67,
    )
    result = aggregate(CalculationRequest(species=profile, tree_count=1000, duration_years=3))

    assert [r.co2_per_tree_kg for r in result.year_records] == [0.8, 0.8, 0.8]
    assert [r.cumulative_co2_tons for r in result.year_records] == [0.8, 1.6, 2.5]
    # Not derived from the displayed 2.5.
    assert result.final_co2_tons == 2


def test_results_are_immutable() -> None:
    result = aggregate(CalculationRequest(species=DEFAULT_SPECIES["pine"], tree_count=1, duration_years=1))
    with pytest.raises(Exception):
        result.final_co2_tons = 0  # type: ignore[misc]
