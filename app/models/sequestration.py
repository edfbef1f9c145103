from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

MIN_TREE_COUNT = 1
MAX_TREE_COUNT = 100_000
MIN_DURATION_YEARS = 1
MAX_DURATION_YEARS = 50


class SpeciesProfile(BaseModel):
    """Growth parameters for a single tree species.

    Units:
    - max_biomass_kg: asymptotic dry biomass per tree (kg)
    - growth_rate: logistic rate constant (1/year)
    - wood_density: dimensionless multiplier applied to biomass
    - carbon_fraction: fraction of dry biomass that is carbon, in (0,1]
    - max_age_years: descriptive only, never clamps the growth curve
    """

    name: str = Field(min_length=1, description="Display name of the species")
    max_biomass_kg: float = Field(gt=0, description="Asymptotic dry biomass per tree in kilograms")
    growth_rate: float = Field(gt=0, description="Logistic growth-rate constant per year")
    wood_density: float = Field(gt=0, description="Dimensionless multiplier applied to biomass")
    carbon_fraction: float = Field(gt=0, le=1, description="Carbon fraction of dry biomass in (0,1]")
    max_age_years: Optional[int] = Field(
        default=None,
        gt=0,
        description="Nominal maximum age in years (informational, does not limit growth)",
    )

    model_config = ConfigDict(frozen=True)


class CalculationRequest(BaseModel):
    species: SpeciesProfile
    tree_count: int = Field(ge=MIN_TREE_COUNT, le=MAX_TREE_COUNT, description="Number of trees planted")
    duration_years: int = Field(
        ge=MIN_DURATION_YEARS, le=MAX_DURATION_YEARS, description="Project duration in years"
    )

    model_config = ConfigDict(frozen=True)


class YearRecord(BaseModel):
    year: int
    biomass_per_tree_kg: float
    co2_per_tree_kg: float
    cumulative_co2_tons: float

    model_config = ConfigDict(frozen=True)


class CalculationResult(BaseModel):
    species_name: str
    tree_count: int
    duration_years: int
    final_co2_tons: int
    year_records: Tuple[YearRecord, ...]

    model_config = ConfigDict(frozen=True)

    def to_response(self) -> "CalculationResponse":
        return CalculationResponse(
            species=self.species_name,
            num_trees=self.tree_count,
            years=self.duration_years,
            final_co2=self.final_co2_tons,
            results=[
                YearRecordPayload(
                    year=r.year,
                    biomass_per_tree=r.biomass_per_tree_kg,
                    co2_per_tree=r.co2_per_tree_kg,
                    total_co2=r.cumulative_co2_tons,
                )
                for r in self.year_records
            ],
        )


# Wire format


class YearRecordPayload(BaseModel):
    year: int
    biomass_per_tree: float
    co2_per_tree: float
    total_co2: float


class CalculationResponse(BaseModel):
    success: bool = True
    species: str
    num_trees: int
    years: int
    final_co2: int
    results: List[YearRecordPayload]

    model_config = ConfigDict(from_attributes=True)

    def to_result(self) -> CalculationResult:
        return CalculationResult(
            species_name=self.species,
            tree_count=self.num_trees,
            duration_years=self.years,
            final_co2_tons=self.final_co2,
            year_records=tuple(
                YearRecord(
                    year=r.year,
                    biomass_per_tree_kg=r.biomass_per_tree,
                    co2_per_tree_kg=r.co2_per_tree,
                    cumulative_co2_tons=r.total_co2,
                )
                for r in self.results
            ),
        )


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    code: str


class SpeciesInfo(BaseModel):
    id: str
    name: str
    max_age_years: Optional[int] = None
    max_biomass_kg: float
    growth_rate: float
    wood_density: float
    carbon_fraction: float
