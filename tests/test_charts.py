from __future__ import annotations

import json

import pytest

from app.core.species import DEFAULT_SPECIES
from app.models.sequestration import CalculationResult, YearRecord
from app.services.sequestration_service import SequestrationService
from streamlit_app.backends import build_backend, species_options
from streamlit_app.charts import (
    TABLE_COLUMNS,
    build_breakdown_rows,
    build_cumulative_chart,
    format_total,
)
from streamlit_app.client import RemoteSequestrationClient


@pytest.fixture
def result() -> CalculationResult:
    return CalculationResult(
        species_name="Teak",
        tree_count=12_500,
        duration_years=2,
        final_co2_tons=1235,
        year_records=(
            YearRecord(year=1, biomass_per_tree_kg=0.1, co2_per_tree_kg=0.2, cumulative_co2_tons=2.5),
            YearRecord(year=2, biomass_per_tree_kg=41.0, co2_per_tree_kg=70.7, cumulative_co2_tons=1234.6),
        ),
    )


class TestCumulativeChart:
    def test_single_filled_trace_of_cumulative_totals(self, result: CalculationResult) -> None:
        fig = build_cumulative_chart(result)

        assert len(fig.data) == 1
        trace = fig.data[0]
        assert list(trace.x) == [1, 2]
        assert list(trace.y) == [2.5, 1234.6]
        assert trace.fill == "tozeroy"
        assert fig.layout.xaxis.title.text == "Years"
        assert fig.layout.yaxis.title.text == "CO₂ (metric tons)"
        assert "12,500" in fig.layout.title.text

        chart_json = json.loads(fig.to_json())
        assert "data" in chart_json
        assert "layout" in chart_json

    def test_each_call_returns_a_new_figure(self, result: CalculationResult) -> None:
        assert build_cumulative_chart(result) is not build_cumulative_chart(result)

    def test_empty_result_shows_annotation(self) -> None:
        empty = CalculationResult(
            species_name="Teak", tree_count=1, duration_years=0, final_co2_tons=0, year_records=()
        )
        fig = build_cumulative_chart(empty)
        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "No data available for this chart"


def test_breakdown_rows_use_carried_cumulative_values(result: CalculationResult) -> None:
    rows = build_breakdown_rows(result)

    assert list(rows[0]) == list(TABLE_COLUMNS)
    assert rows[0] == {
        "Year": "1",
        "Biomass per Tree (kg)": "0.1",
        "CO₂ per Tree (kg)": "0.2",
        "Total CO₂ (tons)": "2.5",
    }
    assert rows[1]["Total CO₂ (tons)"] == "1,234.6"
    assert format_total(result) == "1,235"


def test_build_backend_selects_transport() -> None:
    assert isinstance(build_backend("local", species=DEFAULT_SPECIES), SequestrationService)
    assert isinstance(
        build_backend("remote", species=DEFAULT_SPECIES, api_url="http://api:8000"),
        RemoteSequestrationClient,
    )
    with pytest.raises(ValueError):
        build_backend("carrier-pigeon", species=DEFAULT_SPECIES)


def test_species_options_follow_catalog_order() -> None:
    assert species_options(DEFAULT_SPECIES) == [
        ("teak", "Teak"),
        ("pine", "Pine"),
        ("oak", "Oak"),
        ("eucalyptus", "Eucalyptus"),
    ]
