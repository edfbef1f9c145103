from __future__ import annotations

from typing import Dict, List

import plotly.graph_objects as go

from app.models.sequestration import CalculationResult

LINE_COLOR = "#4caf50"
FILL_COLOR = "rgba(76, 175, 80, 0.1)"

TABLE_COLUMNS = (
    "Year",
    "Biomass per Tree (kg)",
    "CO₂ per Tree (kg)",
    "Total CO₂ (tons)",
)


def build_cumulative_chart(result: CalculationResult) -> go.Figure:
    """Create a filled line chart of cumulative CO₂ by year.

    A new figure is returned on every call; the caller owns it.
    """
    if not result.year_records:
        fig = go.Figure()
        fig.add_annotation(
            text="No data available for this chart",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False,
            font=dict(size=16)
        )
        return fig

    years = [r.year for r in result.year_records]
    cumulative = [r.cumulative_co2_tons for r in result.year_records]

    fig = go.Figure(data=[
        go.Scatter(
            x=years,
            y=cumulative,
            name="Cumulative CO₂ Sequestered (tons)",
            mode="lines+markers",
            line=dict(color=LINE_COLOR, width=3, shape="spline"),
            marker=dict(size=6),
            fill="tozeroy",
            fillcolor=FILL_COLOR,
            hovertemplate="Year %{x}: %{y:,} tons CO₂<extra></extra>",
        )
    ])

    fig.update_layout(
        title=dict(
            text=f"{result.species_name}: cumulative CO₂ for {result.tree_count:,} trees",
            x=0.5, xanchor="center", font=dict(size=18)
        ),
        xaxis_title="Years",
        yaxis_title="CO₂ (metric tons)",
        yaxis=dict(rangemode="tozero"),
        template="plotly_white",
        hovermode="closest",
        height=500
    )

    return fig


def build_breakdown_rows(result: CalculationResult) -> List[Dict[str, str]]:
    """Rows for the yearly breakdown table, formatted for display."""
    # Cumulative values come straight from the records; never re-summed.
    return [
        {
            TABLE_COLUMNS[0]: str(r.year),
            TABLE_COLUMNS[1]: f"{r.biomass_per_tree_kg:.1f}",
            TABLE_COLUMNS[2]: f"{r.co2_per_tree_kg:.1f}",
            TABLE_COLUMNS[3]: f"{r.cumulative_co2_tons:,}",
        }
        for r in result.year_records
    ]


def format_total(result: CalculationResult) -> str:
    return f"{result.final_co2_tons:,}"
