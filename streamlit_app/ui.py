from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from app.core.errors import CalculationInputError, TransportError
from app.core.species import SpeciesCatalog
from app.models.sequestration import (
    MAX_DURATION_YEARS,
    MAX_TREE_COUNT,
    MIN_DURATION_YEARS,
    MIN_TREE_COUNT,
    CalculationResult,
)
from streamlit_app.backends import CalculatorBackend, species_options
from streamlit_app.charts import build_breakdown_rows, build_cumulative_chart, format_total

logger = logging.getLogger(__name__)


class CalculatorUI:
    """Streamlit UI layer for the afforestation impact calculator."""

    def __init__(self, backend: CalculatorBackend, species: SpeciesCatalog, backend_label: str = "local") -> None:
        self._backend = backend
        self._species = species
        self._backend_label = backend_label

    def _ensure_session(self) -> None:
        """Initialize session state variables."""
        if "result" not in st.session_state:
            st.session_state.result: Optional[CalculationResult] = None
        if "error_message" not in st.session_state:
            st.session_state.error_message: Optional[str] = None

    @staticmethod
    def _clear_results() -> None:
        st.session_state.result = None
        st.session_state.error_message = None

    def _render_sidebar(self) -> None:
        with st.sidebar:
            st.header("⚙️ Settings")
            st.write(f"**Backend:** {self._backend_label}")
            st.divider()
            st.header("🌲 Species")
            for species_id, profile in self._species.items():
                with st.expander(profile.name):
                    st.write(f"**Max biomass:** {profile.max_biomass_kg:,.0f} kg/tree")
                    st.write(f"**Growth rate:** {profile.growth_rate}/yr")
                    st.write(f"**Wood density:** {profile.wood_density}")
                    st.write(f"**Carbon fraction:** {profile.carbon_fraction}")
                    if profile.max_age_years is not None:
                        st.write(f"**Nominal max age:** {profile.max_age_years} years")

    def _calculate(self, species_id: Optional[str], num_trees: Optional[int], years: Optional[int]) -> None:
        self._clear_results()
        try:
            with st.spinner("Calculating…"):
                st.session_state.result = self._backend.calculate(species_id, num_trees, years)
        except CalculationInputError as err:
            st.session_state.error_message = err.message
        except TransportError as err:
            logger.warning("Remote calculation failed: %s", err.reason)
            st.session_state.error_message = TransportError.user_message

    def _render_results(self, result: CalculationResult) -> None:
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Total CO₂ sequestered (tons)", format_total(result))
        with col2:
            st.metric("Project duration (years)", result.duration_years)

        st.plotly_chart(build_cumulative_chart(result), width="stretch")

        st.subheader("Yearly breakdown")
        st.dataframe(build_breakdown_rows(result), width="stretch", hide_index=True)

    def render(self) -> None:
        """Main render method for the calculator UI."""
        st.set_page_config(page_title="Afforestation Impact Calculator", page_icon="🌳", layout="centered")
        self._ensure_session()
        st.title("🌳 Afforestation Impact Calculator")
        st.caption("Estimate the CO₂ your trees will capture with a logistic biomass growth model")

        self._render_sidebar()

        options = species_options(self._species)
        labels = dict(options)
        species_id = st.selectbox(
            "Tree species",
            options=[species_id for species_id, _ in options],
            format_func=lambda key: labels.get(key, key),
            index=None,
            placeholder="Select a species",
            on_change=self._clear_results,
        )
        num_trees = st.number_input(
            "Number of trees",
            min_value=MIN_TREE_COUNT,
            max_value=MAX_TREE_COUNT,
            value=1000,
            step=100,
            on_change=self._clear_results,
        )
        years = st.number_input(
            "Project duration (years)",
            min_value=MIN_DURATION_YEARS,
            max_value=MAX_DURATION_YEARS,
            value=10,
            step=1,
            on_change=self._clear_results,
        )

        if st.button("Calculate impact", type="primary", width="stretch"):
            self._calculate(species_id, num_trees, years)

        if st.session_state.error_message:
            st.error(st.session_state.error_message)
        elif st.session_state.result is not None:
            self._render_results(st.session_state.result)
