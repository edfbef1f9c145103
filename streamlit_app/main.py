from __future__ import annotations

from dotenv import load_dotenv

from app.core.config import get_app_config
from app.core.logging import configure_logging
from app.core.species import DEFAULT_SPECIES
from streamlit_app.backends import build_backend
from streamlit_app.ui import CalculatorUI


def main() -> None:
    load_dotenv()
    cfg = get_app_config()
    configure_logging(cfg.log_level)

    backend = build_backend(
        cfg.calculator_backend,
        species=DEFAULT_SPECIES,
        api_url=cfg.calculator_api_url,
        timeout_s=cfg.calculator_api_timeout_s,
    )
    ui = CalculatorUI(backend=backend, species=DEFAULT_SPECIES, backend_label=cfg.calculator_backend)
    ui.render()


if __name__ == "__main__":
    main()
