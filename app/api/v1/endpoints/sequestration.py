from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_species_catalog
from app.core.errors import CalculationInputError
from app.core.logging import StdlibCalculationLogger
from app.core.species import SpeciesCatalog
from app.models.sequestration import CalculationResponse, ErrorResponse, SpeciesInfo
from app.services.sequestration_service import SequestrationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sequestration")


def get_sequestration_service(
    species: SpeciesCatalog = Depends(get_species_catalog),
) -> SequestrationService:
    return SequestrationService(species=species, audit_logger=StdlibCalculationLogger())


def _error(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, code=code).model_dump(),
    )


@router.get("/species", response_model=List[SpeciesInfo])
async def list_species(
    service: SequestrationService = Depends(get_sequestration_service),
) -> List[SpeciesInfo]:
    return service.list_species()


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
async def calculate_sequestration(
    request: Request,
    service: SequestrationService = Depends(get_sequestration_service),
) -> JSONResponse | CalculationResponse:
    try:
        payload: Dict[str, Any] = await request.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    try:
        result = service.calculate(
            species=payload.get("species"),
            num_trees=payload.get("num_trees"),
            years=payload.get("years"),
        )
    except CalculationInputError as err:
        return _error(422, err.message, err.code)
    except Exception:
        logger.exception("Sequestration calculation failed")
        return _error(500, "Failed to calculate impact. Please try again.", "COMPUTATION_ERROR")
    return result.to_response()
