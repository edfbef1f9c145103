from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from app.core.errors import INPUT_ERRORS_BY_CODE, TransportError, UnknownSpeciesError
from app.models.sequestration import CalculationResponse, CalculationResult

logger = logging.getLogger(__name__)


class RemoteSequestrationClient:
    """HTTP client for ``POST /api/v1/sequestration/calculate``.

    Validation envelopes (422 with ``success: false``) are raised as the
    matching ``CalculationInputError`` subclass; every other failure is a
    ``TransportError``.
    """

    _CALCULATE_PATH = "/api/v1/sequestration/calculate"

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session = session or requests.Session()

    def calculate(self, species: Any, num_trees: Any, years: Any) -> CalculationResult:
        url = f"{self._base_url}{self._CALCULATE_PATH}"
        payload = {"species": species, "num_trees": num_trees, "years": years}
        try:
            response = self._session.post(url, json=payload, timeout=self._timeout_s)
        except requests.RequestException as exc:
            logger.warning("Calculation endpoint unreachable at %s: %s", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        body = self._decode(response)

        if response.status_code == 422 and body.get("success") is False:
            self._raise_input_error(body)
        if not 200 <= response.status_code < 300:
            raise TransportError(f"Unexpected HTTP status {response.status_code}")
        if body.get("success") is not True:
            raise TransportError(f"Calculation reported failure: {body.get('error')!r}")

        try:
            return CalculationResponse.model_validate(body).to_result()
        except ValidationError as exc:
            raise TransportError(f"Malformed calculation response: {exc}") from exc

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(f"Response body is not JSON (HTTP {response.status_code})") from exc
        if not isinstance(body, dict):
            raise TransportError("Response body is not a JSON object")
        return body

    @staticmethod
    def _raise_input_error(body: Dict[str, Any]) -> None:
        error_cls = INPUT_ERRORS_BY_CODE.get(str(body.get("code")))
        if error_cls is None:
            raise TransportError(f"Unrecognised error code {body.get('code')!r}")
        if error_cls is UnknownSpeciesError:
            raise UnknownSpeciesError(message=body.get("error"))
        raise error_cls(body.get("error"))
