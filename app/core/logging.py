from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Tuple

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger (idempotent)."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    root.setLevel(level)


class CalculationLogger(Protocol):
    def log(self, payload: Dict[str, object]) -> Tuple[bool, Optional[str]]:  # (logged, log_id)
        ...


@dataclass
class NoOpLogger:
    def log(self, payload: Dict[str, object]) -> Tuple[bool, Optional[str]]:
        return False, None


@dataclass
class StdlibCalculationLogger:
    """Forwards calculation payloads to a stdlib logger at INFO level."""

    name: str = "app.audit"

    def log(self, payload: Dict[str, object]) -> Tuple[bool, Optional[str]]:
        logging.getLogger(self.name).info("calculation completed: %s", payload)
        return True, None
