"""Structured logging for projection and roll-up passes."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredPassLogger:
    """Structured logger for one pass over an itinerary."""

    def log_pass(
        self,
        stage: str,
        *,
        inputs: int,
        outputs: int,
        latency_ms: float,
        skipped: int = 0,
        **fields: Any,
    ) -> None:
        """Log a completed pass with structured data."""
        log_data: dict[str, Any] = {
            "stage": stage,
            "inputs": inputs,
            "outputs": outputs,
            "skipped": skipped,
            "latency_ms": round(latency_ms, 2),
        }
        log_data.update(fields)

        log_msg = f"Pass complete: {stage} - {inputs} in, {outputs} out"

        if skipped:
            logger.warning(f"{log_msg}, {skipped} skipped", extra={"structured": log_data})
        else:
            logger.info(log_msg, extra={"structured": log_data})
