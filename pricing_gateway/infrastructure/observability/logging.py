"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger.json import JsonFormatter

from pricing_gateway.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_quote(
    request_id: str,
    principal_cents: int,
    term_weeks: int,
    apr_percent: float,
    total_repayment_cents: int,
    duration_ms: float,
) -> None:
    """Log structured quote outcome for analysis"""
    logging.info(
        "Quote completed",
        extra={
            "request_id": request_id,
            "step": "quote_complete",
            "principal_cents": principal_cents,
            "term_weeks": term_weeks,
            "apr_percent": apr_percent,
            "total_repayment_cents": total_repayment_cents,
            "duration_ms": duration_ms,
        },
    )


def log_affordability(request_id: str, can_afford: bool, dti_ratio: Optional[float]) -> None:
    """Log affordability verdict"""
    logging.info(
        "Affordability evaluated",
        extra={
            "request_id": request_id,
            "step": "affordability_complete",
            "affordability_outcome": "affordable" if can_afford else "unaffordable",
            "dti_ratio": dti_ratio,
        },
    )
