"""Structured logger for observability."""

import logging
from typing import Any, Optional

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("autofinance_analyzer")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_request(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a financing request.

    Args:
        request_id: Request identifier (UUID string)
        component: Component name (e.g., 'http', 'costs', 'recommendation')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_cost_calculation(
    request_id: str,
    vehicle_price: float,
    duration: int,
    mileage: int,
    cheapest_option: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log cost calculation event.

    Args:
        request_id: Request identifier
        vehicle_price: Vehicle price
        duration: Comparison horizon in years
        mileage: Yearly mileage
        cheapest_option: Option with the lowest usage cost
        **kwargs: Additional fields
    """
    fields = {
        "financing_inputs": {
            "vehicle_price": vehicle_price,
            "duration": duration,
            "mileage": mileage,
        },
    }
    if cheapest_option is not None:
        fields["cheapest_option"] = cheapest_option
    fields.update(kwargs)

    log_request(request_id=request_id, component="costs", **fields)


def log_recommendation(
    request_id: str,
    outcome: str,
    recommendation: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log recommendation service outcome.

    Args:
        request_id: Request identifier
        outcome: 'success', 'failed' or 'disabled'
        recommendation: Recommended option when the call succeeded
        **kwargs: Additional fields (e.g., error)
    """
    fields: dict[str, Any] = {"outcome": outcome}
    if recommendation is not None:
        fields["recommendation"] = recommendation
    fields.update(kwargs)

    level = logging.INFO if outcome == "success" else logging.WARNING
    log_request(request_id=request_id, component="recommendation", level=level, **fields)


# Export logger instance for ad-hoc messages
logger = _logger
