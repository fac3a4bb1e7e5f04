"""
Error tracking hook.

Failures are reported as exception events on the active OpenTelemetry
span. Without a configured SDK the tracer is a no-op, so this is safe to
call from anywhere, including tests.
"""

import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

logger = logging.getLogger(__name__)


def capture_exception(error: BaseException, attributes: Optional[dict[str, str]] = None) -> None:
    """
    Forward an exception to the error tracker.

    Args:
        error: The exception to record
        attributes: Extra span attributes (e.g. request path)
    """
    span = trace.get_current_span()
    span.record_exception(error, attributes=attributes or {})
    span.set_status(Status(StatusCode.ERROR, type(error).__name__))
    logger.debug(f"Captured {type(error).__name__}: {error}")


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer for manual instrumentation in a module."""
    return trace.get_tracer(name)
