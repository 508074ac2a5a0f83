"""Tracing helpers."""

from typing import Any

from opentelemetry import trace


def add_span_attributes(attributes: dict[str, Any]) -> None:
    """Attach attributes to the current span, skipping ``None`` values."""
    span = trace.get_current_span()
    for key, value in attributes.items():
        if value is None:
            continue
        if not isinstance(value, (str, bool, int, float)):
            value = str(value)
        span.set_attribute(key, value)
