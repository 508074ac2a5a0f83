"""Observability package: OpenTelemetry metrics and tracing helpers."""

from .metrics import (
    companies_created,
    companies_deleted,
    companies_updated,
    employees_created,
    employees_deleted,
    employees_updated,
    listener_failures,
    request_processing_time,
)
from .tracing import add_span_attributes

__all__ = [
    "add_span_attributes",
    "companies_created",
    "companies_updated",
    "companies_deleted",
    "employees_created",
    "employees_updated",
    "employees_deleted",
    "listener_failures",
    "request_processing_time",
]
