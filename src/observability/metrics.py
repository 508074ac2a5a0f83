"""Business metrics for the Company Employees service.

Defines OpenTelemetry metrics for:
- Companies: created, updated, deleted
- Employees: created, updated, deleted
- Dispatcher: notification listener failures
"""

from opentelemetry import metrics

meter = metrics.get_meter(__name__)

# =============================================================================
# COMPANY METRICS
# =============================================================================

companies_created = meter.create_counter(
    name="company_employees.companies.created",
    description="Total companies created",
    unit="1",
)

companies_updated = meter.create_counter(
    name="company_employees.companies.updated",
    description="Total companies updated",
    unit="1",
)

companies_deleted = meter.create_counter(
    name="company_employees.companies.deleted",
    description="Total companies deleted",
    unit="1",
)

# =============================================================================
# EMPLOYEE METRICS
# =============================================================================

employees_created = meter.create_counter(
    name="company_employees.employees.created",
    description="Total employees created",
    unit="1",
)

employees_updated = meter.create_counter(
    name="company_employees.employees.updated",
    description="Total employees updated",
    unit="1",
)

employees_deleted = meter.create_counter(
    name="company_employees.employees.deleted",
    description="Total employees deleted",
    unit="1",
)

# =============================================================================
# DISPATCHER METRICS
# =============================================================================

listener_failures = meter.create_counter(
    name="company_employees.dispatcher.listener_failures",
    description="Notification listeners that raised while handling a notification",
    unit="1",
)

request_processing_time = meter.create_histogram(
    name="company_employees.dispatcher.request_processing_time",
    description="Time spent by request handlers",
    unit="ms",
)
