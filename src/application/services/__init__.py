"""Application services package.

Contains the domain services used by the request handlers and controllers.
"""

from .company_service import CompanyService
from .employee_service import EmployeeService
from .service_manager import ServiceManager

__all__ = [
    "CompanyService",
    "EmployeeService",
    "ServiceManager",
]
