"""API controllers package."""

from .companies_controller import CompaniesController, CompanyForCreationRequest, CompanyForUpdateRequest, CompanyResponse
from .controller_base import ControllerBase
from .employees_controller import EmployeeForCreationRequest, EmployeeForUpdateRequest, EmployeeResponse, EmployeesController

__all__ = [
    "ControllerBase",
    "CompaniesController",
    "EmployeesController",
    # Request/response models
    "CompanyForCreationRequest",
    "CompanyForUpdateRequest",
    "CompanyResponse",
    "EmployeeForCreationRequest",
    "EmployeeForUpdateRequest",
    "EmployeeResponse",
]
