"""Data transfer objects exchanged between the API and application layers."""

from .company_dto import CompanyDto, CompanyForCreationDto, CompanyForUpdateDto
from .employee_dto import EmployeeDto, EmployeeForCreationDto, EmployeeForUpdateDto

__all__ = [
    "CompanyDto",
    "CompanyForCreationDto",
    "CompanyForUpdateDto",
    "EmployeeDto",
    "EmployeeForCreationDto",
    "EmployeeForUpdateDto",
]
