"""Repository contracts for the domain layer."""

from .company_repository import CompanyRepository
from .employee_repository import EmployeeRepository
from .repository_manager import RepositoryManager

__all__ = [
    "CompanyRepository",
    "EmployeeRepository",
    "RepositoryManager",
]
