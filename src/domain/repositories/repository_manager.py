"""Abstract aggregate over all repositories."""

from abc import ABC, abstractmethod

from .company_repository import CompanyRepository
from .employee_repository import EmployeeRepository


class RepositoryManager(ABC):
    """Single entry point to every repository plus the commit operation."""

    @property
    @abstractmethod
    def company(self) -> CompanyRepository:
        pass

    @property
    @abstractmethod
    def employee(self) -> EmployeeRepository:
        pass

    @abstractmethod
    async def save_async(self) -> None:
        """Commit the changes made to tracked entities."""
        pass
