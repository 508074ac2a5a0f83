"""Abstract repository for Employee entities."""

from abc import ABC, abstractmethod
from uuid import UUID

from domain.entities import Employee


class EmployeeRepository(ABC):
    """Abstract repository for Employee entities, always scoped to a company."""

    @abstractmethod
    async def get_employees_async(self, company_id: UUID, track_changes: bool) -> list[Employee]:
        """Retrieve the employees of a company ordered by name."""
        pass

    @abstractmethod
    async def get_employee_async(self, company_id: UUID, employee_id: UUID, track_changes: bool) -> Employee | None:
        """Retrieve one employee of a company."""
        pass

    @abstractmethod
    async def create_employee_for_company_async(self, company_id: UUID, employee: Employee) -> None:
        """Attach a new employee to a company."""
        pass

    @abstractmethod
    async def delete_employee_async(self, employee: Employee) -> None:
        """Remove an employee."""
        pass
