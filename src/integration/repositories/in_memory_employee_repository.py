"""In-memory implementation of EmployeeRepository."""

from typing import Callable
from uuid import UUID

from domain.entities import Employee
from domain.repositories import EmployeeRepository

from .in_memory_data_store import InMemoryDataStore, detach


class InMemoryEmployeeRepository(EmployeeRepository):
    """Employees are read from and written to their owning company."""

    def __init__(self, store: InMemoryDataStore, stage: Callable[[Callable[[], None]], None]) -> None:
        self._store = store
        self._stage = stage

    async def get_employees_async(self, company_id: UUID, track_changes: bool) -> list[Employee]:
        company = self._store.companies.get(company_id)
        if company is None:
            return []
        employees = sorted(company.employees, key=lambda e: e.name)
        return [detach(employee, track_changes) for employee in employees]

    async def get_employee_async(self, company_id: UUID, employee_id: UUID, track_changes: bool) -> Employee | None:
        company = self._store.companies.get(company_id)
        if company is None:
            return None
        for employee in company.employees:
            if employee.id == employee_id:
                return detach(employee, track_changes)
        return None

    async def create_employee_for_company_async(self, company_id: UUID, employee: Employee) -> None:
        employee.company_id = company_id

        def apply() -> None:
            self._store.companies[company_id].add_employee(employee)

        self._stage(apply)

    async def delete_employee_async(self, employee: Employee) -> None:
        def apply() -> None:
            company = self._store.companies.get(employee.company_id)
            if company is not None:
                company.employees = [e for e in company.employees if e.id != employee.id]

        self._stage(apply)
