"""Employee domain service."""

from uuid import UUID

from application.mapping import map_employee_for_creation, map_employee_to_dto
from domain.entities import Employee
from domain.exceptions import CompanyNotFoundError, EmployeeNotFoundError
from domain.repositories import RepositoryManager
from infrastructure import LoggerManager
from integration.models import EmployeeDto, EmployeeForCreationDto, EmployeeForUpdateDto
from observability import add_span_attributes, employees_created, employees_deleted, employees_updated


class EmployeeService:
    """Employee use cases. Every operation first checks that the owning company exists."""

    def __init__(self, repository: RepositoryManager, logger: LoggerManager) -> None:
        self._repository = repository
        self._logger = logger

    async def get_employees_async(self, company_id: UUID, track_changes: bool) -> list[EmployeeDto]:
        await self._check_if_company_exists(company_id, track_changes)
        employees = await self._repository.employee.get_employees_async(company_id, track_changes)
        return [map_employee_to_dto(employee) for employee in employees]

    async def get_employee_async(self, company_id: UUID, employee_id: UUID, track_changes: bool) -> EmployeeDto:
        await self._check_if_company_exists(company_id, track_changes)
        employee = await self._get_employee_for_company_and_check_if_it_exists(company_id, employee_id, track_changes)
        return map_employee_to_dto(employee)

    async def create_employee_for_company_async(self, company_id: UUID, employee: EmployeeForCreationDto, track_changes: bool) -> EmployeeDto:
        await self._check_if_company_exists(company_id, track_changes)

        entity = map_employee_for_creation(employee)
        add_span_attributes({"company.id": company_id, "employee.id": entity.id})
        await self._repository.employee.create_employee_for_company_async(company_id, entity)
        await self._save_async(f"creating employee {entity.id} for company {company_id}")

        employees_created.add(1)
        self._logger.log_info(f"Created employee {entity.id} for company {company_id}")
        return map_employee_to_dto(entity)

    async def update_employee_for_company_async(
        self,
        company_id: UUID,
        employee_id: UUID,
        employee: EmployeeForUpdateDto,
        company_track_changes: bool,
        employee_track_changes: bool,
    ) -> None:
        await self._check_if_company_exists(company_id, company_track_changes)
        entity = await self._get_employee_for_company_and_check_if_it_exists(company_id, employee_id, employee_track_changes)

        entity.update(name=employee.name, age=employee.age, position=employee.position)
        await self._save_async(f"updating employee {employee_id} of company {company_id}")

        employees_updated.add(1)
        self._logger.log_info(f"Updated employee {employee_id} of company {company_id}")

    async def delete_employee_for_company_async(self, company_id: UUID, employee_id: UUID, track_changes: bool) -> None:
        await self._check_if_company_exists(company_id, track_changes)
        entity = await self._get_employee_for_company_and_check_if_it_exists(company_id, employee_id, track_changes)

        await self._repository.employee.delete_employee_async(entity)
        await self._save_async(f"deleting employee {employee_id} of company {company_id}")

        employees_deleted.add(1)
        self._logger.log_info(f"Deleted employee {employee_id} of company {company_id}")

    async def _save_async(self, operation: str) -> None:
        try:
            await self._repository.save_async()
        except Exception as e:
            self._logger.log_error(f"Failed to save changes while {operation}: {e}", exc_info=True)
            raise

    async def _check_if_company_exists(self, company_id: UUID, track_changes: bool) -> None:
        company = await self._repository.company.get_company_async(company_id, track_changes)
        if company is None:
            self._logger.log_warn(f"Company {company_id} doesn't exist in the database")
            raise CompanyNotFoundError(company_id)

    async def _get_employee_for_company_and_check_if_it_exists(self, company_id: UUID, employee_id: UUID, track_changes: bool) -> Employee:
        employee = await self._repository.employee.get_employee_async(company_id, employee_id, track_changes)
        if employee is None:
            self._logger.log_warn(f"Employee {employee_id} doesn't exist for company {company_id}")
            raise EmployeeNotFoundError(employee_id)
        return employee
