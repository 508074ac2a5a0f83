"""Company domain service."""

from uuid import UUID

from application.mapping import map_company_for_creation, map_company_to_dto, map_employee_for_creation
from domain.entities import Company
from domain.exceptions import CompanyNotFoundError
from domain.repositories import RepositoryManager
from infrastructure import LoggerManager
from integration.models import CompanyDto, CompanyForCreationDto, CompanyForUpdateDto
from observability import add_span_attributes, companies_created, companies_deleted, companies_updated


class CompanyService:
    """Orchestrates company use cases between the handlers and the repositories.

    Every lookup that finds nothing raises ``CompanyNotFoundError``; callers
    never receive ``None``.
    """

    def __init__(self, repository: RepositoryManager, logger: LoggerManager) -> None:
        self._repository = repository
        self._logger = logger

    async def get_all_companies_async(self, track_changes: bool) -> list[CompanyDto]:
        self._logger.log_debug(f"Fetching all companies (track_changes={track_changes})")
        companies = await self._repository.company.get_all_companies_async(track_changes)
        return [map_company_to_dto(company) for company in companies]

    async def get_company_async(self, company_id: UUID, track_changes: bool) -> CompanyDto:
        self._logger.log_debug(f"Fetching company {company_id} (track_changes={track_changes})")
        company = await self._get_company_and_check_if_it_exists(company_id, track_changes)
        return map_company_to_dto(company)

    async def create_company_async(self, company: CompanyForCreationDto) -> CompanyDto:
        entity = map_company_for_creation(company)
        add_span_attributes({"company.id": entity.id, "company.employee_count": len(entity.employees)})

        await self._repository.company.create_company_async(entity)
        await self._save_async(f"creating company {entity.id}")

        companies_created.add(1)
        self._logger.log_info(f"Created company {entity.id} with {len(entity.employees)} employee(s)")
        return map_company_to_dto(entity)

    async def update_company_async(self, company_id: UUID, company: CompanyForUpdateDto, track_changes: bool) -> None:
        """Overwrite a company's fields and add the employees listed in the payload.

        New employees are attached to the retrieved entity, so neither the fields nor
        the employees are persisted unless it was retrieved with ``track_changes=True``.
        """
        entity = await self._get_company_and_check_if_it_exists(company_id, track_changes)
        add_span_attributes({"company.id": company_id, "company.track_changes": track_changes})

        entity.update(name=company.name, address=company.address, country=company.country)
        for employee in company.employees:
            entity.add_employee(map_employee_for_creation(employee))
        await self._save_async(f"updating company {company_id}")

        companies_updated.add(1)
        self._logger.log_info(f"Updated company {company_id}")

    async def delete_company_async(self, company_id: UUID, track_changes: bool) -> None:
        entity = await self._get_company_and_check_if_it_exists(company_id, track_changes)

        await self._repository.company.delete_company_async(entity)
        await self._save_async(f"deleting company {company_id}")

        companies_deleted.add(1)
        self._logger.log_info(f"Deleted company {company_id} and its {len(entity.employees)} employee(s)")

    async def _save_async(self, operation: str) -> None:
        try:
            await self._repository.save_async()
        except Exception as e:
            self._logger.log_error(f"Failed to save changes while {operation}: {e}", exc_info=True)
            raise

    async def _get_company_and_check_if_it_exists(self, company_id: UUID, track_changes: bool) -> Company:
        company = await self._repository.company.get_company_async(company_id, track_changes)
        if company is None:
            self._logger.log_warn(f"Company {company_id} doesn't exist in the database")
            raise CompanyNotFoundError(company_id)
        return company
