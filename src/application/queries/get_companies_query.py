"""Company queries with handlers."""

from dataclasses import dataclass
from uuid import UUID

from application.mediation import Query, QueryHandler
from application.services import CompanyService
from integration.models import CompanyDto


@dataclass(frozen=True)
class GetCompaniesQuery(Query[list[CompanyDto]]):
    """Query to retrieve every company."""

    track_changes: bool = False


@dataclass(frozen=True)
class GetCompanyQuery(Query[CompanyDto]):
    """Query to retrieve a single company by ID."""

    company_id: UUID
    track_changes: bool = False


class GetCompaniesQueryHandler(QueryHandler[GetCompaniesQuery, list[CompanyDto]]):
    """Handle retrieval of all companies."""

    def __init__(self, company_service: CompanyService) -> None:
        self.company_service = company_service

    async def handle_async(self, request: GetCompaniesQuery) -> list[CompanyDto]:
        return await self.company_service.get_all_companies_async(request.track_changes)


class GetCompanyQueryHandler(QueryHandler[GetCompanyQuery, CompanyDto]):
    """Handle retrieval of one company; raises CompanyNotFoundError for unknown IDs."""

    def __init__(self, company_service: CompanyService) -> None:
        self.company_service = company_service

    async def handle_async(self, request: GetCompanyQuery) -> CompanyDto:
        return await self.company_service.get_company_async(request.company_id, request.track_changes)
