"""Create company command with handler."""

import logging
from dataclasses import dataclass

from application.mediation import Command, CommandHandler
from application.services import CompanyService
from integration.models import CompanyDto, CompanyForCreationDto

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCompanyCommand(Command[CompanyDto]):
    """Command to create a company, optionally with its first employees."""

    company: CompanyForCreationDto
    """Creation payload."""


class CreateCompanyCommandHandler(CommandHandler[CreateCompanyCommand, CompanyDto]):
    """Handler for creating companies."""

    def __init__(self, company_service: CompanyService) -> None:
        self.company_service = company_service

    async def handle_async(self, request: CreateCompanyCommand) -> CompanyDto:
        company = await self.company_service.create_company_async(request.company)
        log.debug(f"CreateCompanyCommand produced company {company.id}")
        return company
