"""Update company command with handler."""

from dataclasses import dataclass
from uuid import UUID

from application.mediation import Command, CommandHandler
from application.services import CompanyService
from integration.models import CompanyForUpdateDto


@dataclass(frozen=True)
class UpdateCompanyCommand(Command[None]):
    """Command to overwrite an existing company."""

    company_id: UUID
    """ID of the company to update."""

    company: CompanyForUpdateDto
    """Update payload."""

    track_changes: bool = True
    """The company must be tracked for the update to be persisted."""


class UpdateCompanyCommandHandler(CommandHandler[UpdateCompanyCommand, None]):
    """Handler for updating companies."""

    def __init__(self, company_service: CompanyService) -> None:
        self.company_service = company_service

    async def handle_async(self, request: UpdateCompanyCommand) -> None:
        await self.company_service.update_company_async(request.company_id, request.company, request.track_changes)
