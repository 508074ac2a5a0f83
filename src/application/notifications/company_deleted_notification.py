"""Company deleted notification with its listeners."""

import logging
from dataclasses import dataclass
from uuid import UUID

from application.mediation import Notification, NotificationHandler
from application.services import CompanyService
from domain.exceptions import CompanyNotFoundError
from infrastructure import LoggerManager

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompanyDeletedNotification(Notification):
    """Announces that a company must be considered deleted."""

    company_id: UUID
    track_changes: bool = False


class DeleteCompanyHandler(NotificationHandler[CompanyDeletedNotification]):
    """Removes the company and its employees from the store.

    Unknown IDs are logged and ignored: publishing reports nothing back to the
    caller, so a missing company is not a listener failure.
    """

    def __init__(self, company_service: CompanyService) -> None:
        self.company_service = company_service

    async def handle_async(self, notification: CompanyDeletedNotification) -> None:
        try:
            await self.company_service.delete_company_async(notification.company_id, notification.track_changes)
        except CompanyNotFoundError:
            log.warning(f"Company {notification.company_id} not found, nothing to delete")


class CompanyDeletedAuditHandler(NotificationHandler[CompanyDeletedNotification]):
    """Writes an audit line for every delete request."""

    def __init__(self, logger: LoggerManager) -> None:
        self.logger = logger

    async def handle_async(self, notification: CompanyDeletedNotification) -> None:
        self.logger.log_info(f"Delete requested for company {notification.company_id}")
