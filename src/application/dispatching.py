"""Builds the process-wide dispatcher from the application's handlers."""

import logging
from typing import Iterable

from application.commands import CreateCompanyCommandHandler, UpdateCompanyCommandHandler
from application.mediation import Dispatcher, DispatcherRegistry
from application.notifications import CompanyDeletedAuditHandler, DeleteCompanyHandler
from application.queries import GetCompaniesQueryHandler, GetCompanyQueryHandler
from application.services import ServiceManager
from infrastructure import LoggerManager

log = logging.getLogger(__name__)


def configure_dispatcher(services: ServiceManager, logger: LoggerManager, required: Iterable[type] = ()) -> Dispatcher:
    """Register every handler and listener, verify the required request types and freeze the registry.

    Listeners of the same notification run in the order they are listed here.

    Raises:
        DuplicateHandlerRegistration: If two handlers claim the same request type
        NoHandlerRegistered: If a type listed in ``required`` has no handler
    """
    company_service = services.company_service

    registry = DispatcherRegistry()
    registry.register_all(
        [
            GetCompaniesQueryHandler(company_service),
            GetCompanyQueryHandler(company_service),
            CreateCompanyCommandHandler(company_service),
            UpdateCompanyCommandHandler(company_service),
            DeleteCompanyHandler(company_service),
            CompanyDeletedAuditHandler(logger),
        ]
    )
    registry.require(*required)

    log.info(f"Dispatcher bindings: {registry.describe()}")
    return Dispatcher(registry)
