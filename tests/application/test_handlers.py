"""Company command, query and notification handler tests."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from application.commands import CreateCompanyCommand, CreateCompanyCommandHandler, UpdateCompanyCommand, UpdateCompanyCommandHandler
from application.dispatching import configure_dispatcher
from application.mediation import NoHandlerRegistered, RegistryFrozenError
from application.notifications import CompanyDeletedAuditHandler, CompanyDeletedNotification, DeleteCompanyHandler
from application.queries import GetCompaniesQuery, GetCompaniesQueryHandler, GetCompanyQuery, GetCompanyQueryHandler
from application.services import CompanyService, ServiceManager
from domain.exceptions import CompanyNotFoundError
from infrastructure import LoggerManager
from integration.repositories import InMemoryDataStore
from tests.fixtures.factories import CompanyFactory, seed


@pytest.fixture
def mock_company_service() -> MagicMock:
    """Provide a CompanyService whose coroutines are AsyncMocks."""
    return MagicMock(spec=CompanyService)


class TestCompanyQueries:
    @pytest.mark.asyncio
    async def test_get_companies_passes_track_changes(self, mock_company_service: MagicMock) -> None:
        companies = [CompanyFactory.dto()]
        mock_company_service.get_all_companies_async = AsyncMock(return_value=companies)

        result = await GetCompaniesQueryHandler(mock_company_service).handle_async(GetCompaniesQuery(track_changes=False))

        assert result == companies
        mock_company_service.get_all_companies_async.assert_awaited_once_with(False)

    @pytest.mark.asyncio
    async def test_get_company_propagates_not_found(self, mock_company_service: MagicMock) -> None:
        company_id = uuid4()
        mock_company_service.get_company_async = AsyncMock(side_effect=CompanyNotFoundError(company_id))

        with pytest.raises(CompanyNotFoundError):
            await GetCompanyQueryHandler(mock_company_service).handle_async(GetCompanyQuery(company_id=company_id))


class TestCompanyCommands:
    @pytest.mark.asyncio
    async def test_create_company_returns_created_dto(self, mock_company_service: MagicMock) -> None:
        payload = CompanyFactory.creation_dto()
        created = CompanyFactory.dto()
        mock_company_service.create_company_async = AsyncMock(return_value=created)

        result = await CreateCompanyCommandHandler(mock_company_service).handle_async(CreateCompanyCommand(company=payload))

        assert result == created
        mock_company_service.create_company_async.assert_awaited_once_with(payload)

    @pytest.mark.asyncio
    async def test_update_company_forwards_tracking_flag(self, mock_company_service: MagicMock) -> None:
        company_id = uuid4()
        payload = CompanyFactory.update_dto()
        mock_company_service.update_company_async = AsyncMock(return_value=None)

        result = await UpdateCompanyCommandHandler(mock_company_service).handle_async(UpdateCompanyCommand(company_id=company_id, company=payload))

        assert result is None
        mock_company_service.update_company_async.assert_awaited_once_with(company_id, payload, True)


class TestCompanyDeletedListeners:
    @pytest.mark.asyncio
    async def test_delete_listener_deletes_company(self, mock_company_service: MagicMock) -> None:
        company_id = uuid4()
        mock_company_service.delete_company_async = AsyncMock(return_value=None)

        await DeleteCompanyHandler(mock_company_service).handle_async(CompanyDeletedNotification(company_id=company_id))

        mock_company_service.delete_company_async.assert_awaited_once_with(company_id, False)

    @pytest.mark.asyncio
    async def test_delete_listener_ignores_unknown_company(self, mock_company_service: MagicMock) -> None:
        company_id = uuid4()
        mock_company_service.delete_company_async = AsyncMock(side_effect=CompanyNotFoundError(company_id))

        await DeleteCompanyHandler(mock_company_service).handle_async(CompanyDeletedNotification(company_id=company_id))

    @pytest.mark.asyncio
    async def test_audit_listener_logs_the_request(self) -> None:
        logger = MagicMock(spec=LoggerManager)
        company_id = uuid4()

        await CompanyDeletedAuditHandler(logger).handle_async(CompanyDeletedNotification(company_id=company_id))

        logger.log_info.assert_called_once()
        assert str(company_id) in logger.log_info.call_args[0][0]


class TestConfigureDispatcher:
    @pytest.mark.asyncio
    async def test_dispatcher_round_trip(self, services: ServiceManager, logger_manager: MagicMock) -> None:
        dispatcher = configure_dispatcher(services, logger_manager, required=[GetCompaniesQuery, GetCompanyQuery, CreateCompanyCommand, UpdateCompanyCommand])

        created = await dispatcher.send_async(CreateCompanyCommand(company=CompanyFactory.creation_dto()))
        fetched = await dispatcher.send_async(GetCompanyQuery(company_id=created.id))

        assert fetched == created

    @pytest.mark.asyncio
    async def test_published_delete_removes_company(self, services: ServiceManager, logger_manager: MagicMock, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create()
        seed(store, company)
        dispatcher = configure_dispatcher(services, logger_manager)

        await dispatcher.publish_async(CompanyDeletedNotification(company_id=company.id))

        assert company.id not in store.companies
        logger_manager.log_info.assert_any_call(f"Delete requested for company {company.id}")

    def test_listeners_run_delete_then_audit(self, services: ServiceManager, logger_manager: MagicMock) -> None:
        dispatcher = configure_dispatcher(services, logger_manager)

        listeners = dispatcher.registry.get_notification_handlers(CompanyDeletedNotification)

        assert [type(listener) for listener in listeners] == [DeleteCompanyHandler, CompanyDeletedAuditHandler]

    def test_unbound_required_type_fails_at_startup(self, services: ServiceManager, logger_manager: MagicMock) -> None:
        class UnknownQuery(GetCompaniesQuery):
            pass

        with pytest.raises(NoHandlerRegistered):
            configure_dispatcher(services, logger_manager, required=[UnknownQuery])

    def test_registry_is_frozen_after_configuration(self, services: ServiceManager, logger_manager: MagicMock) -> None:
        dispatcher = configure_dispatcher(services, logger_manager)

        assert dispatcher.registry.frozen
        with pytest.raises(RegistryFrozenError):
            dispatcher.registry.register(GetCompaniesQueryHandler(services.company_service))
