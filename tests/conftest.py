"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Settings tuned for tests (no HTTPS redirection, quiet logging)
- The in-memory repository manager and domain services
- A fully composed application and its TestClient
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from application.services import CompanyService, EmployeeService, ServiceManager
from application.settings import Settings
from infrastructure import LoggerManager
from integration.repositories import InMemoryDataStore, InMemoryRepositoryManager
from main import create_app

# ============================================================================
# SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Development settings without HTTPS redirection."""
    return Settings(environment="development", enable_https_redirection=False, log_level="WARNING", debug=False)


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def store() -> InMemoryDataStore:
    return InMemoryDataStore()


@pytest.fixture
def repository(store: InMemoryDataStore) -> InMemoryRepositoryManager:
    """Provide a repository manager over an empty in-memory store."""
    return InMemoryRepositoryManager(store)


# ============================================================================
# SERVICE FIXTURES
# ============================================================================


@pytest.fixture
def logger_manager() -> MagicMock:
    """Provide a LoggerManager mock so log calls can be asserted."""
    return MagicMock(spec=LoggerManager)


@pytest.fixture
def services(repository: InMemoryRepositoryManager, logger_manager: MagicMock) -> ServiceManager:
    return ServiceManager(repository, logger_manager)


@pytest.fixture
def company_service(services: ServiceManager) -> CompanyService:
    return services.company_service


@pytest.fixture
def employee_service(services: ServiceManager) -> EmployeeService:
    return services.employee_service


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================


@pytest.fixture
def app(settings: Settings, repository: InMemoryRepositoryManager) -> FastAPI:
    return create_app(settings, repository)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
