"""Main application entry point."""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from api.controllers import CompaniesController, EmployeesController
from api.exception_handlers import configure_exception_handlers
from api.middleware import configure_middleware
from application.dispatching import configure_dispatcher
from application.services import ServiceManager
from application.settings import Settings, app_settings, configure_logging
from domain.repositories import RepositoryManager
from infrastructure import LoggerManager
from integration.repositories import InMemoryRepositoryManager

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, repository: RepositoryManager | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Composition happens here, explicitly and once:
    repository manager -> services -> dispatcher registry -> controllers.

    Args:
        settings: Settings to use instead of the environment-derived ``app_settings``
        repository: Repository manager to use instead of a fresh in-memory one

    Returns:
        Configured FastAPI application
    """
    settings = settings or app_settings
    configure_logging(log_level=settings.log_level)
    log.debug(f"🚀 Creating {settings.app_name} application...")

    repository = repository if repository is not None else InMemoryRepositoryManager()
    logger = LoggerManager()
    services = ServiceManager(repository, logger)
    dispatcher = configure_dispatcher(services, logger, required=CompaniesController.dispatched_requests)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Companies and their employees",
        version=settings.app_version,
        debug=settings.debug,
    )

    app.include_router(CompaniesController(dispatcher).router, prefix=settings.api_prefix)
    app.include_router(EmployeesController(services.employee_service).router, prefix=settings.api_prefix)

    static_dir = Path(settings.static_files_dir)
    if not static_dir.is_absolute():
        static_dir = Path(__file__).parent / static_dir
    if static_dir.is_dir():
        app.mount(settings.static_files_path, StaticFiles(directory=str(static_dir)), name="static")
    else:
        log.debug(f"Static files directory not found, skipping: {static_dir}")

    configure_exception_handlers(app)
    configure_middleware(app, settings)

    log.info("✅ Application created successfully!")
    log.info(f"   - API Docs: http://{settings.app_host}:{settings.app_port}/docs")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=app_settings.app_host,
        port=app_settings.app_port,
        reload=app_settings.debug,
        forwarded_allow_ips="*",
    )
