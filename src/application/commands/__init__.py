"""Commands and their handlers."""

from .create_company_command import CreateCompanyCommand, CreateCompanyCommandHandler
from .update_company_command import UpdateCompanyCommand, UpdateCompanyCommandHandler

__all__ = [
    "CreateCompanyCommand",
    "CreateCompanyCommandHandler",
    "UpdateCompanyCommand",
    "UpdateCompanyCommandHandler",
]
