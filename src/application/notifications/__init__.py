"""Notifications and their listeners."""

from .company_deleted_notification import CompanyDeletedAuditHandler, CompanyDeletedNotification, DeleteCompanyHandler

__all__ = [
    "CompanyDeletedNotification",
    "DeleteCompanyHandler",
    "CompanyDeletedAuditHandler",
]
