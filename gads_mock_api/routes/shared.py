"""
Shared helper functions used across API routes.
"""

from flask import current_app

from gads_mock.cache import StructureCache
from gads_mock.errors import AccountNotFoundError
from gads_mock.models import Account, AccountStructure
from gads_mock.report import ReportService


def get_structure_cache() -> StructureCache:
    """StructureCache injected by create_app()."""
    return current_app.config["STRUCTURE_CACHE"]


def get_report_service() -> ReportService:
    """ReportService injected by create_app()."""
    return current_app.config["REPORT_SERVICE"]


def require_account(account_id: str) -> Account:
    """
    Look up a seed account or raise a 404-mapped error.

    Raises:
        AccountNotFoundError: unknown account id
    """
    account = get_structure_cache().get_account(account_id)
    if account is None:
        raise AccountNotFoundError(account_id)
    return account


def require_structure(account_id: str) -> AccountStructure:
    """Generated (cached) structure for a known account."""
    structure = get_structure_cache().get_structure(account_id)
    if structure is None:
        raise AccountNotFoundError(account_id)
    return structure
