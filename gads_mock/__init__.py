"""
Mock Google Ads data engine.

Deterministically fabricates account hierarchies (campaigns, ad groups,
keywords) and synthesizes performance metrics for any date range, then
aggregates them into paginated reports.
"""

from .cache import StructureCache
from .errors import AccountNotFoundError, InvalidRequestError, MockApiError
from .models import (
    ALL_METRIC_NAMES,
    DIMENSION_NAMES,
    Account,
    AccountStructure,
    BaseMetrics,
    MetricsContext,
    ReportFilters,
    ReportRequest,
)
from .report import ReportService
from .seeded_random import SeededRandom, create_seed

__all__ = [
    'StructureCache',
    'AccountNotFoundError',
    'InvalidRequestError',
    'MockApiError',
    'ALL_METRIC_NAMES',
    'DIMENSION_NAMES',
    'Account',
    'AccountStructure',
    'BaseMetrics',
    'MetricsContext',
    'ReportFilters',
    'ReportRequest',
    'ReportService',
    'SeededRandom',
    'create_seed',
]
