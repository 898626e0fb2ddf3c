"""
Static reference data: seed accounts, campaign and keyword templates, benchmarks.
"""

from .accounts import MOCK_ACCOUNTS, AccountDirectory
from .benchmarks import (
    DEVICE_WEIGHTS,
    NETWORK_WEIGHTS,
    MetricBenchmarks,
    get_benchmarks,
)
from .campaign_templates import CAMPAIGN_TEMPLATES, CampaignTemplate
from .keyword_templates import KEYWORD_TEMPLATES, generate_keywords_for_ad_group

__all__ = [
    'MOCK_ACCOUNTS',
    'AccountDirectory',
    'DEVICE_WEIGHTS',
    'NETWORK_WEIGHTS',
    'MetricBenchmarks',
    'get_benchmarks',
    'CAMPAIGN_TEMPLATES',
    'CampaignTemplate',
    'KEYWORD_TEMPLATES',
    'generate_keywords_for_ad_group',
]
