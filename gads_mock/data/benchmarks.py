"""
Industry benchmarks that bound every synthetic metric draw.

Percent fields (CTR, conversion rate) are stored as percentages, money fields
in whole currency units.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class MetricBenchmarks:
    avg_daily_impressions: float
    impression_variance: float          # std dev as fraction of mean
    min_ctr: float                      # %
    max_ctr: float
    min_cpc: float                      # $
    max_cpc: float
    min_conversion_rate: float          # %
    max_conversion_rate: float
    min_aov: float                      # average order value
    max_aov: float


INDUSTRY_BENCHMARKS: Dict[str, MetricBenchmarks] = {
    "ecommerce": MetricBenchmarks(
        avg_daily_impressions=8000, impression_variance=0.3,
        min_ctr=1.5, max_ctr=4.5,
        min_cpc=0.5, max_cpc=2.5,
        min_conversion_rate=2.0, max_conversion_rate=5.0,
        min_aov=50, max_aov=200,
    ),
    "saas": MetricBenchmarks(
        avg_daily_impressions=5000, impression_variance=0.35,
        min_ctr=2.0, max_ctr=5.0,
        min_cpc=2.0, max_cpc=8.0,
        min_conversion_rate=3.0, max_conversion_rate=8.0,
        min_aov=100, max_aov=500,
    ),
    "local_services": MetricBenchmarks(
        avg_daily_impressions=3000, impression_variance=0.4,
        min_ctr=3.0, max_ctr=7.0,
        min_cpc=3.0, max_cpc=15.0,
        min_conversion_rate=5.0, max_conversion_rate=12.0,
        min_aov=150, max_aov=800,
    ),
    "travel": MetricBenchmarks(
        avg_daily_impressions=10000, impression_variance=0.35,
        min_ctr=2.0, max_ctr=5.5,
        min_cpc=0.8, max_cpc=3.0,
        min_conversion_rate=1.5, max_conversion_rate=4.0,
        min_aov=500, max_aov=3000,
    ),
    "finance": MetricBenchmarks(
        avg_daily_impressions=4000, impression_variance=0.3,
        min_ctr=2.5, max_ctr=6.0,
        min_cpc=3.0, max_cpc=20.0,
        min_conversion_rate=2.0, max_conversion_rate=6.0,
        min_aov=200, max_aov=2000,
    ),
}

# Partial overrides merged on top of the industry baseline.
# AOV is never overridden, display/video keep the industry's order values.
CAMPAIGN_TYPE_OVERRIDES: Dict[str, Dict[str, Any]] = {
    "SEARCH": {},
    "DISPLAY": {
        "avg_daily_impressions": 25000,
        "min_ctr": 0.1,
        "max_ctr": 0.8,
        "min_cpc": 0.1,
        "max_cpc": 1.0,
    },
    "VIDEO": {
        "avg_daily_impressions": 15000,
        "min_ctr": 0.5,
        "max_ctr": 2.0,
        "min_cpc": 0.05,                # cost-per-view pricing
        "max_cpc": 0.3,
    },
    "SHOPPING": {
        "avg_daily_impressions": 6000,
        "min_ctr": 1.0,
        "max_ctr": 3.0,
        "min_conversion_rate": 1.5,
        "max_conversion_rate": 4.0,
    },
}

# Traffic share, each set sums to 1
DEVICE_WEIGHTS: Dict[str, float] = {
    "MOBILE": 0.55,
    "DESKTOP": 0.35,
    "TABLET": 0.1,
}

NETWORK_WEIGHTS: Dict[str, float] = {
    "SEARCH": 0.7,
    "DISPLAY": 0.25,
    "YOUTUBE": 0.05,
}


def get_benchmarks(industry: str, campaign_type: str) -> MetricBenchmarks:
    """Industry baseline with the campaign type's overrides applied field by field."""
    base = INDUSTRY_BENCHMARKS[industry]
    overrides = CAMPAIGN_TYPE_OVERRIDES.get(campaign_type, {})
    return replace(base, **overrides)
