"""
Metrics synthesizer.

generate_base_metrics() draws impressions/clicks/cost/conversions/value for one
leaf cell from a stream seeded by the cell's full context. Ratios are derived
afterwards so aggregated rows get correct weighted CTR/CPC/etc.
"""
from __future__ import annotations

from typing import Dict, Iterable, Union

from gads_mock.data.benchmarks import DEVICE_WEIGHTS, NETWORK_WEIGHTS, get_benchmarks
from gads_mock.date_utils import day_of_week
from gads_mock.models import DEVICES, NETWORKS, BaseMetrics, DerivedMetrics, MetricsContext
from gads_mock.seeded_random import SeededRandom, create_seed
from gads_mock.utils import round_cents, round_int, safe_ratio

WEEKDAY_MULTIPLIER = 1.15

ALL_DEVICES = list(DEVICES)
ALL_NETWORKS = list(NETWORKS)


def metrics_seed(ctx: MetricsContext) -> str:
    return create_seed(
        ctx.account_id,
        ctx.campaign_id,
        ctx.ad_group_id,
        ctx.keyword_id or "all",
        ctx.date,
        ctx.device,
        ctx.network,
    )


def generate_base_metrics(ctx: MetricsContext) -> BaseMetrics:
    """
    Synthesize base metrics for one (date, entity, device, network) cell.

    Args:
        ctx: Full metrics context

    Returns:
        BaseMetrics with clicks <= impressions and conversions <= clicks
    """
    rng = SeededRandom(metrics_seed(ctx))
    benchmarks = get_benchmarks(ctx.industry, ctx.campaign_type)

    mean_impressions = (
        benchmarks.avg_daily_impressions
        * DEVICE_WEIGHTS[ctx.device]
        * NETWORK_WEIGHTS[ctx.network]
    )
    impressions = round_int(
        rng.gaussian(mean_impressions, mean_impressions * benchmarks.impression_variance)
    )
    impressions = round_int(
        rng.with_weekday_variance(impressions, day_of_week(ctx.date), WEEKDAY_MULTIPLIER)
    )
    impressions = max(0, impressions)

    ctr = rng.float_range(benchmarks.min_ctr, benchmarks.max_ctr) / 100
    clicks = min(round_int(impressions * ctr), impressions)

    cpc = rng.float_range(benchmarks.min_cpc, benchmarks.max_cpc)
    cost = round_cents(clicks * cpc)

    conversion_rate = rng.float_range(benchmarks.min_conversion_rate, benchmarks.max_conversion_rate) / 100
    conversions = min(round_int(clicks * conversion_rate), clicks)

    aov = rng.float_range(benchmarks.min_aov, benchmarks.max_aov)
    conversion_value = round_cents(conversions * aov)

    return BaseMetrics(
        impressions=impressions,
        clicks=clicks,
        cost=cost,
        conversions=conversions,
        conversion_value=conversion_value,
    )


def derive_metrics(base: BaseMetrics) -> DerivedMetrics:
    """Ratio metrics; any zero denominator gives 0."""
    return DerivedMetrics(
        ctr=safe_ratio(base.clicks, base.impressions, 100),
        cpc=safe_ratio(base.cost, base.clicks),
        cpm=safe_ratio(base.cost, base.impressions, 1000),
        conversion_rate=safe_ratio(base.conversions, base.clicks, 100),
        cost_per_conversion=safe_ratio(base.cost, base.conversions),
        roas=safe_ratio(base.conversion_value, base.cost),
    )


def calculate_derived_metrics(base: BaseMetrics) -> Dict[str, Union[int, float]]:
    """
    All eleven metrics keyed by API metric name.

    Example:
        >>> calculate_derived_metrics(BaseMetrics(1000, 50, 100.0, 5, 500.0))["roas"]
        5.0
    """
    full = base.to_dict()
    full.update(derive_metrics(base).to_dict())
    return full


def aggregate_metrics(metrics: Iterable[BaseMetrics]) -> BaseMetrics:
    """
    Element-wise sum; money rounded to cents after every addition.

    An empty input gives all zeros.
    """
    impressions = clicks = conversions = 0
    cost = conversion_value = 0.0

    for m in metrics:
        impressions += m.impressions
        clicks += m.clicks
        cost = round_cents(cost + m.cost)
        conversions += m.conversions
        conversion_value = round_cents(conversion_value + m.conversion_value)

    return BaseMetrics(
        impressions=impressions,
        clicks=clicks,
        cost=cost,
        conversions=conversions,
        conversion_value=conversion_value,
    )
