"""
Metrics synthesizer tests.

Test Flow:
1. Same context -> same metrics, any context change -> new draw
2. Funnel constraints hold for every industry / campaign type / device / network
3. Derived ratios (and zero-denominator guard)
4. Aggregation sums with cent rounding

Run: python tools/testing/test_metrics_generator.py
"""

import sys
from datetime import date, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from gads_mock.date_utils import expand_date_range
from gads_mock.generators.metrics import (
    aggregate_metrics,
    calculate_derived_metrics,
    derive_metrics,
    generate_base_metrics,
    metrics_seed,
)
from gads_mock.models import (
    ALL_METRIC_NAMES,
    CAMPAIGN_TYPES,
    DEVICES,
    INDUSTRIES,
    NETWORKS,
    BaseMetrics,
    MetricsContext,
)


def make_context(**overrides) -> MetricsContext:
    values = dict(
        account_id="123-456-7890",
        campaign_id="camp_001",
        ad_group_id="camp_001_ag_01",
        keyword_id="camp_001_ag_01_kw_01",
        date="2024-01-15",
        device="MOBILE",
        network="SEARCH",
        industry="ecommerce",
        campaign_type="SEARCH",
    )
    values.update(overrides)
    return MetricsContext(**values)


def test_same_context_same_metrics():
    """Calling twice with the same context returns identical records."""
    print("\n=== TEST 1: Deterministic Metrics ===")

    ctx = make_context()
    m1 = generate_base_metrics(ctx)
    m2 = generate_base_metrics(make_context())

    assert m1 == m2, f"Expected identical metrics, got {m1} vs {m2}"
    print(f"✅ PASS: {m1}")


def test_context_fields_change_the_draw():
    base = generate_base_metrics(make_context())

    variants = [
        make_context(date="2024-01-16"),
        make_context(device="DESKTOP"),
        make_context(keyword_id="camp_001_ag_01_kw_02"),
        make_context(campaign_id="camp_002"),
    ]
    for ctx in variants:
        assert generate_base_metrics(ctx) != base, f"{ctx} should produce a different draw"


def test_seed_includes_every_context_part():
    assert metrics_seed(make_context()) == (
        "123-456-7890:camp_001:camp_001_ag_01:camp_001_ag_01_kw_01:2024-01-15:MOBILE:SEARCH"
    )
    assert ":all:" in metrics_seed(make_context(keyword_id=None))


def test_funnel_constraints_hold_everywhere():
    """clicks <= impressions, conversions <= clicks, nothing negative."""
    print("\n=== TEST: Funnel Constraints ===")

    dates = expand_date_range("2024-03-01", "2024-03-07")
    checked = 0

    for industry in INDUSTRIES:
        for campaign_type in CAMPAIGN_TYPES:
            for device in DEVICES:
                for network in NETWORKS:
                    for d in dates:
                        m = generate_base_metrics(make_context(
                            industry=industry,
                            campaign_type=campaign_type,
                            device=device,
                            network=network,
                            date=d,
                        ))
                        assert m.impressions >= 0
                        assert 0 <= m.clicks <= m.impressions, m
                        assert 0 <= m.conversions <= m.clicks, m
                        assert m.cost >= 0
                        assert m.conversion_value >= 0
                        assert round(m.cost, 2) == m.cost
                        assert round(m.conversion_value, 2) == m.conversion_value
                        assert isinstance(m.impressions, int)
                        assert isinstance(m.clicks, int)
                        assert isinstance(m.conversions, int)
                        checked += 1

    print(f"✅ PASS: {checked} cells within constraints")


def test_impressions_track_benchmark_mean():
    """ecommerce / SEARCH / MOBILE / SEARCH: mean 8000 * 0.55 * 0.7 = 3080 before weekday scaling."""
    start = date(2023, 1, 2)
    samples = [
        generate_base_metrics(make_context(date=(start + timedelta(days=i)).isoformat())).impressions
        for i in range(364)
    ]
    mean = sum(samples) / len(samples)

    # 5 weekdays at x1.15, 2 weekend days at /1.15
    expected = 3080 * (5 * 1.15 + 2 / 1.15) / 7
    assert abs(mean - expected) / expected < 0.15, f"Mean {mean:.0f} too far from {expected:.0f}"


def test_derived_metrics_example():
    full = calculate_derived_metrics(BaseMetrics(1000, 50, 100.0, 5, 500.0))

    assert full == {
        "impressions": 1000,
        "clicks": 50,
        "cost": 100.0,
        "conversions": 5,
        "conversionValue": 500.0,
        "ctr": 5.0,
        "cpc": 2.0,
        "cpm": 100.0,
        "conversionRate": 10.0,
        "costPerConversion": 20.0,
        "roas": 5.0,
    }
    assert list(full) == list(ALL_METRIC_NAMES)


def test_derived_metrics_rounding():
    derived = derive_metrics(BaseMetrics(3, 1, 1.0, 0, 0.0))

    assert derived.ctr == 33.33
    assert derived.cpc == 1.0
    assert derived.cpm == 333.33


def test_zero_denominators_give_zero():
    derived = derive_metrics(BaseMetrics())

    assert derived.ctr == 0
    assert derived.cpc == 0
    assert derived.cpm == 0
    assert derived.conversion_rate == 0
    assert derived.cost_per_conversion == 0
    assert derived.roas == 0

    # Clicks but no conversions
    derived = derive_metrics(BaseMetrics(100, 10, 25.0, 0, 0.0))
    assert derived.cost_per_conversion == 0
    assert derived.roas == 0
    assert derived.cpc == 2.5


def test_aggregate_example():
    parts = [
        BaseMetrics(100, 10, 20.5, 2, 50.0),
        BaseMetrics(200, 12, 30.25, 3, 60.0),
        BaseMetrics(150, 15, 24.25, 1, 40.0),
    ]
    total = aggregate_metrics(parts)

    assert total == BaseMetrics(450, 37, 75.0, 6, 150.0), total


def test_aggregate_empty_is_zero():
    assert aggregate_metrics([]) == BaseMetrics(0, 0, 0.0, 0, 0.0)


def test_aggregate_order_independent():
    parts = [
        generate_base_metrics(make_context(date=d))
        for d in expand_date_range("2024-02-01", "2024-02-10")
    ]

    forward = aggregate_metrics(parts)
    backward = aggregate_metrics(reversed(parts))

    assert forward.impressions == backward.impressions
    assert forward.clicks == backward.clicks
    assert forward.conversions == backward.conversions
    assert abs(forward.cost - backward.cost) < 0.011
    assert abs(forward.conversion_value - backward.conversion_value) < 0.011


def test_aggregate_accepts_generator():
    total = aggregate_metrics(BaseMetrics(1, 1, 0.1, 0, 0.0) for _ in range(3))

    assert total.impressions == 3
    assert total.cost == 0.3


if __name__ == "__main__":
    print("=" * 60)
    print("Metrics Generator Tests")
    print("=" * 60)

    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_") and callable(v)]
    all_passed = True
    for test in tests:
        try:
            test()
        except AssertionError as e:
            print(f"❌ FAIL: {test.__name__}: {e}")
            all_passed = False

    print("\n" + "=" * 60)
    print("✅ ALL TESTS PASSED" if all_passed else "❌ SOME TESTS FAILED")
    print("=" * 60)
