"""
Generators: account hierarchy and synthetic metrics.
"""

from .metrics import (
    ALL_DEVICES,
    ALL_NETWORKS,
    aggregate_metrics,
    calculate_derived_metrics,
    derive_metrics,
    generate_base_metrics,
)
from .structure import generate_account_structure, pick_status

__all__ = [
    'ALL_DEVICES',
    'ALL_NETWORKS',
    'aggregate_metrics',
    'calculate_derived_metrics',
    'derive_metrics',
    'generate_base_metrics',
    'generate_account_structure',
    'pick_status',
]
