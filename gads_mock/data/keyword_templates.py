"""
Keyword phrase templates by industry.

Each pattern has one placeholder ({product}, {service} or {destination}) that is
filled from the industry's substitution list. {location} is always "downtown".
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

LOCATION_SUBSTITUTE = "downtown"
PLACEHOLDERS = ("{product}", "{service}", "{destination}")


@dataclass(frozen=True)
class KeywordTemplateSet:
    patterns: Tuple[str, ...]
    substitutions: Tuple[str, ...]


KEYWORD_TEMPLATES: Dict[str, KeywordTemplateSet] = {
    "ecommerce": KeywordTemplateSet(
        patterns=(
            "buy {product} online",
            "{product} for sale",
            "best {product}",
            "cheap {product}",
            "{product} deals",
            "{product} discount",
            "shop {product}",
            "{product} store",
            "{product} price",
            "{product} reviews",
        ),
        substitutions=(
            "laptop", "smartphone", "headphones", "tablet", "camera",
            "watch", "furniture", "clothing", "shoes", "accessories",
        ),
    ),
    "saas": KeywordTemplateSet(
        patterns=(
            "{product} software",
            "best {product} tool",
            "{product} platform",
            "{product} for business",
            "{product} solution",
            "cloud {product}",
            "{product} app",
            "{product} system",
            "enterprise {product}",
            "{product} automation",
        ),
        substitutions=(
            "project management", "CRM", "analytics", "marketing", "HR",
            "accounting", "collaboration", "workflow", "reporting", "integration",
        ),
    ),
    "local_services": KeywordTemplateSet(
        patterns=(
            "{service} near me",
            "{service} in {location}",
            "emergency {service}",
            "24 hour {service}",
            "best {service}",
            "affordable {service}",
            "{service} company",
            "local {service}",
            "{service} services",
            "{service} repair",
        ),
        substitutions=(
            "plumber", "electrician", "HVAC", "roofing", "landscaping",
            "cleaning", "handyman", "pest control", "locksmith", "appliance repair",
        ),
    ),
    "travel": KeywordTemplateSet(
        patterns=(
            "{destination} vacation",
            "flights to {destination}",
            "{destination} hotels",
            "{destination} travel deals",
            "{destination} packages",
            "cheap {destination} trips",
            "{destination} resorts",
            "best time to visit {destination}",
            "{destination} tours",
            "{destination} all inclusive",
        ),
        substitutions=(
            "Hawaii", "Cancun", "Paris", "Caribbean", "Italy",
            "Japan", "Costa Rica", "Greece", "Bali", "London",
        ),
    ),
    "finance": KeywordTemplateSet(
        patterns=(
            "{product} account",
            "best {product} rates",
            "{product} for beginners",
            "how to {product}",
            "{product} calculator",
            "{product} advisor",
            "{product} services",
            "online {product}",
            "{product} tips",
            "{product} comparison",
        ),
        substitutions=(
            "savings", "investment", "retirement", "mortgage", "credit card",
            "loan", "insurance", "trading", "banking", "wealth management",
        ),
    ),
}


def fill_pattern(pattern: str, substitute: str) -> str:
    """Replace the first occurrence of each placeholder."""
    text = pattern
    for placeholder in PLACEHOLDERS:
        text = text.replace(placeholder, substitute, 1)
    return text.replace("{location}", LOCATION_SUBSTITUTE, 1)


def generate_keywords_for_ad_group(
    industry: str, count: int, pick: Callable[[Sequence[str]], str]
) -> List[str]:
    """
    Draw count keyword phrases and drop duplicates.

    Args:
        industry: Account industry
        count: Number of (pattern, substitution) draws
        pick: Uniform picker bound to the caller's SeededRandom

    Returns:
        Unique phrases in first-drawn order (may be shorter than count)
    """
    templates = KEYWORD_TEMPLATES[industry]
    keywords = []
    for _ in range(count):
        pattern = pick(templates.patterns)
        substitute = pick(templates.substitutions)
        keywords.append(fill_pattern(pattern, substitute))

    return list(dict.fromkeys(keywords))
