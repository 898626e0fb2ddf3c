"""
Account hierarchy generator: campaigns -> ad groups -> keywords.

Everything is drawn from one SeededRandom seeded with ("structure", account_id),
walking the campaign templates in order, so the same account always produces
the same hierarchy with the same ids.
"""
from __future__ import annotations

from typing import List

from gads_mock.data.campaign_templates import CAMPAIGN_TEMPLATES
from gads_mock.data.keyword_templates import generate_keywords_for_ad_group
from gads_mock.logging_config import get_logger
from gads_mock.models import MATCH_TYPES, Account, AccountStructure, AdGroup, Campaign, Keyword
from gads_mock.seeded_random import SeededRandom, create_seed
from gads_mock.utils import round_cents

logger = get_logger(__name__)

CAMPAIGN_ENABLED_PROBABILITY = 0.80
AD_GROUP_ENABLED_PROBABILITY = 0.85
KEYWORD_ENABLED_PROBABILITY = 0.90
# Share of the non-enabled remainder that is PAUSED (rest is REMOVED)
PAUSED_SHARE = 0.7

KEYWORDS_PER_AD_GROUP = (5, 12)
DAILY_BUDGET_STEPS = (50, 500)          # x10 -> $500-$5000
CPC_BID_RANGE = (0.5, 5.0)


def pick_status(rng: SeededRandom, enabled_probability: float) -> str:
    """
    Draw ENABLED / PAUSED / REMOVED with one uniform draw.

    Cumulative thresholds: [0, p) ENABLED, [p, p + (1-p)*0.7) PAUSED, rest REMOVED.
    """
    roll = rng.uniform()
    if roll < enabled_probability:
        return "ENABLED"
    if roll < enabled_probability + (1 - enabled_probability) * PAUSED_SHARE:
        return "PAUSED"
    return "REMOVED"


def campaign_id_for(index: int) -> str:
    return f"camp_{index + 1:03d}"


def ad_group_id_for(campaign_id: str, index: int) -> str:
    return f"{campaign_id}_ag_{index + 1:02d}"


def keyword_id_for(ad_group_id: str, index: int) -> str:
    return f"{ad_group_id}_kw_{index + 1:02d}"


def generate_account_structure(account: Account) -> AccountStructure:
    """
    Build the full hierarchy for one account.

    Args:
        account: Seed account (industry selects the templates)

    Returns:
        AccountStructure with campaigns, ad groups and keywords in template order
    """
    rng = SeededRandom(create_seed("structure", account.id))
    templates = CAMPAIGN_TEMPLATES[account.industry]

    campaigns: List[Campaign] = []
    ad_groups: List[AdGroup] = []
    keywords: List[Keyword] = []

    for campaign_index, template in enumerate(templates):
        campaign_id = campaign_id_for(campaign_index)
        status = pick_status(rng, CAMPAIGN_ENABLED_PROBABILITY)

        campaigns.append(
            Campaign(
                id=campaign_id,
                account_id=account.id,
                name=template.name,
                status=status,
                type=template.type,
                daily_budget=rng.int_range(*DAILY_BUDGET_STEPS) * 10,
            )
        )

        for ad_group_index, ad_group_name in enumerate(template.ad_group_patterns):
            ad_group_id = ad_group_id_for(campaign_id, ad_group_index)
            if status == "REMOVED":
                ad_group_status = "REMOVED"
            else:
                ad_group_status = pick_status(rng, AD_GROUP_ENABLED_PROBABILITY)

            ad_groups.append(
                AdGroup(
                    id=ad_group_id,
                    campaign_id=campaign_id,
                    name=ad_group_name,
                    status=ad_group_status,
                    cpc_bid=round_cents(rng.float_range(*CPC_BID_RANGE)),
                )
            )

            keyword_count = rng.int_range(*KEYWORDS_PER_AD_GROUP)
            texts = generate_keywords_for_ad_group(account.industry, keyword_count, rng.pick)

            for keyword_index, text in enumerate(texts):
                if ad_group_status == "REMOVED":
                    keyword_status = "REMOVED"
                else:
                    keyword_status = pick_status(rng, KEYWORD_ENABLED_PROBABILITY)

                keywords.append(
                    Keyword(
                        id=keyword_id_for(ad_group_id, keyword_index),
                        ad_group_id=ad_group_id,
                        text=text,
                        match_type=rng.pick(MATCH_TYPES),
                        status=keyword_status,
                    )
                )

    logger.debug(
        f"Generated structure for {account.id}: {len(campaigns)} campaigns, "
        f"{len(ad_groups)} ad groups, {len(keywords)} keywords"
    )

    return AccountStructure(
        account=account,
        campaigns=tuple(campaigns),
        ad_groups=tuple(ad_groups),
        keywords=tuple(keywords),
    )
