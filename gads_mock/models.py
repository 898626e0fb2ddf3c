"""
Mock Google Ads data models: Account, Campaign, AdGroup, Keyword, metrics, report request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Closed enums (kept as plain string tuples, values match the API wire format)
INDUSTRIES = ("ecommerce", "saas", "local_services", "travel", "finance")
ENTITY_STATUSES = ("ENABLED", "PAUSED", "REMOVED")
CAMPAIGN_TYPES = ("SEARCH", "DISPLAY", "VIDEO", "SHOPPING")
MATCH_TYPES = ("EXACT", "PHRASE", "BROAD")
DEVICES = ("MOBILE", "DESKTOP", "TABLET")
NETWORKS = ("SEARCH", "DISPLAY", "YOUTUBE")

DIMENSION_NAMES = ("date", "campaign", "adGroup", "keyword", "device", "network")

BASE_METRIC_NAMES = ("impressions", "clicks", "cost", "conversions", "conversionValue")
DERIVED_METRIC_NAMES = ("ctr", "cpc", "cpm", "conversionRate", "costPerConversion", "roas")
ALL_METRIC_NAMES = BASE_METRIC_NAMES + DERIVED_METRIC_NAMES

DEFAULT_PAGE_SIZE = 1000
MAX_PAGE_SIZE = 10000


@dataclass(frozen=True)
class Account:
    """A seed account. Industry drives generation and is never exposed."""
    id: str                             # XXX-XXX-XXXX
    name: str
    currency_code: str
    timezone: str
    industry: str                       # one of INDUSTRIES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "currencyCode": self.currency_code,
            "timezone": self.timezone,
        }


@dataclass(frozen=True)
class Campaign:
    id: str                             # camp_001
    account_id: str
    name: str
    status: str                         # ENABLED | PAUSED | REMOVED
    type: str                           # SEARCH | DISPLAY | VIDEO | SHOPPING
    daily_budget: int                   # whole currency units ($500-$5000)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "accountId": self.account_id,
            "name": self.name,
            "status": self.status,
            "type": self.type,
            "dailyBudget": self.daily_budget,
        }


@dataclass(frozen=True)
class AdGroup:
    id: str                             # camp_001_ag_01
    campaign_id: str
    name: str
    status: str
    cpc_bid: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "campaignId": self.campaign_id,
            "name": self.name,
            "status": self.status,
            "cpcBid": self.cpc_bid,
        }


@dataclass(frozen=True)
class Keyword:
    id: str                             # camp_001_ag_01_kw_01
    ad_group_id: str
    text: str
    match_type: str                     # EXACT | PHRASE | BROAD
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "adGroupId": self.ad_group_id,
            "text": self.text,
            "matchType": self.match_type,
            "status": self.status,
        }


@dataclass(frozen=True)
class AccountStructure:
    """Full generated hierarchy for one account."""
    account: Account
    campaigns: Tuple[Campaign, ...]
    ad_groups: Tuple[AdGroup, ...]
    keywords: Tuple[Keyword, ...]

    def campaign_by_id(self, campaign_id: str) -> Optional[Campaign]:
        for campaign in self.campaigns:
            if campaign.id == campaign_id:
                return campaign
        return None

    def ad_group_by_id(self, ad_group_id: str) -> Optional[AdGroup]:
        for ad_group in self.ad_groups:
            if ad_group.id == ad_group_id:
                return ad_group
        return None

    def keyword_by_id(self, keyword_id: str) -> Optional[Keyword]:
        for keyword in self.keywords:
            if keyword.id == keyword_id:
                return keyword
        return None

    def ad_groups_for_campaign(self, campaign_id: str) -> List[AdGroup]:
        return [ag for ag in self.ad_groups if ag.campaign_id == campaign_id]

    def keywords_for_ad_group(self, ad_group_id: str) -> List[Keyword]:
        return [kw for kw in self.keywords if kw.ad_group_id == ad_group_id]


@dataclass(frozen=True)
class MetricsContext:
    """Everything that determines one synthetic metrics draw."""
    account_id: str
    campaign_id: str
    ad_group_id: str
    date: str                           # YYYY-MM-DD
    device: str
    network: str
    industry: str
    campaign_type: str
    keyword_id: Optional[str] = None    # None = ad group level ("all")


@dataclass(frozen=True)
class BaseMetrics:
    impressions: int = 0
    clicks: int = 0
    cost: float = 0.0
    conversions: int = 0
    conversion_value: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "impressions": self.impressions,
            "clicks": self.clicks,
            "cost": self.cost,
            "conversions": self.conversions,
            "conversionValue": self.conversion_value,
        }


@dataclass(frozen=True)
class DerivedMetrics:
    ctr: float                          # percentage
    cpc: float
    cpm: float
    conversion_rate: float              # percentage
    cost_per_conversion: float
    roas: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ctr": self.ctr,
            "cpc": self.cpc,
            "cpm": self.cpm,
            "conversionRate": self.conversion_rate,
            "costPerConversion": self.cost_per_conversion,
            "roas": self.roas,
        }


@dataclass(frozen=True)
class ReportFilters:
    campaign_ids: Optional[List[str]] = None
    ad_group_ids: Optional[List[str]] = None
    campaign_status: Optional[str] = None
    ad_group_status: Optional[str] = None


@dataclass(frozen=True)
class ReportRequest:
    """A validated report request (validation happens at the API/CLI boundary)."""
    account_id: str
    start_date: str
    end_date: str
    dimensions: Optional[List[str]] = None
    metrics: Optional[List[str]] = None
    filters: ReportFilters = field(default_factory=ReportFilters)
    page_size: int = DEFAULT_PAGE_SIZE
    page_token: Optional[str] = None
    order_by: Optional[str] = None
    order_direction: str = "DESC"       # ASC | DESC


@dataclass
class RawDataPoint:
    """One synthesized leaf cell before aggregation."""
    date: str
    campaign_id: str
    ad_group_id: str
    keyword_id: str
    device: str
    network: str
    metrics: BaseMetrics
