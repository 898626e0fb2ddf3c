"""
Report assembly pipeline.

Steps:
  1. Resolve the account structure (404 if unknown)
  2. Default dimensions / metrics
  3. Expand the date range
  4. Synthesize every surviving leaf cell (date x campaign x ad group x keyword x device x network)
  5. Group by the requested dimensions and aggregate
  6. Derive ratio metrics and project onto the requested metric names
  7. Sort (optional)
  8. Paginate (page token = row offset)
  9. Attach metadata
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from gads_mock.cache import StructureCache
from gads_mock.date_utils import expand_date_range
from gads_mock.errors import AccountNotFoundError
from gads_mock.generators.metrics import (
    ALL_DEVICES,
    ALL_NETWORKS,
    aggregate_metrics,
    calculate_derived_metrics,
    generate_base_metrics,
)
from gads_mock.logging_config import get_logger
from gads_mock.models import (
    ALL_METRIC_NAMES,
    DEFAULT_PAGE_SIZE,
    DIMENSION_NAMES,
    AccountStructure,
    AdGroup,
    Campaign,
    MetricsContext,
    RawDataPoint,
    ReportFilters,
    ReportRequest,
)

logger = get_logger(__name__)

KEY_SEPARATOR = "|"


def campaign_passes(campaign: Campaign, filters: ReportFilters) -> bool:
    if filters.campaign_ids is not None and campaign.id not in filters.campaign_ids:
        return False
    if filters.campaign_status and campaign.status != filters.campaign_status:
        return False
    # Removed campaigns only show up when asked for by status
    if campaign.status == "REMOVED" and not filters.campaign_status:
        return False
    return True


def ad_group_passes(ad_group: AdGroup, filters: ReportFilters) -> bool:
    if filters.ad_group_ids is not None and ad_group.id not in filters.ad_group_ids:
        return False
    if filters.ad_group_status and ad_group.status != filters.ad_group_status:
        return False
    if ad_group.status == "REMOVED" and not filters.ad_group_status:
        return False
    return True


def generate_raw_data(
    structure: AccountStructure, dates: List[str], filters: ReportFilters
) -> List[RawDataPoint]:
    """Synthesize metrics for every leaf cell that survives the filters."""
    account = structure.account
    raw_data: List[RawDataPoint] = []

    for date_str in dates:
        for campaign in structure.campaigns:
            if not campaign_passes(campaign, filters):
                continue

            for ad_group in structure.ad_groups_for_campaign(campaign.id):
                if not ad_group_passes(ad_group, filters):
                    continue

                for keyword in structure.keywords_for_ad_group(ad_group.id):
                    if keyword.status == "REMOVED":
                        continue

                    for device in ALL_DEVICES:
                        for network in ALL_NETWORKS:
                            ctx = MetricsContext(
                                account_id=account.id,
                                campaign_id=campaign.id,
                                ad_group_id=ad_group.id,
                                keyword_id=keyword.id,
                                date=date_str,
                                device=device,
                                network=network,
                                industry=account.industry,
                                campaign_type=campaign.type,
                            )
                            raw_data.append(
                                RawDataPoint(
                                    date=date_str,
                                    campaign_id=campaign.id,
                                    ad_group_id=ad_group.id,
                                    keyword_id=keyword.id,
                                    device=device,
                                    network=network,
                                    metrics=generate_base_metrics(ctx),
                                )
                            )

    return raw_data


def build_dimension_key(point: RawDataPoint, dimensions: List[str]) -> str:
    """Grouping key from the requested dimensions only, in fixed dimension order."""
    values = {
        "date": point.date,
        "campaign": point.campaign_id,
        "adGroup": point.ad_group_id,
        "keyword": point.keyword_id,
        "device": point.device,
        "network": point.network,
    }
    return KEY_SEPARATOR.join(values[d] for d in DIMENSION_NAMES if d in dimensions)


def dimension_snapshot(
    point: RawDataPoint, dimensions: List[str], structure: AccountStructure
) -> Dict[str, Any]:
    """Dimension values of one group member, in fixed dimension order."""
    snapshot: Dict[str, Any] = {}

    if "date" in dimensions:
        snapshot["date"] = point.date
    if "campaign" in dimensions:
        campaign = structure.campaign_by_id(point.campaign_id)
        snapshot["campaign"] = {
            "id": campaign.id,
            "name": campaign.name,
            "status": campaign.status,
        }
    if "adGroup" in dimensions:
        ad_group = structure.ad_group_by_id(point.ad_group_id)
        snapshot["adGroup"] = {
            "id": ad_group.id,
            "name": ad_group.name,
            "status": ad_group.status,
            "campaignId": ad_group.campaign_id,
        }
    if "keyword" in dimensions:
        keyword = structure.keyword_by_id(point.keyword_id)
        snapshot["keyword"] = {
            "id": keyword.id,
            "text": keyword.text,
            "matchType": keyword.match_type,
            "adGroupId": keyword.ad_group_id,
        }
    if "device" in dimensions:
        snapshot["device"] = point.device
    if "network" in dimensions:
        snapshot["network"] = point.network

    return snapshot


def aggregate_by_dimensions(
    raw_data: List[RawDataPoint], dimensions: List[str], structure: AccountStructure
) -> List[Dict[str, Any]]:
    """
    Collapse raw cells into one item per distinct dimension key.

    Returns:
        [{"dimensions": snapshot, "metrics": BaseMetrics}, ...] in first-seen key order
    """
    groups: Dict[str, List[RawDataPoint]] = {}
    for point in raw_data:
        groups.setdefault(build_dimension_key(point, dimensions), []).append(point)

    return [
        {
            "dimensions": dimension_snapshot(points[0], dimensions, structure),
            "metrics": aggregate_metrics(p.metrics for p in points),
        }
        for points in groups.values()
    ]


def sort_rows(rows: List[Dict[str, Any]], field: str, direction: str = "DESC") -> List[Dict[str, Any]]:
    """Stable sort on a metric; rows without the field sort as 0."""
    return sorted(
        rows,
        key=lambda row: row["metrics"].get(field) or 0,
        reverse=(direction or "DESC").upper() != "ASC",
    )


def paginate(rows: List[Dict[str, Any]], page_size: int, page_token: Optional[str]):
    """
    Slice one page of rows.

    Returns:
        (page_rows, next_page_token) - token is None on the last page
    """
    start = int(page_token) if page_token else 0
    end = start + page_size
    next_token = str(end) if end < len(rows) else None
    return rows[start:end], next_token


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class ReportService:
    """Builds reports against a StructureCache."""

    def __init__(self, cache: StructureCache):
        self.cache = cache

    def generate_report(self, request: ReportRequest) -> Dict[str, Any]:
        """
        Build a report for a validated request.

        Args:
            request: Validated ReportRequest

        Returns:
            {"metadata": {...}, "rows": [...], "nextPageToken": str (only if more rows)}

        Raises:
            AccountNotFoundError: account id has no seed entry
        """
        structure = self.cache.get_structure(request.account_id)
        if structure is None:
            logger.warning(f"Report requested for unknown account {request.account_id}")
            raise AccountNotFoundError(request.account_id)

        dimensions = list(request.dimensions) if request.dimensions is not None else []
        metrics = list(request.metrics) if request.metrics is not None else list(ALL_METRIC_NAMES)

        dates = expand_date_range(request.start_date, request.end_date)
        raw_data = generate_raw_data(structure, dates, request.filters)
        aggregated = aggregate_by_dimensions(raw_data, dimensions, structure)

        rows = []
        for item in aggregated:
            full_metrics = calculate_derived_metrics(item["metrics"])
            rows.append({
                "dimensions": item["dimensions"],
                "metrics": {name: full_metrics[name] for name in metrics},
            })

        if request.order_by:
            if request.order_by not in metrics:
                logger.warning(
                    f"orderBy field {request.order_by!r} is not a requested metric, row order kept"
                )
            rows = sort_rows(rows, request.order_by, request.order_direction)

        page_rows, next_page_token = paginate(
            rows, request.page_size or DEFAULT_PAGE_SIZE, request.page_token
        )

        logger.info(
            f"Report {structure.account.id} {request.start_date}..{request.end_date}: "
            f"{len(dates)} days, {len(raw_data)} cells, {len(rows)} rows, "
            f"dimensions={dimensions}"
        )

        response: Dict[str, Any] = {
            "metadata": {
                "accountId": structure.account.id,
                "accountName": structure.account.name,
                "dateRange": {
                    "startDate": request.start_date,
                    "endDate": request.end_date,
                },
                "dimensions": dimensions,
                "metrics": metrics,
                "totalRows": len(rows),
                "generatedAt": utc_timestamp(),
            },
            "rows": page_rows,
        }
        if next_page_token is not None:
            response["nextPageToken"] = next_page_token

        return response
