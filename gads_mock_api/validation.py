"""
Request validation for the report endpoints.

Validates report requests (JSON body or query string) with pydantic and turns
them into the core ReportRequest. Anything that fails here never reaches the
report pipeline; the caller gets a 400 with per-field details:

    {"error": {"code": "INVALID_REQUEST", "message": "Invalid request body",
               "details": [{"path": "dateRange.startDate", "message": "..."}]}}
"""

import re
from datetime import date
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from gads_mock.errors import InvalidRequestError
from gads_mock.models import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, ReportFilters, ReportRequest

DimensionName = Literal["date", "campaign", "adGroup", "keyword", "device", "network"]
MetricName = Literal[
    "impressions",
    "clicks",
    "cost",
    "conversions",
    "conversionValue",
    "ctr",
    "cpc",
    "cpm",
    "conversionRate",
    "costPerConversion",
    "roas",
]
Status = Literal["ENABLED", "PAUSED", "REMOVED"]
Direction = Literal["ASC", "DESC"]

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
ACCOUNT_ID_PATTERN = r"^\d{3}-\d{3}-\d{4}$"
INTEGER_PATTERN = re.compile(r"^\s*-?\d+\s*$")


class DateRangeModel(BaseModel):
    startDate: str = Field(pattern=DATE_PATTERN)
    endDate: str = Field(pattern=DATE_PATTERN)

    @field_validator("startDate", "endDate")
    @classmethod
    def real_calendar_date(cls, v: str) -> str:
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError("Date must be a valid calendar date in YYYY-MM-DD format")
        return v

    @model_validator(mode="after")
    def start_not_after_end(self):
        if date.fromisoformat(self.startDate) > date.fromisoformat(self.endDate):
            raise ValueError("startDate must be before or equal to endDate")
        return self


class FiltersModel(BaseModel):
    campaignIds: Optional[List[str]] = None
    adGroupIds: Optional[List[str]] = None
    campaignStatus: Optional[Status] = None
    adGroupStatus: Optional[Status] = None


class OrderByModel(BaseModel):
    field: str = Field(min_length=1)
    direction: Direction = "DESC"


class ReportRequestModel(BaseModel):
    accountId: str = Field(min_length=1, pattern=ACCOUNT_ID_PATTERN)
    dateRange: DateRangeModel
    dimensions: Optional[List[DimensionName]] = None
    metrics: Optional[List[MetricName]] = None
    filters: Optional[FiltersModel] = None
    # strict: JSON true/false or "10" is not a page size
    pageSize: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, strict=True)
    pageToken: Optional[str] = Field(default=None, pattern=r"^\d+$")
    orderBy: Optional[OrderByModel] = None

    def to_report_request(self) -> ReportRequest:
        filters = self.filters or FiltersModel()
        return ReportRequest(
            account_id=self.accountId,
            start_date=self.dateRange.startDate,
            end_date=self.dateRange.endDate,
            dimensions=list(self.dimensions) if self.dimensions is not None else None,
            metrics=list(self.metrics) if self.metrics is not None else None,
            filters=ReportFilters(
                campaign_ids=filters.campaignIds,
                ad_group_ids=filters.adGroupIds,
                campaign_status=filters.campaignStatus,
                ad_group_status=filters.adGroupStatus,
            ),
            page_size=self.pageSize,
            page_token=self.pageToken,
            order_by=self.orderBy.field if self.orderBy else None,
            order_direction=self.orderBy.direction if self.orderBy else "DESC",
        )


def format_validation_errors(error: ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into [{path, message}]."""
    return [
        {
            "path": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
        }
        for e in error.errors()
    ]


def parse_report_body(data: Any) -> ReportRequest:
    """
    Validate a JSON report request body.

    Args:
        data: Decoded JSON (anything; non-objects are rejected)

    Returns:
        ReportRequest

    Raises:
        InvalidRequestError: with per-field details
    """
    if not isinstance(data, dict):
        raise InvalidRequestError(
            [{"path": "", "message": "Request body must be a JSON object"}]
        )

    try:
        model = ReportRequestModel.model_validate(data)
    except ValidationError as e:
        raise InvalidRequestError(format_validation_errors(e))

    return model.to_report_request()


def split_list(value: Optional[str]) -> Optional[List[str]]:
    """Comma-separated query value to list (None stays None)."""
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_report_query(account_id: str, args: Mapping[str, str]) -> ReportRequest:
    """
    Validate the query-string variant: account id from the path, everything
    else from query parameters.

    Query parameters:
        startDate, endDate (required)
        dimensions, metrics, campaignIds, adGroupIds (comma-separated)
        campaignStatus, adGroupStatus, pageSize, pageToken, orderBy, orderDirection
    """
    data: Dict[str, Any] = {
        "accountId": account_id,
        "dateRange": {
            "startDate": args.get("startDate"),
            "endDate": args.get("endDate"),
        },
    }

    for key in ("dimensions", "metrics"):
        if args.get(key) is not None:
            data[key] = split_list(args.get(key))

    # An empty id list in a query string means no filter
    filters = {
        "campaignIds": split_list(args.get("campaignIds")) or None,
        "adGroupIds": split_list(args.get("adGroupIds")) or None,
        "campaignStatus": args.get("campaignStatus"),
        "adGroupStatus": args.get("adGroupStatus"),
    }
    filters = {k: v for k, v in filters.items() if v is not None}
    if filters:
        data["filters"] = filters

    page_size = args.get("pageSize")
    if page_size is not None:
        data["pageSize"] = int(page_size) if INTEGER_PATTERN.match(page_size) else page_size
    if args.get("pageToken"):
        data["pageToken"] = args.get("pageToken")

    if args.get("orderBy"):
        data["orderBy"] = {
            "field": args.get("orderBy"),
            "direction": (args.get("orderDirection") or "DESC").upper(),
        }

    try:
        model = ReportRequestModel.model_validate(data)
    except ValidationError as e:
        raise InvalidRequestError(format_validation_errors(e), message="Invalid request parameters")

    return model.to_report_request()
