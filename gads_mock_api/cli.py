# gads_mock_api/cli.py
from __future__ import annotations

import argparse
import json
import sys

from gads_mock.cache import StructureCache
from gads_mock.config_loader import build_account_directory
from gads_mock.errors import InvalidRequestError, MockApiError
from gads_mock.report import ReportService
from gads_mock.settings import get_settings

from .validation import parse_report_body, split_list


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gads_mock_api")
    sub = p.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
    p_serve.add_argument("--port", type=int, default=None, help="Port (default: PORT or 3000)")
    p_serve.add_argument("--debug", action="store_true", default=None, help="Flask debug mode")

    sub.add_parser("accounts", help="List seed accounts")

    p_campaigns = sub.add_parser("campaigns", help="List generated campaigns of an account")
    p_campaigns.add_argument("account_id", help="Account id (XXX-XXX-XXXX)")

    p_report = sub.add_parser("report", help="Generate a report and print it as JSON")
    p_report.add_argument("account_id", help="Account id (XXX-XXX-XXXX)")
    p_report.add_argument("--start-date", required=True, help="YYYY-MM-DD")
    p_report.add_argument("--end-date", required=True, help="YYYY-MM-DD (inclusive)")
    p_report.add_argument("--dimensions", default=None, help="Comma-separated, e.g. date,device")
    p_report.add_argument("--metrics", default=None, help="Comma-separated, e.g. clicks,cost")
    p_report.add_argument("--campaign-ids", default=None, help="Comma-separated campaign ids")
    p_report.add_argument("--campaign-status", default=None, choices=["ENABLED", "PAUSED", "REMOVED"])
    p_report.add_argument("--page-size", type=int, default=None)
    p_report.add_argument("--page-token", default=None)
    p_report.add_argument("--order-by", default=None, help="Metric name to sort by")
    p_report.add_argument("--order-direction", default="DESC", choices=["ASC", "DESC"])

    return p


def report_body_from_args(args: argparse.Namespace) -> dict:
    """Same JSON shape the POST /reports endpoint accepts."""
    body = {
        "accountId": args.account_id,
        "dateRange": {"startDate": args.start_date, "endDate": args.end_date},
    }
    if args.dimensions is not None:
        body["dimensions"] = split_list(args.dimensions)
    if args.metrics is not None:
        body["metrics"] = split_list(args.metrics)

    filters = {}
    if args.campaign_ids:
        filters["campaignIds"] = split_list(args.campaign_ids)
    if args.campaign_status:
        filters["campaignStatus"] = args.campaign_status
    if filters:
        body["filters"] = filters

    if args.page_size is not None:
        body["pageSize"] = args.page_size
    if args.page_token:
        body["pageToken"] = args.page_token
    if args.order_by:
        body["orderBy"] = {"field": args.order_by, "direction": args.order_direction}
    return body


def print_json(data) -> None:
    print(json.dumps(data, indent=2))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from .app import main as run_server

        run_server(host=args.host, port=args.port, debug=args.debug)
        return 0

    settings = get_settings()
    cache = StructureCache(build_account_directory(settings.accounts_config))

    try:
        if args.command == "accounts":
            print_json({"accounts": [a.to_dict() for a in cache.list_accounts()]})
            return 0

        if args.command == "campaigns":
            if cache.get_account(args.account_id) is None:
                print(f"ERROR: Account not found: {args.account_id}", file=sys.stderr)
                return 1
            print_json({"campaigns": [c.to_dict() for c in cache.get_campaigns(args.account_id)]})
            return 0

        if args.command == "report":
            request = parse_report_body(report_body_from_args(args))
            print_json(ReportService(cache).generate_report(request))
            return 0

    except InvalidRequestError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        for detail in e.details or []:
            print(f"  {detail['path']}: {detail['message']}", file=sys.stderr)
        return 2
    except MockApiError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1

    print("ERROR: Unknown command", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
