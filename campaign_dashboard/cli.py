# campaign_dashboard/cli.py
from __future__ import annotations

import argparse
import sys

from .aggregator import aggregate
from .api_client import CampaignApiClient, load_campaigns_file
from .charts import format_currency
from .errors import CampaignFetchError
from .filters import filter_campaigns
from .models import ALL_STATUSES, Stats
from .settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="campaign-dashboard")
    sub = p.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the dashboard web server")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=5000)
    p_serve.add_argument("--debug", action="store_true")

    p_sum = sub.add_parser("summary", help="Print aggregate stats for a filtered campaign list")
    p_sum.add_argument(
        "--search",
        default="",
        help="Case-insensitive campaign name substring",
    )
    p_sum.add_argument(
        "--status",
        default=ALL_STATUSES,
        help="Exact status label, or 'all' (default)",
    )
    p_sum.add_argument(
        "--from-file",
        default=None,
        help="Read a {\"campaigns\": [...]} JSON file instead of calling the API",
    )

    return p


def format_summary(stats: Stats) -> str:
    lines = [
        f"Campaigns:           {stats.campaign_count}",
        f"Total budget:        {format_currency(stats.total_budget)}",
        f"Total daily budget:  {format_currency(stats.total_daily_budget)}",
        f"Average budget:      {format_currency(stats.average_budget)}",
        f"Max budget:          {format_currency(stats.max_budget)}",
        "By status:",
    ]
    lines += [f"  {status}: {count}" for status, count in stats.status_counts.items()]
    lines.append("By platform:")
    lines += [f"  {platform}: {count}" for platform, count in stats.platform_counts.items()]
    return "\n".join(lines)


def run_summary(search: str, status: str, from_file: str | None) -> int:
    try:
        if from_file:
            campaigns = load_campaigns_file(from_file)
        else:
            settings = get_settings()
            client = CampaignApiClient(settings.api_base_url, timeout=settings.api_timeout)
            campaigns = client.fetch_campaigns()
    except CampaignFetchError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1

    filtered = filter_campaigns(campaigns, search, status)
    print(format_summary(aggregate(filtered)))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from .app import main as serve
        serve(host=args.host, port=args.port, debug=args.debug)
        return 0

    if args.command == "summary":
        return run_summary(args.search, args.status, args.from_file)

    print("ERROR: Unknown command", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
