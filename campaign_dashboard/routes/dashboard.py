"""
Dashboard home page route - metric cards, charts, filters, campaign table.
"""

from flask import Blueprint, current_app, render_template
from campaign_dashboard.charts import (
    budget_bars, format_currency, platform_bars, status_bars, status_summary,
)
from campaign_dashboard.errors import CampaignFetchError
from campaign_dashboard.routes.shared import (
    build_view, get_display_config, get_query_from_request, load_campaigns,
)

bp = Blueprint('dashboard', __name__)


@bp.route("/")
def home():
    """
    Dashboard home page.

    The campaign list is fetched once per page load; the search/status query
    comes from the query string and is re-applied on every request.

    Returns:
        Rendered dashboard template, or the error page (502) if the fetch fails
    """
    display = get_display_config()
    query = get_query_from_request()

    try:
        campaigns = load_campaigns()
    except CampaignFetchError as e:
        current_app.logger.error(f"[Dashboard] {e.message}")
        return render_template("error.html", title=display.title, message=e.message), 502

    view = build_view(campaigns, query)
    stats = view['stats']

    metric_cards = [
        {'title': 'Total Budget', 'value': format_currency(stats.total_budget)},
        {'title': 'Total Daily Budget', 'value': format_currency(stats.total_daily_budget)},
    ]

    return render_template(
        "dashboard.html",
        title=display.title,
        status_options=display.status_options,
        query=query,
        campaigns=view['campaigns'],
        stats=stats,
        metric_cards=metric_cards,
        status_bars=status_bars(stats, display),
        platform_bars=platform_bars(stats, display),
        budget_bars=budget_bars(view['campaigns'], stats, display),
        status_summary=status_summary(stats),
        average_budget=format_currency(stats.average_budget),
    )
