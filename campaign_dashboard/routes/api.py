"""
API routes - filtered campaigns + stats as JSON, health check.
"""

from flask import Blueprint, jsonify, current_app
from campaign_dashboard.errors import CampaignFetchError
from campaign_dashboard.routes.shared import build_view, get_query_from_request, load_campaigns

bp = Blueprint('api', __name__)


@bp.route("/campaigns")
def campaigns():
    """
    Filtered campaign list with aggregate stats.

    Query params:
        search: case-insensitive name substring (default "")
        status: exact status label or "all" (default "all")

    Returns JSON:
        {
            "success": bool,
            "query": {"search": str, "status": str},
            "campaigns": [Campaign, ...],
            "stats": Stats,
            "error": str            # only when success is false
        }
    """
    query = get_query_from_request()

    try:
        all_campaigns = load_campaigns()
    except CampaignFetchError as e:
        current_app.logger.error(f"[API] {e.message}")
        return jsonify({
            'success': False,
            'error': e.message,
        }), 502

    view = build_view(all_campaigns, query)

    return jsonify({
        'success': True,
        'query': {
            'search': query.search_term,
            'status': query.status_filter,
        },
        'campaigns': [c.to_dict() for c in view['campaigns']],
        'stats': view['stats'].to_dict(),
    })


@bp.route("/health")
def health():
    """Liveness check; does not call the campaign API."""
    return jsonify({'success': True, 'status': 'ok'})
