"""
Campaign Monitoring Dashboard
Flask web interface over the campaign API.
"""

from flask import Flask, jsonify, render_template, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pathlib import Path
from typing import Callable, List, Optional
import logging
from logging.handlers import RotatingFileHandler

from campaign_dashboard.api_client import CampaignApiClient
from campaign_dashboard.charts import format_currency, status_color
from campaign_dashboard.config import DisplayConfig, load_display_config
from campaign_dashboard.errors import ConfigError
from campaign_dashboard.models import Campaign
from campaign_dashboard.routes import register_blueprints
from campaign_dashboard.settings import Settings, get_settings


def create_app(
    settings: Optional[Settings] = None,
    campaign_source: Optional[Callable[[], List[Campaign]]] = None,
    display_config: Optional[DisplayConfig] = None,
):
    """
    Create and configure Flask application.

    Args:
        settings: Environment settings (default: get_settings())
        campaign_source: Zero-arg callable returning the campaign list
            (default: CampaignApiClient.fetch_campaigns)
        display_config: Chart/filter display settings (default: loaded from
            settings.config_path)

    Returns:
        Flask app instance
    """
    settings = settings or get_settings()

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["SETTINGS"] = settings

    # Flask settings
    app.config["TEMPLATES_AUTO_RELOAD"] = True
    app.config["SEND_FILE_MAX_AGE_DEFAULT"] = 0

    # Configure logging
    if not app.debug:
        logs_dir = Path(settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_dir / 'dashboard.log',
            maxBytes=10240000,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
        app.logger.info('Dashboard startup')

    # Display config (invalid file -> defaults, logged)
    if display_config is None:
        try:
            display_config = load_display_config(settings.config_path)
        except ConfigError as e:
            app.logger.warning(f"{e} - falling back to default display config")
            display_config = DisplayConfig()
    app.config["DISPLAY_CONFIG"] = display_config

    app.jinja_env.filters.update(
        currency=format_currency,
        status_color=lambda status: status_color(status, display_config),
    )

    # Campaign list is fetched once per page load
    if campaign_source is None:
        client = CampaignApiClient(settings.api_base_url, timeout=settings.api_timeout)
        campaign_source = client.fetch_campaigns
    app.config["CAMPAIGN_SOURCE"] = campaign_source

    # Per route; every search or status change is a new GET
    limiter = Limiter(
        app=app,
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        storage_uri="memory://",
    )
    app.config['LIMITER'] = limiter

    register_blueprints(app)

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        if request.path.startswith('/api/'):
            return jsonify({
                'success': False,
                'error': 'Not found',
                'message': f'Endpoint {request.path} does not exist'
            }), 404
        return render_template('error.html', title=display_config.title,
                               message='Page not found'), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        app.logger.error(f'Server Error: {error}')
        if request.path.startswith('/api/'):
            return jsonify({
                'success': False,
                'error': 'Internal server error',
                'message': 'An unexpected error occurred. Please try again.'
            }), 500
        return render_template('error.html', title=display_config.title,
                               message='An unexpected error occurred. Please try again.'), 500

    @app.errorhandler(429)
    def ratelimit_error(error):
        """Handle rate limit errors."""
        if request.path.startswith('/api/'):
            return jsonify({
                'success': False,
                'error': 'Rate limit exceeded',
                'message': 'Too many requests. Please slow down.'
            }), 429
        return render_template('error.html', title=display_config.title,
                               message='Too many requests. Please slow down.'), 429

    return app


def main(host: str = "127.0.0.1", port: int = 5000, debug: bool = False):
    """Run the dashboard server."""
    app = create_app()
    settings = app.config["SETTINGS"]

    print("=" * 80)
    print("CAMPAIGN MONITORING DASHBOARD Starting")
    print("=" * 80)
    print(f"Campaign API: {settings.api_base_url}/campaigns")
    print(f"Dashboard running at: http://{host}:{port}")
    print()
    print("Press CTRL+C to stop")
    print("=" * 80)
    print()

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
