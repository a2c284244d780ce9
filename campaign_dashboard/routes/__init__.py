"""
Routes package - modular Blueprint-based routes.
"""

from flask import Flask


def register_blueprints(app: Flask):
    """
    Register route blueprints.

    This is called from app.py once the campaign source and config are set.
    """
    from campaign_dashboard.routes import dashboard
    app.register_blueprint(dashboard.bp)

    from campaign_dashboard.routes import api
    app.register_blueprint(api.bp, url_prefix='/api')

    app.logger.info("Registered blueprints: dashboard, api")
