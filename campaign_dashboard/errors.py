"""
Dashboard exceptions.
"""

FETCH_ERROR_MESSAGE = "Failed to fetch campaigns"


class DashboardError(Exception):
    """Base class for dashboard errors."""


class CampaignFetchError(DashboardError):
    """
    The campaign list could not be loaded.

    Transport errors, bad status codes and malformed payloads all collapse
    into this one error with the same message; the cause is chained.
    """

    def __init__(self, message: str = FETCH_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class ConfigError(DashboardError):
    """Display configuration file is unreadable or invalid."""
