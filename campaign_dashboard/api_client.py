"""
Campaign API client - one-shot fetch of the campaign list.

No retries, no backoff: a failed fetch is terminal for the page load and the
caller shows a single error message.
"""

import json
from pathlib import Path
from typing import List, Optional

import httpx
from pydantic import ValidationError

from campaign_dashboard.errors import CampaignFetchError
from campaign_dashboard.logging_config import setup_logging
from campaign_dashboard.models import Campaign
from campaign_dashboard.schemas import parse_campaigns_payload
from campaign_dashboard.settings import DEFAULT_API_BASE_URL

logger = setup_logging(__name__)


class CampaignApiClient:
    """Fetches `{base_url}/campaigns` and parses it into Campaign objects."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            base_url: Campaign API root (no trailing slash)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def campaigns_url(self) -> str:
        return f"{self.base_url}/campaigns"

    def fetch_campaigns(self) -> List[Campaign]:
        """
        Fetch and validate the campaign list.

        Returns:
            Campaigns in API order

        Raises:
            CampaignFetchError: On any transport, status, JSON or schema failure
        """
        logger.info(f"Fetching campaigns from {self.campaigns_url}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(self.campaigns_url)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Campaign fetch failed: {e}")
            raise CampaignFetchError() from e

        campaigns = _parse_payload(data)
        logger.info(f"Fetched {len(campaigns)} campaigns")
        return campaigns


def load_campaigns_file(path: str) -> List[Campaign]:
    """
    Load a `{"campaigns": [...]}` payload from a JSON file.

    Raises:
        CampaignFetchError: If the file is missing or malformed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf8"))
    except (OSError, ValueError) as e:
        logger.error(f"Could not read campaigns file {path}: {e}")
        raise CampaignFetchError() from e

    return _parse_payload(data)


def _parse_payload(data) -> List[Campaign]:
    if not isinstance(data, dict):
        logger.error(f"Campaign payload must be a JSON object, got {type(data).__name__}")
        raise CampaignFetchError()

    try:
        return parse_campaigns_payload(data)
    except ValidationError as e:
        logger.error(f"Campaign payload failed validation: {e}")
        raise CampaignFetchError() from e
