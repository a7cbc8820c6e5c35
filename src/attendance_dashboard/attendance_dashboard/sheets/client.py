from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_SHEETS_TIMEOUT_SECONDS, UPSTREAM_ERROR_EXCERPT
from ..core.exceptions import UpstreamError
from .payload import decode_body

logger = logging.getLogger(__name__)


@dataclass
class SheetsConfig:
    url: str
    timeout_seconds: float = DEFAULT_SHEETS_TIMEOUT_SECONDS


class SheetsClient:
    """HTTP client for the spreadsheet web app (``GET ?action=getData``).

    No retries: a failure is reported to the caller and the user re-fetches.
    """

    def __init__(self, config: SheetsConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    def fetch_text(self) -> str:
        if not self._config.url:
            raise UpstreamError("SHEETS_URL is not configured")

        # ``t`` busts the web app's response cache.
        params = {"action": "getData", "t": str(int(time.time() * 1000))}
        try:
            response = self._session.get(
                self._config.url,
                params=params,
                headers={"Accept": "application/json"},
                allow_redirects=True,
                timeout=self._config.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("sheets fetch failed: %s", exc)
            raise UpstreamError(f"cannot reach data source: {exc}") from exc

        text = response.text
        if not response.ok:
            logger.warning("sheets fetch returned HTTP %s", response.status_code)
            raise UpstreamError(
                f"data source answered HTTP {response.status_code}",
                status=response.status_code,
                body=text[:UPSTREAM_ERROR_EXCERPT],
            )
        return text

    def fetch_payload(self) -> Any:
        """Fetch and JSON-decode the raw payload (PayloadError if it is not JSON)."""

        return decode_body(self.fetch_text())
