# printing/backend_client.py

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from printing.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class BackendClient:
    """
    Thin JSON client for the print backend's REST API.

    - The API key is sent as the basic-auth username with an empty password.
    - Non-2xx answers raise `requests.HTTPError`; nothing is retried or translated here.
    """

    def __init__(
            self,
            base_url: str,
            api_key: str = "",
            timeout: float = 15.0,
            session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        if api_key:
            self._session.auth = (api_key, "")
        self._session.headers.update({"Accept": "application/json"})

    @staticmethod
    def from_settings(config: Settings = default_settings) -> "BackendClient":
        return BackendClient(config.api_url, api_key=config.api_key, timeout=config.request_timeout)

    def url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def get(self, path: str) -> Any:
        logger.debug("GET %s", path)
        r = self._session.get(self.url(path), timeout=self._timeout)
        r.raise_for_status()
        return r.json()

    def post(self, path: str, body: Dict[str, Any]) -> Any:
        logger.debug("POST %s", path)
        r = self._session.post(self.url(path), json=body, timeout=self._timeout)
        r.raise_for_status()
        return r.json()
