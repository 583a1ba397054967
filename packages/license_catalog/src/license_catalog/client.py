from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from manifest_model.errors import NetworkFailureError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "pyinit"


@dataclass(frozen=True)
class LicenseDetails:
    spdx_id: str
    body: str


class LicenseClient:
    """Blocking client for the GitHub licenses API.

    Every call is a single round-trip without retries; any transport, status
    or payload problem surfaces as `NetworkFailureError`.
    """

    def __init__(
        self,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/vnd.github+json",
            }
        )

    def _get_json(self, path: str) -> Any:
        url = f"{self.api_url}{path}"
        try:
            response = self._session.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkFailureError(f"GET {url} failed: {e}", details={"url": url}) from e
        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailureError(f"GET {url} returned a non-JSON body", details={"url": url}) from e

    def fetch_license_ids(self) -> list[str]:
        payload = self._get_json("/licenses")
        if not isinstance(payload, list):
            raise NetworkFailureError(f"Expected a JSON list of licenses, got {type(payload).__name__}.")

        out: list[str] = []
        for idx, item in enumerate(payload):
            spdx_id = item.get("spdx_id") if isinstance(item, dict) else None
            if not isinstance(spdx_id, str) or not spdx_id.strip():
                raise NetworkFailureError(f"License entry {idx} has no spdx_id.")
            out.append(spdx_id)
        return out

    def fetch_license_body(self, spdx_id: str) -> LicenseDetails:
        payload = self._get_json(f"/licenses/{spdx_id}")
        if not isinstance(payload, dict):
            raise NetworkFailureError(f"Expected a JSON object for license {spdx_id}.")
        body = payload.get("body")
        if not isinstance(body, str):
            raise NetworkFailureError(f"License {spdx_id} has no body text.")
        returned_id = payload.get("spdx_id")
        return LicenseDetails(
            spdx_id=returned_id if isinstance(returned_id, str) and returned_id else spdx_id,
            body=body,
        )
