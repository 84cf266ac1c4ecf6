"""httpx-backed health probe adapter."""

from __future__ import annotations

from typing import Final

import httpx

from statuspage_monitor.domain import ProbeOutcome, ProbeRequest

from .errors import ProbeRequestError
from .interfaces import HttpProberPort


class HttpxProber(HttpProberPort):
    """Adapter that issues the configured health-check request with httpx."""

    _USER_AGENT: Final[str] = "statuspage-monitor/1.0 (Python/httpx)"

    def __init__(self, request_timeout_seconds: float = 10.0, client: httpx.Client | None = None):
        """Initialize the probe adapter.

        Args:
            request_timeout_seconds: HTTP request timeout in seconds.
            client: Optional preconfigured httpx client.

        Raises:
            ValueError: Raised when the timeout is not positive.
        """

        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._client = client or httpx.Client(timeout=request_timeout_seconds)

    def prober_send(self, request: ProbeRequest) -> ProbeOutcome:
        """Send one probe request and normalize the response.

        Args:
            request: Effective probe request.

        Returns:
            ProbeOutcome: Successful response view for 2xx responses.

        Raises:
            ValueError: Raised when the request carries no url.
            ProbeRequestError: Raised for non-2xx responses with the response attached,
                and for invalid urls or transport failures without a response.
        """

        if not request.url:
            raise ValueError("probe request url must not be blank")

        headers = {str(name): str(value) for name, value in (request.headers or {}).items()}
        headers.setdefault("User-Agent", self._USER_AGENT)

        try:
            response = self._client.request(
                (request.method or "GET").upper(),
                request.url,
                headers=headers,
                params=request.params,
                json=request.data,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            raise ProbeRequestError(f"Probe transport request failed: {error}") from error

        if not response.is_success:
            raise ProbeRequestError(
                f"Probe target returned HTTP {response.status_code}",
                outcome=self._prober_build_outcome(response, succeeded=False),
            )

        return self._prober_build_outcome(response, succeeded=True)

    def prober_close(self) -> None:
        self._client.close()

    def _prober_build_outcome(self, response: httpx.Response, succeeded: bool) -> ProbeOutcome:
        return ProbeOutcome(
            succeeded=succeeded,
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
