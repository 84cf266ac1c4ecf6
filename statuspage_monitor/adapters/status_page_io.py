"""Statuspage.io component update adapter."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Final

import httpx
from loguru import logger

from statuspage_monitor.domain import ComponentTarget, ComponentUpdateResult, HealthState

from .errors import StatusPageUpdateError
from .interfaces import StatusPageClientPort


def client_split_component_ids(component_ids: str | Sequence[str] | None) -> list[str]:
    """Normalize component ids into an ordered list.

    A string is split on commas after removing spaces. A sequence is used as
    given. Empty entries are dropped.

    Args:
        component_ids: Comma separated ids or a sequence of ids.

    Returns:
        list[str]: Component ids in input order.
    """

    if not component_ids:
        return []
    if isinstance(component_ids, str):
        candidates = component_ids.replace(" ", "").split(",")
    else:
        candidates = [str(component_id).strip() for component_id in component_ids]
    return [component_id for component_id in candidates if component_id]


class StatusPageIOClient(StatusPageClientPort):
    """Adapter for Statuspage.io `PUT /pages/{page_id}/components/{component_id}`."""

    _USER_AGENT: Final[str] = "statuspage-monitor/1.0 (Python/httpx)"

    def __init__(
        self,
        api_key: str,
        default_page_id: str,
        base_url: str = "https://api.statuspage.io/v1/pages",
        request_timeout_seconds: float = 10.0,
        max_workers: int = 8,
        client: httpx.Client | None = None,
    ):
        """Initialize the Statuspage.io adapter.

        Args:
            api_key: Statuspage.io API key.
            default_page_id: Page id used when a call does not pass one.
            base_url: Base URL of the pages endpoint.
            request_timeout_seconds: HTTP request timeout in seconds.
            max_workers: Thread pool size for batch updates.
            client: Optional preconfigured httpx client.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_api_key = api_key.strip()
        normalized_page_id = default_page_id.strip()
        normalized_base_url = base_url.strip()

        if not normalized_api_key:
            raise ValueError("api_key must not be blank")
        if not normalized_page_id:
            raise ValueError("default_page_id must not be blank")
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")

        self._api_key = normalized_api_key
        self._default_page_id = normalized_page_id
        self._base_url = normalized_base_url.rstrip("/")
        self._max_workers = max_workers
        self._client = client or httpx.Client(timeout=request_timeout_seconds)

    @property
    def default_page_id(self) -> str:
        return self._default_page_id

    def client_default_headers(self) -> dict[str, str]:
        """Return the authorization headers sent with every update.

        Returns:
            dict[str, str]: Header mapping.
        """

        return {"Authorization": f"OAuth {self._api_key}", "User-Agent": self._USER_AGENT}

    def client_component_url(self, component_id: str, page_id: str | None = None) -> str:
        """Return the component update URL.

        Args:
            component_id: Component id.
            page_id: Optional page id override.

        Returns:
            str: Fully qualified component URL.
        """

        return f"{self._base_url}/{page_id or self._default_page_id}/components/{component_id}"

    def client_update_component_status(
        self,
        component_id: str | None,
        status: HealthState | str | None,
        page_id: str | None = None,
    ) -> httpx.Response | None:
        """Update one component status.

        Args:
            component_id: Component id.
            status: Target state as provider string or HealthState.
            page_id: Optional page id override.

        Returns:
            httpx.Response | None: Provider response, or None when id or status is missing.

        Raises:
            StatusPageUpdateError: Raised for invalid urls, transport failures and non-2xx responses.
        """

        if not component_id or not status:
            return None

        status_value = status.status_page_value if isinstance(status, HealthState) else str(status)
        url = self.client_component_url(component_id=component_id, page_id=page_id)

        try:
            response = self._client.put(
                url,
                headers=self.client_default_headers(),
                json={"component": {"status": status_value}},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            raise StatusPageUpdateError(f"Statuspage transport request failed: {error}") from error

        if not response.is_success:
            raise StatusPageUpdateError(
                f"Statuspage returned HTTP {response.status_code} for component={component_id}",
                status_code=response.status_code,
            )

        return response

    def client_update_components_status(
        self,
        component_ids: str | Sequence[str] | None,
        status: HealthState | str | None,
        page_id: str | None = None,
    ) -> list[ComponentUpdateResult]:
        """Update several components concurrently and collect every outcome.

        All updates are submitted before any is awaited. A failed update is
        recorded in its result and does not stop the others.

        Args:
            component_ids: Comma separated ids or a sequence of ids.
            status: Target state as provider string or HealthState.
            page_id: Optional page id override.

        Returns:
            list[ComponentUpdateResult]: Per-component outcomes in input order.
        """

        if not component_ids or not status:
            return []

        resolved_page_id = page_id or self._default_page_id
        targets = [
            ComponentTarget(component_id=component_id, page_id=resolved_page_id)
            for component_id in client_split_component_ids(component_ids)
        ]
        if not targets:
            return []

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(targets))) as executor:
            futures = [
                executor.submit(self.client_update_component_status, target.component_id, status, target.page_id)
                for target in targets
            ]
            results = [
                self._client_collect_result(target=target, future=future)
                for target, future in zip(targets, futures)
            ]

        return results

    def client_close(self) -> None:
        self._client.close()

    def _client_collect_result(self, target: ComponentTarget, future) -> ComponentUpdateResult:
        try:
            response = future.result()
        except StatusPageUpdateError as error:
            logger.error(f"Statuspage update failed for component={target.component_id}: {error}")
            return ComponentUpdateResult(target=target, status_code=error.status_code, error=str(error))

        return ComponentUpdateResult(
            target=target,
            status_code=response.status_code if response is not None else None,
        )
