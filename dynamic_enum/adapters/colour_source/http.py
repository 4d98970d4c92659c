"""Colour source that fetches records from an HTTP endpoint.

The endpoint must answer ``GET`` with a JSON array of colour records (same
shape as the JSON file source). Timeouts, connection errors and 5xx
responses are retried here; the registry itself never retries.
"""

from typing import Optional

import httpx
from pydantic import TypeAdapter, ValidationError
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from dynamic_enum.core.exceptions import DataSourceError
from dynamic_enum.core.logging import logger
from dynamic_enum.domains.colours.types import ColourRecord

_RECORDS_ADAPTER = TypeAdapter(list[ColourRecord])


def should_retry_on_timeout_or_server_error(exception: BaseException) -> bool:
    """Check if exception is transient and the request should be retried.

    Args:
        exception: Exception to check

    Returns:
        True for timeouts, connection errors and 5xx responses
    """
    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code >= 500
    return isinstance(
        exception,
        (
            httpx.ConnectTimeout,
            httpx.ReadTimeout,
            httpx.WriteTimeout,
            httpx.PoolTimeout,
            httpx.ConnectError,
        ),
    )


class HttpColourSource:
    """Fetches colour records with a synchronous httpx client."""

    MAX_ATTEMPTS = 3

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the source.

        Args:
            url: Endpoint returning the record array.
            timeout: Per-request timeout in seconds.
            client: Client to use instead of a fresh one per fetch (tests pass
                one built on ``httpx.MockTransport``).
        """
        self.url = url
        self.timeout = timeout
        self._client = client
        self._logger = logger.with_prefix("HttpColourSource: ").with_context(
            component="colour_source", url=url
        )

    @retry(
        stop=stop_after_attempt(MAX_ATTEMPTS),
        retry=retry_if_exception(should_retry_on_timeout_or_server_error),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        reraise=True,
    )
    def _get(self, client: httpx.Client) -> bytes:
        response = client.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return response.content

    def fetch_records(self) -> list[ColourRecord]:
        """GET and validate the records.

        Raises:
            DataSourceError: If the request fails after retries or the body
                does not hold valid records.
        """
        try:
            if self._client is not None:
                body = self._get(self._client)
            else:
                with httpx.Client() as client:
                    body = self._get(client)
        except httpx.HTTPError as e:
            self._logger.warning(f"Request failed: {e}")
            raise DataSourceError(self.url, f"request failed: {e}") from e

        try:
            records = _RECORDS_ADAPTER.validate_json(body)
        except ValidationError as e:
            raise DataSourceError(self.url, f"invalid colour records: {e}") from e

        self._logger.debug(f"Fetched {len(records)} colour records")
        return records
