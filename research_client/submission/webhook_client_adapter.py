import httpx

from research_client.submission.client_base import BaseAnalysisClient
from research_client.submission.exceptions import RateLimitedError, TransportError

_TOO_MANY_REQUESTS = 429


class WebhookClientAdapter(BaseAnalysisClient):
    """Posts the payload as JSON to the analysis webhook."""

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def submit(self, payload: dict[str, object]) -> str:
        try:
            response = self._client.post(
                self._url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"Analysis service timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Analysis service network error: {exc}") from exc
        except (httpx.InvalidURL, httpx.StreamError) as exc:
            raise TransportError(f"Analysis service request failed: {exc}") from exc

        if response.status_code == _TOO_MANY_REQUESTS:
            raise RateLimitedError(
                f"Server responded with status: {response.status_code}",
                status_code=response.status_code,
            )
        if not response.is_success:
            raise TransportError(
                f"Server responded with status: {response.status_code}",
                status_code=response.status_code,
            )
        return response.text

    def close(self) -> None:
        self._client.close()
