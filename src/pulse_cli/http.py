"""Client for the trace service REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from . import __version__
from .errors import TraceServiceError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models.config import PulseConfig
    from .models.span import SpanPayload

USER_AGENT = f"pulse-cli/{__version__}"
DEFAULT_TIMEOUT = 5.0
EMIT_TIMEOUT = 2.0


class TraceHttpClient:
    """Authenticated JSON client. Every failure surfaces as TraceServiceError."""

    def __init__(self, config: PulseConfig, client: httpx.Client | None = None) -> None:
        self.base_url = _normalize_base_url(config.api_url)
        self._client = client or httpx.Client(timeout=DEFAULT_TIMEOUT)
        self._headers = {"User-Agent": USER_AGENT}
        self._auth_headers = {
            **self._headers,
            "Authorization": f"Bearer {config.api_key}",
            "X-Project-Id": config.project_id,
        }

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> TraceHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def health_check(self) -> None:
        self._request("GET", "/health", headers=self._headers)

    def post_spans(self, spans: Sequence[SpanPayload]) -> None:
        if not spans:
            return
        self._request(
            "POST",
            "/v1/spans/batch",
            headers=self._auth_headers,
            json=[span.to_wire() for span in spans],
            timeout=EMIT_TIMEOUT,
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self.base_url + "/" + path.lstrip("/")
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TraceServiceError(
                f"HTTP {e.response.status_code} from {url}", url=url
            ) from e
        except httpx.InvalidURL as e:
            raise TraceServiceError(f"Invalid API url {url!r}: {e}", url=url) from e
        except httpx.HTTPError as e:
            raise TraceServiceError(f"Network error contacting {url}: {e}", url=url) from e
        return response


def _normalize_base_url(raw: str) -> str:
    url = raw.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        raise TraceServiceError(f"Invalid API url: {raw!r}", url=raw)
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise TraceServiceError(f"Invalid API url {raw!r}: {e}", url=raw) from e
    if not parsed.host:
        raise TraceServiceError(f"Invalid API url {raw!r}: missing host", url=raw)
    return url
