"""Feed download — one blocking GET per run, no retry."""

from __future__ import annotations

import httpx
import structlog

from buoyview import __version__
from buoyview.core.exceptions import FetchError

logger = structlog.get_logger()

USER_AGENT = f"buoyview/{__version__}"


def fetch_text(url: str, timeout: float = 30.0, client: httpx.Client | None = None) -> str:
    """GET ``url`` and return the response body as text.

    Any transport error or non-2xx status raises ``FetchError``.  Pass
    ``client`` to reuse a connection pool or inject a mock transport.
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )

    logger.info("fetch_started", url=url)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(url, str(exc) or type(exc).__name__) from exc
    finally:
        if owns_client:
            client.close()

    logger.info("fetch_complete", url=url, status=response.status_code, bytes=len(response.content))
    return response.text


__all__ = ["USER_AGENT", "fetch_text"]
