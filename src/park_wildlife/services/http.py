"""
The HTTP session used for iNaturalist requests.

Retry policy: at most two retries, with 0.5 s exponential backoff, only for
idempotent methods and only on 429/502/503/504 or connection errors. Every
request gets a 30 s socket timeout unless the caller passes one.
``SpeciesRepository.refresh()`` stops waiting after ``timeout_ms`` whatever
the retry state. A status that is still failing after the retries reaches
``resp.raise_for_status()`` in ``datasources/inaturalist/client.py``, which
turns it into ``TransportError``.

Requests carry a ``park-wildlife/<version>`` User-Agent, as iNaturalist asks
of API clients, and ask for JSON.
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from park_wildlife import __version__

#: Default retry strategy.
DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=0.5,  # 0s, 1s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"park-wildlife/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    s.headers["Accept"] = "application/json"

    # Inject a default timeout so callers don't need to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session shared by the datasource clients.
session: requests.Session = create_session()
