"""
Minimal HTTP transport for the Joplin local service.

  - One shared ``requests.Session`` per process (connection pooling)
  - ``token`` query parameter attached whenever the transport holds one
  - Non-2xx answers raised as UnexpectedStatusError, body kept as payload
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from pyjoplin.exceptions import (
    DeserializationError,
    NetworkError,
    UnexpectedStatusError,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of a 2xx answer."""

    status_code: int
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as exc:
            raise DeserializationError(
                "Invalid JSON response", payload=self.text
            ) from exc


class Transport:
    """HTTP executor bound to one base URL (``http://localhost:<port>``)."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._token = token
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    def with_token(self, token: str) -> "Transport":
        """Same session and base URL, every request carrying ``token``."""
        return Transport(self._base_url, self._session, token, self._timeout)

    @staticmethod
    def _normalize_params(params: Mapping[str, object]) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for k, v in params.items():
            if v is None:
                continue
            if isinstance(v, bool):
                out[k] = "1" if v else "0"
            else:
                out[k] = str(v)
        return out

    def execute(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, object]] = None,
        payload: Optional[Any] = None,
        *,
        context: str = "",
    ) -> TransportResponse:
        """Send one request and return the response of a 2xx answer."""
        url = f"{self._base_url}{path}"
        query = self._normalize_params(params or {})
        if self._token:
            query["token"] = self._token
        LOGGER.info("%s %s", method, url)

        try:
            resp = self._session.request(
                method,
                url,
                params=query,
                json=payload,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            LOGGER.debug("%s %s failed: %s", method, url, exc)
            raise NetworkError(f"{method} {url} failed: {exc}") from exc

        code = resp.status_code
        LOGGER.debug("%s %s returned status %d", method, url, code)
        if not 200 <= code < 300:
            try:
                body = resp.json()
            except ValueError:
                body = resp.text
            LOGGER.debug("%s %s failed with code %d", method, url, code)
            raise UnexpectedStatusError(
                code, context=context or f"{method} {path}", payload=body
            )
        return TransportResponse(status_code=code, content=resp.content or b"")
