"""Find the port the Joplin service listens on."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import requests

from pyjoplin.config import DEFAULT_HOST, MAX_PORT, MIN_PORT
from pyjoplin.exceptions import JoplinError, NoServiceFoundError
from pyjoplin.transport import Transport

LOGGER = logging.getLogger(__name__)

PING_PATH = "/ping"


class PortLocator:
    """
    Probe ``GET /ping`` on each candidate port in ascending order.

    The first port that answers with a 2xx wins and the remaining ports are
    never probed.
    """

    def __init__(
        self,
        session: requests.Session,
        host: str = DEFAULT_HOST,
        ports: Iterable[int] = range(MIN_PORT, MAX_PORT + 1),
        probe_timeout: float = 1.0,
    ):
        self._session = session
        self._host = host.rstrip("/")
        self._ports = sorted(ports)
        self._probe_timeout = probe_timeout

    def base_url(self, port: int) -> str:
        return f"{self._host}:{port}"

    def probe(self, port: int) -> None:
        """Raise if nothing healthy answers on ``port``."""
        transport = Transport(
            self.base_url(port), self._session, timeout=self._probe_timeout
        )
        transport.execute("GET", PING_PATH, context=f"probing port {port}")

    def locate(self) -> int:
        last_error: Optional[JoplinError] = None
        for port in self._ports:
            try:
                self.probe(port)
            except JoplinError as exc:
                LOGGER.debug("No service on port %d: %s", port, exc)
                last_error = exc
                continue
            LOGGER.info("Found Joplin service on port %d", port)
            return port

        if not self._ports:
            raise NoServiceFoundError("No ports to scan")
        message = (
            f"No Joplin service found on {self._host} "
            f"ports {self._ports[0]}-{self._ports[-1]}"
        )
        if last_error is not None:
            message = f"{message}: {last_error}"
        raise NoServiceFoundError(message, last_error=last_error) from last_error
