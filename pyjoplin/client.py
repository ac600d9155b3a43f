"""Connection to a running Joplin application."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

import requests

from pyjoplin.auth import AuthSession, TokenStore
from pyjoplin.config import ClientConfig
from pyjoplin.discovery import PortLocator
from pyjoplin.services.notes import NotesService
from pyjoplin.transport import Transport

LOGGER = logging.getLogger(__name__)


class JoplinClient:
    """
    A session with the Joplin local service.

    Construction finds the service port and obtains the API token (from the
    token file, or by asking the user to accept a request in the Joplin
    application). Build one per process and pass it to whatever needs it.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.config = config or ClientConfig.load()
        owns_session = session is None
        self.session = requests.Session() if owns_session else session
        try:
            self._connect(sleep, cancel_event)
        except BaseException:
            # Nobody else can close a session created here
            if owns_session:
                self.session.close()
            raise
        LOGGER.info("Connected to Joplin on port %d", self.port)

    def _connect(
        self,
        sleep: Callable[[float], None],
        cancel_event: Optional[threading.Event],
    ) -> None:
        locator = PortLocator(
            self.session,
            host=self.config.host,
            ports=self.config.ports,
            probe_timeout=self.config.probe_timeout,
        )
        self.port: int = locator.locate()

        transport = Transport(
            locator.base_url(self.port),
            self.session,
            timeout=self.config.request_timeout,
        )
        self.token_store = TokenStore(self.config.token_path)
        auth = AuthSession(
            transport,
            self.token_store,
            poll_interval=self.config.poll_interval,
            max_retries=self.config.max_retries,
            sleep=sleep,
            cancel_event=cancel_event,
        )
        self.token: str = auth.authenticate()

        self._transport = transport.with_token(self.token)
        self._notes = NotesService(self._transport)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def notes(self) -> NotesService:
        return self._notes

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "JoplinClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<JoplinClient: {self.config.host}:{self.port}>"
