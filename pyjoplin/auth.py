"""
API token acquisition.

The token is read from the token file when one was saved by an earlier run.
Otherwise the authorization handshake runs:

  1. POST /auth                      -> {"auth_token": ..., "status": "waiting"}
  2. GET  /auth/check?auth_token=... -> {"status": "waiting"}       (repeat)
                                     -> {"status": "accepted", "token": ...}
                                     -> {"status": "rejected"}

The user approves or rejects the request inside the Joplin application.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from pyjoplin.config import RETRIES_GET_API_TOKEN
from pyjoplin.exceptions import (
    AuthorizationCancelled,
    AuthorizationRejected,
    AuthorizationTimeout,
    DeserializationError,
    ProtocolError,
    TokenStoreError,
)
from pyjoplin.transport import Transport, TransportResponse

LOGGER = logging.getLogger(__name__)

AUTH_PATH = "/auth"
AUTH_CHECK_PATH = "/auth/check"


class AuthStatus(str, Enum):
    WAITING = "waiting"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class HandshakeState(BaseModel):
    """One response of the handshake endpoints. Never persisted."""

    model_config = ConfigDict(extra="ignore")

    auth_token: Optional[str] = None
    status: Optional[str] = None
    token: Optional[str] = None


# ------------------------------- Token file ----------------------------------


class TokenStore:
    """The API token persisted as a single line in a file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Optional[str]:
        """Return the saved token, or ``None`` when there is none."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                token = f.read().strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise TokenStoreError(
                f"Could not read token file {self.path}: {exc}"
            ) from exc
        return token or None

    def save(self, token: str) -> None:
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(token)
            os.chmod(self.path, 0o600)
        except OSError as exc:
            raise TokenStoreError(
                f"Could not write token file {self.path}: {exc}"
            ) from exc
        LOGGER.info("Saved API token to %s", self.path)

    def clear(self) -> bool:
        """Remove the token file. Return whether there was one."""
        try:
            os.remove(self.path)
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise TokenStoreError(
                f"Could not remove token file {self.path}: {exc}"
            ) from exc
        LOGGER.info("Removed token file %s", self.path)
        return True


# ------------------------------- Handshake -----------------------------------


class AuthSession:
    """Obtain the API token for the service behind ``transport``."""

    def __init__(
        self,
        transport: Transport,
        store: TokenStore,
        *,
        poll_interval: float = 1.0,
        max_retries: int = RETRIES_GET_API_TOKEN,
        sleep: Callable[[float], None] = time.sleep,
        cancel_event: Optional[threading.Event] = None,
    ):
        self._transport = transport
        self._store = store
        self._poll_interval = poll_interval
        self._max_retries = max_retries
        self._sleep = sleep
        self._cancel_event = cancel_event

    def authenticate(self) -> str:
        token = self._store.load()
        if token:
            LOGGER.info("Using API token from %s", self._store.path)
            return token
        LOGGER.info("No saved API token, requesting one")
        return self.request_token()

    def request_token(self) -> str:
        """Run the handshake and persist the issued token."""
        state = self._parse(
            self._transport.execute(
                "POST", AUTH_PATH, context="requesting authorization"
            )
        )
        if not state.auth_token:
            raise ProtocolError("Authorization response has no auth_token")
        LOGGER.warning("Accept the API token request in the Joplin application")

        token = self._poll(state.auth_token)
        self._store.save(token)
        return token

    def _poll(self, auth_token: str) -> str:
        for attempt in range(1, self._max_retries + 1):
            state = self._parse(
                self._transport.execute(
                    "GET",
                    AUTH_CHECK_PATH,
                    params={"auth_token": auth_token},
                    context="checking authorization",
                )
            )
            LOGGER.debug("Authorization check %d: %s", attempt, state.status)

            if state.status == AuthStatus.ACCEPTED.value:
                if not state.token:
                    raise ProtocolError("Accepted authorization carries no token")
                LOGGER.info("API token request accepted")
                return state.token
            if state.status == AuthStatus.REJECTED.value:
                raise AuthorizationRejected("API token request rejected")
            if state.status != AuthStatus.WAITING.value:
                raise ProtocolError(
                    f"Unknown authorization status: {state.status!r}"
                )
            if attempt < self._max_retries:
                self._wait()

        LOGGER.warning(
            "No answer to the API token request after %d checks", self._max_retries
        )
        raise AuthorizationTimeout("API token request got no answer from the user")

    def _wait(self) -> None:
        if self._cancel_event is None:
            self._sleep(self._poll_interval)
        elif self._cancel_event.wait(self._poll_interval):
            raise AuthorizationCancelled("Waiting for authorization was cancelled")

    @staticmethod
    def _parse(response: TransportResponse) -> HandshakeState:
        data = response.json()
        try:
            return HandshakeState.model_validate(data)
        except ValidationError as exc:
            raise DeserializationError(
                "Authorization response validation failed", payload=data
            ) from exc
