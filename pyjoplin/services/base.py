"""Shared plumbing for services built on an authenticated transport."""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from pyjoplin.exceptions import DeserializationError
from pyjoplin.transport import Transport, TransportResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseService:
    """Base class for the Joplin API services."""

    def __init__(self, transport: Transport):
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    @staticmethod
    def _validate(
        model: Type[ModelT], response: TransportResponse, op: str
    ) -> ModelT:
        data: Any = response.json()
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DeserializationError(
                f"{op} response validation failed", payload=data
            ) from e
