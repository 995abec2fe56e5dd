"""MessageEnvelope — immutable payload plus metadata map."""

from __future__ import annotations

import time
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar, overload

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)

from .exceptions import HeaderTypeError
from .id_generator import UUID4Generator

if TYPE_CHECKING:
    from collections.abc import Callable

    from .id_generator import IIDGenerator

T = TypeVar("T")

ID_VALUE_NONE = uuid.UUID(int=0)
"""Identity carried by envelopes built without id generation."""

NO_TIMESTAMP = -1
"""Timestamp carried by envelopes built without timestamp generation."""


def current_millis() -> int:
    """Wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class MessageEnvelope(BaseModel):
    """Immutable transport-neutral message.

    The payload is never ``None``; use :data:`~kafka_message_converter.null.KAFKA_NULL`
    for "no payload". Identity and creation time live on the envelope itself,
    not in ``headers``.
    """

    model_config = ConfigDict(frozen=True)

    payload: Any
    headers: Mapping[str, Any] = Field(default_factory=dict)
    id: uuid.UUID = ID_VALUE_NONE
    timestamp: int = NO_TIMESTAMP

    @field_validator("payload")
    @classmethod
    def _payload_not_none(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("payload must not be None; use KAFKA_NULL instead")
        return value

    @field_validator("headers", mode="after")
    @classmethod
    def _read_only_headers(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("headers")
    def _dump_headers(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @classmethod
    def build(
        cls,
        payload: Any,
        headers: Mapping[str, Any] | None = None,
        *,
        generate_id: bool = False,
        generate_timestamp: bool = False,
        id_generator: IIDGenerator | None = None,
        clock: Callable[[], int] | None = None,
    ) -> MessageEnvelope:
        """Create an envelope, resolving identity and timestamp from the flags.

        Args:
            payload: Message payload (not ``None``).
            headers: Metadata map; copied.
            generate_id: Use a fresh id instead of :data:`ID_VALUE_NONE`.
            generate_timestamp: Use the clock instead of :data:`NO_TIMESTAMP`.
            id_generator: Id source when ``generate_id``; default UUIDv4.
            clock: Millisecond clock when ``generate_timestamp``.
        """
        message_id = (
            (id_generator or UUID4Generator()).next_id()
            if generate_id
            else ID_VALUE_NONE
        )
        timestamp = (clock or current_millis)() if generate_timestamp else NO_TIMESTAMP
        return cls(
            payload=payload,
            headers=dict(headers or {}),
            id=message_id,
            timestamp=timestamp,
        )

    def has_header(self, key: str) -> bool:
        return key in self.headers

    @overload
    def get_header(self, key: str) -> Any: ...

    @overload
    def get_header(
        self, key: str, expected_type: type[T], default: T | None = None
    ) -> T | None: ...

    def get_header(
        self,
        key: str,
        expected_type: type[Any] | None = None,
        default: Any = None,
    ) -> Any:
        """Look up a header, optionally checking its type.

        Missing or ``None`` values return *default*. Booleans are not
        accepted where an ``int`` is expected.

        Raises:
            HeaderTypeError: The header holds a value of another type.
        """
        value = self.headers.get(key)
        if value is None:
            return default
        if expected_type is None:
            return value
        if not isinstance(value, expected_type) or (
            expected_type is int and isinstance(value, bool)
        ):
            raise HeaderTypeError(key, expected_type, value)
        return value

    def with_payload(self, payload: Any) -> MessageEnvelope:
        """Return a copy carrying *payload*."""
        return self.model_validate({**self._fields(), "payload": payload})

    def with_headers(
        self, updates: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> MessageEnvelope:
        """Return a copy with *updates* and *kwargs* merged into the headers.

        Keys that are not identifiers (``received-key``) go in *updates*.
        """
        headers = {**self.headers, **(updates or {}), **kwargs}
        return self.model_validate({**self._fields(), "headers": headers})

    def without_headers(self, *keys: str) -> MessageEnvelope:
        """Return a copy with *keys* removed from the headers."""
        headers = {k: v for k, v in self.headers.items() if k not in keys}
        return self.model_validate({**self._fields(), "headers": headers})

    def _fields(self) -> dict[str, Any]:
        return {
            "payload": self.payload,
            "headers": dict(self.headers),
            "id": self.id,
            "timestamp": self.timestamp,
        }
