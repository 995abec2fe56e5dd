"""Broker record types — what aiokafka delivers and what it accepts."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from .exceptions import MissingTopicError


class TimestampType(Enum):
    """Kafka timestamp classification."""

    NO_TIMESTAMP_TYPE = -1
    CREATE_TIME = 0
    LOG_APPEND_TIME = 1

    @classmethod
    def of(cls, value: TimestampType | int | str | None) -> TimestampType:
        """Coerce the enum, aiokafka's integer code, or a name.

        ``None`` maps to ``NO_TIMESTAMP_TYPE``.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NO_TIMESTAMP_TYPE
        if isinstance(value, str):
            return cls[value]
        return cls(value)


@runtime_checkable
class ConsumerRecordLike(Protocol):
    """Shape of an inbound record (``aiokafka.structs.ConsumerRecord``)."""

    topic: str
    partition: int
    offset: int
    timestamp: int
    timestamp_type: Any
    key: Any
    value: Any


class ProducerRecord(BaseModel):
    """Outbound record ready for ``AIOKafkaProducer.send``.

    ``topic`` is ``None`` only when neither the envelope nor the caller
    supplied one; such a record cannot be sent.
    """

    model_config = ConfigDict(frozen=True)

    topic: str | None
    partition: int | None = None
    timestamp: int | None = None
    key: Any = None
    value: Any = None

    def require_topic(self) -> str:
        """Return the topic or raise :class:`MissingTopicError`."""
        if self.topic is None:
            raise MissingTopicError(
                "No topic resolved: set the 'topic' header or a default topic"
            )
        return self.topic

    def send_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``AIOKafkaProducer.send``/``send_and_wait``."""
        return {
            "topic": self.require_topic(),
            "value": self.value,
            "key": self.key,
            "partition": self.partition,
            "timestamp_ms": self.timestamp,
        }
