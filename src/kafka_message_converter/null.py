"""KafkaNull — the "no payload" sentinel."""

from __future__ import annotations

from typing import ClassVar


class KafkaNull:
    """Singleton standing in for a record with a ``None`` value.

    Envelope payloads are never ``None``; a tombstone or empty record carries
    ``KAFKA_NULL`` instead, so "payload explicitly empty" stays distinct from
    "payload not set".
    """

    INSTANCE: ClassVar[KafkaNull]

    __slots__ = ()

    def __new__(cls) -> KafkaNull:
        try:
            return cls.INSTANCE
        except AttributeError:
            instance = super().__new__(cls)
            cls.INSTANCE = instance
            return instance

    def __repr__(self) -> str:
        return "KAFKA_NULL"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "KAFKA_NULL"

    def __copy__(self) -> KafkaNull:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> KafkaNull:
        return self


KAFKA_NULL = KafkaNull()


def is_kafka_null(value: object) -> bool:
    """Return True if *value* is the null-payload sentinel."""
    return value is KAFKA_NULL
