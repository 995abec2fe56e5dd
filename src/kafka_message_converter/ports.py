from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .envelope import MessageEnvelope
    from .records import ConsumerRecordLike, ProducerRecord


@runtime_checkable
class Acknowledgment(Protocol):
    """
    Handle for confirming receipt of an inbound record.

    Opaque to the converter; its owner decides what acknowledging means
    (offset commit, no-op, …).
    """

    def acknowledge(self) -> Any:
        """Confirm the record was processed."""
        ...


@runtime_checkable
class RecordMessageConverter(Protocol):
    """
    Port for converting between Kafka records and message envelopes.
    """

    def to_message(
        self,
        record: ConsumerRecordLike,
        acknowledgment: Any = None,
        type_hint: Any = None,
    ) -> MessageEnvelope:
        """
        Convert an inbound *record* to an envelope.

        Args:
            record: Record delivered by the consumer.
            acknowledgment: Optional handle attached under ``acknowledgment``.
            type_hint: Target payload type for converters that use it.
        """
        ...

    def from_message(
        self, envelope: MessageEnvelope, default_topic: str | None = None
    ) -> ProducerRecord:
        """
        Convert *envelope* to an outbound record.

        Args:
            envelope: Message to send.
            default_topic: Used when the envelope has no ``topic`` header.
        """
        ...
