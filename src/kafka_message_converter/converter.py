"""MessagingMessageConverter — Kafka records to envelopes and back."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .config import ConverterConfig
from .envelope import MessageEnvelope, current_millis
from .headers import KafkaHeaders
from .id_generator import UUID4Generator
from .null import KAFKA_NULL
from .records import ProducerRecord, TimestampType

if TYPE_CHECKING:
    from collections.abc import Callable

    from .id_generator import IIDGenerator
    from .records import ConsumerRecordLike

logger = logging.getLogger("kafka_message_converter.converter")


class MessagingMessageConverter:
    """Converts single records for a message listener.

    Inbound envelopes carry the ``received-*`` headers from
    :class:`KafkaHeaders`; outbound records take topic, partition, key and
    timestamp from the envelope's ``topic``/``partition``/``key``/``timestamp``
    headers.

    Payload handling can be customized by overriding
    :meth:`extract_and_convert_value` and :meth:`convert_payload`, or by
    passing ``value_extractor``/``payload_converter``. ``None`` values and
    :data:`KAFKA_NULL` are mapped onto each other after the hook runs.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        *,
        id_generator: IIDGenerator | None = None,
        clock: Callable[[], int] | None = None,
        value_extractor: Callable[[ConsumerRecordLike, Any], Any] | None = None,
        payload_converter: Callable[[MessageEnvelope], Any] | None = None,
    ) -> None:
        """Configure the converter.

        Args:
            config: Id/timestamp generation flags; defaults to both off.
            id_generator: Id source when ``generate_message_id`` is on.
            clock: Millisecond clock when ``generate_timestamp`` is on.
            value_extractor: ``(record, type_hint) -> payload`` used by
                :meth:`extract_and_convert_value`.
            payload_converter: ``(envelope) -> value`` used by
                :meth:`convert_payload`.
        """
        self._config = config or ConverterConfig()
        self._id_generator = id_generator or UUID4Generator()
        self._clock = clock or current_millis
        self._value_extractor = value_extractor
        self._payload_converter = payload_converter

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def to_message(
        self,
        record: ConsumerRecordLike,
        acknowledgment: Any = None,
        type_hint: Any = None,
    ) -> MessageEnvelope:
        """Build an envelope from an inbound record."""
        headers: dict[str, Any] = {
            KafkaHeaders.RECEIVED_MESSAGE_KEY: record.key,
            KafkaHeaders.RECEIVED_TOPIC: record.topic,
            KafkaHeaders.RECEIVED_PARTITION_ID: record.partition,
            KafkaHeaders.OFFSET: record.offset,
            KafkaHeaders.TIMESTAMP_TYPE: TimestampType.of(record.timestamp_type).name,
            KafkaHeaders.RECEIVED_TIMESTAMP: record.timestamp,
        }
        if acknowledgment is not None:
            headers[KafkaHeaders.ACKNOWLEDGMENT] = acknowledgment

        value = self.extract_and_convert_value(record, type_hint)
        envelope = MessageEnvelope.build(
            KAFKA_NULL if value is None else value,
            headers,
            generate_id=self._config.generate_message_id,
            generate_timestamp=self._config.generate_timestamp,
            id_generator=self._id_generator,
            clock=self._clock,
        )
        logger.debug(
            "Converted record %s-%s@%s to message %s",
            record.topic,
            record.partition,
            record.offset,
            envelope.id,
        )
        return envelope

    def from_message(
        self, envelope: MessageEnvelope, default_topic: str | None = None
    ) -> ProducerRecord:
        """Build an outbound record from an envelope.

        The ``topic`` header wins over *default_topic*. If neither is set the
        record's topic is ``None``; :meth:`ProducerRecord.require_topic`
        rejects it at send time.

        Raises:
            HeaderTypeError: ``topic``, ``partition`` or ``timestamp`` holds
                a value of the wrong type.
        """
        topic = envelope.get_header(KafkaHeaders.TOPIC, str)
        partition = envelope.get_header(KafkaHeaders.PARTITION_ID, int)
        key = envelope.get_header(KafkaHeaders.MESSAGE_KEY)
        payload = self.convert_payload(envelope)
        timestamp = envelope.get_header(KafkaHeaders.TIMESTAMP, int)
        if topic is None:
            topic = default_topic
        if topic is None:
            logger.debug("Message %s has no topic and no default topic", envelope.id)
        return ProducerRecord(
            topic=topic,
            partition=partition,
            timestamp=timestamp,
            key=key,
            value=None if payload is KAFKA_NULL else payload,
        )

    def extract_and_convert_value(
        self, record: ConsumerRecordLike, type_hint: Any = None
    ) -> Any:
        """Return the payload for *record*; by default the value as delivered.

        Subclasses may decode or convert. Returning ``None`` yields a
        :data:`KAFKA_NULL` payload.
        """
        if self._value_extractor is not None:
            return self._value_extractor(record, type_hint)
        return record.value

    def convert_payload(self, envelope: MessageEnvelope) -> Any:
        """Return the value to send for *envelope*; by default the payload.

        Subclasses may encode or convert. :data:`KAFKA_NULL` is sent as
        ``None``.
        """
        if self._payload_converter is not None:
            return self._payload_converter(envelope)
        return envelope.payload
