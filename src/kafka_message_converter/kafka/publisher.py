"""KafkaEnvelopePublisher — sends MessageEnvelopes as Kafka records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aiokafka import AIOKafkaProducer
from aiokafka.errors import KafkaConnectionError

from ..converter import MessagingMessageConverter
from ..exceptions import MessagingConnectionError
from .settings import KafkaClientSettings, cluster_reachable

if TYPE_CHECKING:
    from ..envelope import MessageEnvelope
    from ..ports import RecordMessageConverter
    from ..records import ProducerRecord

logger = logging.getLogger("kafka_message_converter.kafka.publisher")


class KafkaEnvelopePublisher:
    """Publishes envelopes through AIOKafkaProducer.

    Topic, partition, key and timestamp come from the envelope headers via the
    converter; ``default_topic`` is used when the envelope names no topic.
    """

    def __init__(
        self,
        settings: KafkaClientSettings | None = None,
        *,
        converter: RecordMessageConverter | None = None,
        default_topic: str | None = None,
    ) -> None:
        """Configure publisher.

        Args:
            settings: Client config; default KafkaClientSettings().
            converter: Envelope-to-record converter;
                default MessagingMessageConverter().
            default_topic: Fallback topic for envelopes without a ``topic`` header.
        """
        self._settings = settings or KafkaClientSettings()
        self._converter = converter or MessagingMessageConverter()
        self._default_topic = default_topic
        self._producer: AIOKafkaProducer | None = None

    async def _get_producer(self) -> AIOKafkaProducer:
        """Create or return existing producer."""
        if self._producer is not None:
            return self._producer
        producer = AIOKafkaProducer(**self._settings.producer_kwargs())
        try:
            await producer.start()
        except KafkaConnectionError as e:
            raise MessagingConnectionError(str(e)) from e
        logger.info("Kafka producer started (%s)", self._settings.bootstrap_servers)
        self._producer = producer
        return producer

    async def publish(
        self, envelope: MessageEnvelope, default_topic: str | None = None
    ) -> ProducerRecord:
        """Convert *envelope* and send it, waiting for the broker ack.

        Raises:
            MissingTopicError: No ``topic`` header and no default topic.
        """
        if default_topic is None:
            default_topic = self._default_topic
        record = self._converter.from_message(envelope, default_topic)
        kwargs = record.send_kwargs()
        producer = await self._get_producer()
        await producer.send_and_wait(**kwargs)
        logger.debug("Published message %s to %s", envelope.id, record.topic)
        return record

    async def close(self) -> None:
        """Stop the producer."""
        if self._producer is not None:
            await self._producer.stop()
            self._producer = None

    async def health_check(self) -> bool:
        """Return True if the cluster is reachable."""
        return await cluster_reachable(self._settings)
