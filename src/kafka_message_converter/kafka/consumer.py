"""KafkaEnvelopeConsumer — delivers Kafka records to handlers as envelopes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aiokafka import AIOKafkaConsumer
from aiokafka.errors import KafkaConnectionError

from ..converter import MessagingMessageConverter
from ..exceptions import MessagingConnectionError
from .settings import KafkaClientSettings, cluster_reachable

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine

    from ..envelope import MessageEnvelope
    from ..ports import RecordMessageConverter

    EnvelopeHandler = Callable[[MessageEnvelope], Coroutine[Any, Any, None]]
    AcknowledgmentFactory = Callable[[AIOKafkaConsumer, Any], Any]

logger = logging.getLogger("kafka_message_converter.kafka.consumer")


class KafkaEnvelopeConsumer:
    """Kafka consumer that hands each record to its topic's handler as an envelope.

    Offsets are not committed here. Pass ``acknowledgment_factory`` to attach
    an acknowledgment handle to every envelope; that handle owns the commit
    and auto-commit is switched off.
    """

    def __init__(
        self,
        settings: KafkaClientSettings | None = None,
        *,
        group_id: str | None = None,
        converter: RecordMessageConverter | None = None,
        acknowledgment_factory: AcknowledgmentFactory | None = None,
        type_hint: Any = None,
    ) -> None:
        """Configure consumer.

        Args:
            settings: Client config; default KafkaClientSettings().
            group_id: Kafka consumer group id.
            converter: Record-to-envelope converter;
                default MessagingMessageConverter().
            acknowledgment_factory: ``(consumer, record) -> handle``; None means
                envelopes carry no ``acknowledgment`` header.
            type_hint: Passed to the converter for payload extraction.
        """
        self._settings = settings or KafkaClientSettings()
        self._group_id = group_id
        self._converter = converter or MessagingMessageConverter()
        self._acknowledgment_factory = acknowledgment_factory
        self._type_hint = type_hint
        self._consumer: AIOKafkaConsumer | None = None
        self._topic_handlers: dict[str, EnvelopeHandler] = {}
        self._running = False

    async def _handle_record(
        self, consumer: AIOKafkaConsumer, record: Any, handler: EnvelopeHandler
    ) -> None:
        """Convert a single record and invoke its handler."""
        acknowledgment = (
            self._acknowledgment_factory(consumer, record)
            if self._acknowledgment_factory is not None
            else None
        )
        envelope = self._converter.to_message(record, acknowledgment, self._type_hint)
        try:
            await handler(envelope)
        except Exception:
            logger.exception(
                "Handler failed for %s-%s@%s",
                record.topic,
                record.partition,
                record.offset,
            )
            raise

    async def subscribe(self, topic: str, handler: EnvelopeHandler) -> None:
        """Register handler for the topic."""
        self._topic_handlers[topic] = handler
        topics = list(self._topic_handlers)
        if self._consumer is None:
            consumer = AIOKafkaConsumer(
                *topics,
                **self._settings.consumer_kwargs(
                    self._group_id,
                    manual_commit=self._acknowledgment_factory is not None,
                ),
            )
            try:
                await consumer.start()
            except KafkaConnectionError as e:
                raise MessagingConnectionError(str(e)) from e
            logger.info("Kafka consumer started for %s", topics)
            self._consumer = consumer
        else:
            self._consumer.subscribe(topics)

    async def run(self) -> None:
        """Process records until stopped. Call after subscribe()."""
        consumer = self._consumer
        if consumer is None:
            return
        self._running = True
        try:
            async for record in consumer:
                if not self._running:
                    break
                handler = self._topic_handlers.get(record.topic)
                if handler is not None:
                    await self._handle_record(consumer, record, handler)
        finally:
            self._running = False

    async def stop(self) -> None:
        """Stop the consumer loop."""
        self._running = False
        if self._consumer is not None:
            await self._consumer.stop()
            self._consumer = None
            logger.info("Kafka consumer stopped")

    async def health_check(self) -> bool:
        """Return True if the cluster is reachable."""
        return await cluster_reachable(self._settings)
