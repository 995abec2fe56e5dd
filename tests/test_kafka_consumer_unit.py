"""Unit tests for KafkaEnvelopeConsumer with mocked consumer (no real broker)."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kafka_message_converter.envelope import MessageEnvelope
from kafka_message_converter.headers import KafkaHeaders
from kafka_message_converter.kafka.consumer import KafkaEnvelopeConsumer
from kafka_message_converter.kafka.settings import KafkaClientSettings
from kafka_message_converter.null import KAFKA_NULL


def _mock_consumer(records: list[Any]) -> MagicMock:
    consumer = MagicMock()
    consumer.start = AsyncMock()
    consumer.stop = AsyncMock()
    consumer.__aiter__.return_value = records
    return consumer


@pytest.mark.asyncio
async def test_run_delivers_envelopes(
    settings: KafkaClientSettings, make_record: Any
) -> None:
    records = [
        make_record(),
        make_record(topic="other"),
        make_record(value=None, offset=56),
    ]
    mock_consumer = _mock_consumer(records)
    received: list[MessageEnvelope] = []

    async def handler(envelope: MessageEnvelope) -> None:
        received.append(envelope)

    with patch(
        "kafka_message_converter.kafka.consumer.AIOKafkaConsumer",
        return_value=mock_consumer,
    ) as consumer_cls:
        consumer = KafkaEnvelopeConsumer(settings, group_id="g1")
        await consumer.subscribe("orders", handler)
        await consumer.run()

    assert consumer_cls.call_args[0] == ("orders",)
    assert consumer_cls.call_args[1]["group_id"] == "g1"
    assert consumer_cls.call_args[1]["bootstrap_servers"] == "broker:9092"
    assert "enable_auto_commit" not in consumer_cls.call_args[1]
    assert [e.headers[KafkaHeaders.OFFSET] for e in received] == [55, 56]
    assert received[0].payload == "hello"
    assert received[1].payload is KAFKA_NULL
    assert all(KafkaHeaders.ACKNOWLEDGMENT not in e.headers for e in received)


@pytest.mark.asyncio
async def test_acknowledgment_factory_attaches_handle(
    settings: KafkaClientSettings, make_record: Any
) -> None:
    record = make_record()
    mock_consumer = _mock_consumer([record])
    ack = MagicMock()
    factory = MagicMock(return_value=ack)
    handler = AsyncMock()

    with patch(
        "kafka_message_converter.kafka.consumer.AIOKafkaConsumer",
        return_value=mock_consumer,
    ) as consumer_cls:
        consumer = KafkaEnvelopeConsumer(
            settings, acknowledgment_factory=factory
        )
        await consumer.subscribe("orders", handler)
        await consumer.run()

    factory.assert_called_once_with(mock_consumer, record)
    envelope = handler.await_args[0][0]
    assert envelope.headers[KafkaHeaders.ACKNOWLEDGMENT] is ack
    assert consumer_cls.call_args[1]["enable_auto_commit"] is False


@pytest.mark.asyncio
async def test_handler_failure_propagates(
    settings: KafkaClientSettings, make_record: Any
) -> None:
    mock_consumer = _mock_consumer([make_record()])
    handler = AsyncMock(side_effect=RuntimeError("boom"))

    with patch(
        "kafka_message_converter.kafka.consumer.AIOKafkaConsumer",
        return_value=mock_consumer,
    ):
        consumer = KafkaEnvelopeConsumer(settings)
        await consumer.subscribe("orders", handler)
        with pytest.raises(RuntimeError, match="boom"):
            await consumer.run()


@pytest.mark.asyncio
async def test_second_subscribe_resubscribes(
    settings: KafkaClientSettings,
) -> None:
    mock_consumer = _mock_consumer([])
    with patch(
        "kafka_message_converter.kafka.consumer.AIOKafkaConsumer",
        return_value=mock_consumer,
    ) as consumer_cls:
        consumer = KafkaEnvelopeConsumer(settings)
        await consumer.subscribe("a", AsyncMock())
        await consumer.subscribe("b", AsyncMock())
        await consumer.stop()
    consumer_cls.assert_called_once()
    mock_consumer.subscribe.assert_called_once_with(["a", "b"])
    mock_consumer.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_without_subscribe_returns(
    settings: KafkaClientSettings,
) -> None:
    await KafkaEnvelopeConsumer(settings).run()
