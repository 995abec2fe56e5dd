"""Client settings shared by the envelope publisher and consumer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from aiokafka.admin import AIOKafkaAdminClient
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger("kafka_message_converter.kafka")

Serializer = Callable[[Any], bytes]
Deserializer = Callable[[bytes], Any]


def _none_passthrough(func: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Wrap a (de)serializer so ``None`` keys and tombstone values stay ``None``.

    aiokafka hands ``None`` to configured serializers; the converter relies on
    ``None`` values to carry KAFKA_NULL in both directions.
    """

    def wrapper(value: Any) -> Any:
        if value is None:
            return None
        return func(value)

    return wrapper


class KafkaClientSettings(BaseModel):
    """aiokafka client configuration.

    Serializers turn envelope payloads and ``key`` headers into bytes on the
    way out; deserializers do the reverse before records reach the converter.
    Other aiokafka keyword arguments go in ``options``.
    """

    model_config = ConfigDict(frozen=True)

    bootstrap_servers: str | list[str] = "localhost:9092"
    client_id: str = "kafka-message-converter"
    key_serializer: Serializer | None = None
    value_serializer: Serializer | None = None
    key_deserializer: Deserializer | None = None
    value_deserializer: Deserializer | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    def _base_kwargs(self) -> dict[str, Any]:
        return {
            "bootstrap_servers": self.bootstrap_servers,
            "client_id": self.client_id,
            **self.options,
        }

    def producer_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for AIOKafkaProducer."""
        kwargs = self._base_kwargs()
        if self.key_serializer is not None:
            kwargs["key_serializer"] = _none_passthrough(self.key_serializer)
        if self.value_serializer is not None:
            kwargs["value_serializer"] = _none_passthrough(self.value_serializer)
        return kwargs

    def consumer_kwargs(
        self, group_id: str | None = None, *, manual_commit: bool = False
    ) -> dict[str, Any]:
        """Keyword arguments for AIOKafkaConsumer.

        Args:
            group_id: Consumer group; omitted when None.
            manual_commit: Disable auto-commit because acknowledgment handles
                own the commits.
        """
        kwargs = self._base_kwargs()
        if group_id is not None:
            kwargs["group_id"] = group_id
        if manual_commit:
            kwargs["enable_auto_commit"] = False
        if self.key_deserializer is not None:
            kwargs["key_deserializer"] = _none_passthrough(self.key_deserializer)
        if self.value_deserializer is not None:
            kwargs["value_deserializer"] = _none_passthrough(self.value_deserializer)
        return kwargs


async def cluster_reachable(settings: KafkaClientSettings) -> bool:
    """Return True if the cluster answers a topic listing."""
    try:
        admin = AIOKafkaAdminClient(
            bootstrap_servers=settings.bootstrap_servers,
            client_id=settings.client_id,
        )
        await admin.start()
        try:
            await admin.list_topics()
            return True
        finally:
            await admin.close()
    except Exception:  # noqa: BLE001
        logger.warning("Kafka health check failed for %s", settings.bootstrap_servers)
        return False
