"""aiokafka transport adapters built on MessagingMessageConverter."""

from __future__ import annotations

from .consumer import KafkaEnvelopeConsumer
from .publisher import KafkaEnvelopePublisher
from .settings import KafkaClientSettings, cluster_reachable

__all__ = [
    "KafkaClientSettings",
    "KafkaEnvelopeConsumer",
    "KafkaEnvelopePublisher",
    "cluster_reachable",
]
