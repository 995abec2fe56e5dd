"""kafka-message-converter — Kafka records to transport-neutral envelopes and back."""

from __future__ import annotations

from .config import ConverterConfig
from .converter import MessagingMessageConverter
from .envelope import ID_VALUE_NONE, NO_TIMESTAMP, MessageEnvelope
from .exceptions import (
    ConverterError,
    HeaderTypeError,
    MessagingConnectionError,
    MessagingError,
    MissingTopicError,
)
from .headers import KafkaHeaders
from .id_generator import IIDGenerator, UUID4Generator
from .null import KAFKA_NULL, KafkaNull, is_kafka_null
from .ports import Acknowledgment, RecordMessageConverter
from .records import ConsumerRecordLike, ProducerRecord, TimestampType

__all__ = [
    "ID_VALUE_NONE",
    "KAFKA_NULL",
    "NO_TIMESTAMP",
    "Acknowledgment",
    "ConsumerRecordLike",
    "ConverterConfig",
    "ConverterError",
    "HeaderTypeError",
    "IIDGenerator",
    "KafkaHeaders",
    "KafkaNull",
    "MessageEnvelope",
    "MessagingConnectionError",
    "MessagingError",
    "MessagingMessageConverter",
    "MissingTopicError",
    "ProducerRecord",
    "RecordMessageConverter",
    "TimestampType",
    "UUID4Generator",
    "is_kafka_null",
]
