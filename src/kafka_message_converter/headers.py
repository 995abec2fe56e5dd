"""Metadata key vocabulary shared by inbound and outbound conversion."""

from __future__ import annotations

from typing import ClassVar


class KafkaHeaders:
    """Header names used in :class:`MessageEnvelope` metadata.

    ``RECEIVED_*``, ``OFFSET`` and ``TIMESTAMP_TYPE`` are set on inbound
    envelopes; ``TOPIC``, ``PARTITION_ID``, ``MESSAGE_KEY`` and ``TIMESTAMP``
    are read when building outbound records.
    """

    # inbound
    RECEIVED_MESSAGE_KEY: ClassVar[str] = "received-key"
    RECEIVED_TOPIC: ClassVar[str] = "received-topic"
    RECEIVED_PARTITION_ID: ClassVar[str] = "received-partition"
    OFFSET: ClassVar[str] = "offset"
    TIMESTAMP_TYPE: ClassVar[str] = "timestamp-type"
    RECEIVED_TIMESTAMP: ClassVar[str] = "received-timestamp"
    ACKNOWLEDGMENT: ClassVar[str] = "acknowledgment"

    # outbound
    TOPIC: ClassVar[str] = "topic"
    PARTITION_ID: ClassVar[str] = "partition"
    MESSAGE_KEY: ClassVar[str] = "key"
    TIMESTAMP: ClassVar[str] = "timestamp"

    RECEIVED: ClassVar[tuple[str, ...]] = (
        RECEIVED_MESSAGE_KEY,
        RECEIVED_TOPIC,
        RECEIVED_PARTITION_ID,
        OFFSET,
        TIMESTAMP_TYPE,
        RECEIVED_TIMESTAMP,
    )
