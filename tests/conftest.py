"""Pytest fixtures for converter tests."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

# Ensure the package is importable when running pytest without pip install -e .
_src = Path(__file__).resolve().parent.parent / "src"
if _src.is_dir() and str(_src) not in sys.path:
    sys.path.insert(0, str(_src))


@dataclass(frozen=True)
class FakeConsumerRecord:
    """Stand-in for aiokafka.structs.ConsumerRecord."""

    topic: str
    partition: int
    offset: int
    timestamp: int
    timestamp_type: Any
    key: Any
    value: Any


@pytest.fixture
def make_record() -> Any:
    def _make(**overrides: Any) -> FakeConsumerRecord:
        fields: dict[str, Any] = {
            "topic": "orders",
            "partition": 2,
            "offset": 55,
            "timestamp": 1000,
            "timestamp_type": 0,
            "key": "k1",
            "value": "hello",
        }
        fields.update(overrides)
        return FakeConsumerRecord(**fields)

    return _make


@pytest.fixture
def settings() -> Any:
    from kafka_message_converter.kafka.settings import KafkaClientSettings

    return KafkaClientSettings(bootstrap_servers="broker:9092", client_id="tests")
